"""textseq command-line interface."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from textseq.core.dynamic_sequence import DynamicSequence
from textseq.utils.config import RunConfig, load_run_config
from textseq.utils.logging import get_logger

DEMO_VALUES = ["Java", "Python", "C", "C++", "Fortran"]
DEMO_LOOKUP = "C"

_LOGGER = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="textseq CLI")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("demo", help="Show the built-in five-language example")

    run_parser = subparsers.add_parser("run", help="Build a container from a config file")
    run_parser.add_argument("config", help="Path to YAML/JSON config file")
    run_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the summary as JSON instead of plain lines",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "demo":
        return _run_demo()
    elif args.command == "run":
        return _run_from_config(Path(args.config), as_json=args.json)

    parser.print_help()
    return 0


def _run_demo() -> int:
    seq = DynamicSequence.from_slice(list(DEMO_VALUES))
    print(seq.to_display_string())
    print(seq.index_of(DEMO_LOOKUP))
    print(seq.usage())
    return 0


def _run_from_config(path: Path, *, as_json: bool = False) -> int:
    config = load_run_config(path)
    seq = _build_sequence(config)
    _LOGGER.info("Built sequence of %d values from %s", len(seq), path)

    summary: dict[str, object] = {
        "display": seq.to_display_string(),
        "length": len(seq),
        "capacity": seq.capacity,
        "usage": seq.usage(),
    }
    if config.lookup is not None:
        summary["index_of"] = seq.index_of(config.lookup)

    if as_json:
        print(json.dumps(summary, indent=2))
    else:
        for key, value in summary.items():
            print(f"{key}: {value}")
    return 0


def _build_sequence(config: RunConfig) -> DynamicSequence:
    seq = DynamicSequence(config.capacity)
    for value in config.values:
        seq.insert(value)
    return seq


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
