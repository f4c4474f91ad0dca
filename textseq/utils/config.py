"""Configuration utilities."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final

import yaml

DEFAULT_CAPACITY: Final = 4


@dataclass(slots=True)
class RunConfig:
    """Inputs for building a container from a config file."""

    values: list[str] = field(default_factory=list)
    capacity: int = DEFAULT_CAPACITY
    lookup: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "values": list(self.values),
            "capacity": self.capacity,
            "lookup": self.lookup,
        }


def load_run_config(path: Path) -> RunConfig:
    """Parse a JSON or YAML run config.

    Files ending in ``.json`` are read with :mod:`json`; every other suffix is
    handed to ``yaml.safe_load``.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    if path.suffix.lower() == ".json":
        data = json.loads(path.read_text())
    else:
        data = yaml.safe_load(path.read_text())

    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")
    values = data.get("values")
    if values is None:
        raise ValueError("values is required")
    if not isinstance(values, list):
        raise ValueError("values must be a list")

    capacity = data.get("capacity", DEFAULT_CAPACITY)
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise ValueError(f"capacity must be an integer, got {capacity!r}")

    lookup = data.get("lookup")
    return RunConfig(
        values=[str(v) for v in values if v is not None],
        capacity=capacity,
        lookup=None if lookup is None else str(lookup),
    )
