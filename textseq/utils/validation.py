"""Validation helpers for textseq."""

from __future__ import annotations

from typing import TypeGuard


def is_present(value: object) -> TypeGuard[str]:
    """Return True when ``value`` is non-empty text.

    ``None`` and ``""`` are both treated as absent: they are never stored,
    never matched by lookups and never counted as a hit.
    """
    return isinstance(value, str) and value != ""
