"""textseq public interface.

The container lives under ``textseq.core``; logging, config loading and
validation helpers live under ``textseq.utils``.
"""

from __future__ import annotations

from .core import DynamicSequence

__all__ = [
    "DynamicSequence",
]

__version__ = "0.1.0"
