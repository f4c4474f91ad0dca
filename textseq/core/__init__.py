"""Core container types."""

from .dynamic_sequence import DynamicSequence

__all__ = ["DynamicSequence"]
