"""Utility exports."""

from .config import DEFAULT_CAPACITY, RunConfig, load_run_config
from .logging import get_logger
from .validation import is_present

__all__ = [
    "DEFAULT_CAPACITY",
    "RunConfig",
    "load_run_config",
    "get_logger",
    "is_present",
]
