"""Shared helper utilities for the station test-suite."""

from .data import build_readings, write_log_lines
from .fs import ensure_directory, read_lines

__all__ = [
    "build_readings",
    "write_log_lines",
    "ensure_directory",
    "read_lines",
]
