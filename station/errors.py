"""Error types raised by the station core."""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class StationError(Exception):
    """Base class for station failures."""


class InvalidInputError(StationError, ValueError):
    """Raised for unusable caller input (empty data sets, bad indices, unknown windows)."""


class LogParseError(StationError, ValueError):
    """Raised when a line of the energy log does not follow the line format."""

    def __init__(self, message: str, *, path: Optional[Path] = None, line_no: Optional[int] = None, line: str = "") -> None:
        self.path = path
        self.line_no = line_no
        self.line = line
        location = ""
        if path is not None and line_no is not None:
            location = f"{path}:{line_no}: "
        elif line_no is not None:
            location = f"line {line_no}: "
        super().__init__(f"{location}{message} ({line!r})")
