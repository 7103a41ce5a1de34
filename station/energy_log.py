"""Append-only text log of energy readings.

Every collected reading becomes one line::

    2024-01-01 12:00:00.123, Solar Energy: 100.0 kW

Lines are appended in collection order and never rewritten. Sources sampled
in the same collection share a timestamp.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from .errors import LogParseError

LOGGER = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"
ENERGY_UNIT = "kW"

_LINE_RE = re.compile(
    r"^(?P<timestamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}), "
    r"(?P<source>.+?): "
    r"(?P<energy>\S+) " + ENERGY_UNIT + r"$"
)


@dataclass(frozen=True)
class EnergyReading:
    timestamp: datetime
    source_name: str
    energy: float


def truncate_to_millis(timestamp: datetime) -> datetime:
    return timestamp.replace(microsecond=timestamp.microsecond // 1000 * 1000)


def format_timestamp(timestamp: datetime) -> str:
    # strftime("%Y") drops leading zeros for years below 1000 on some platforms.
    return (
        f"{timestamp.year:04d}-{timestamp.month:02d}-{timestamp.day:02d} "
        f"{timestamp.hour:02d}:{timestamp.minute:02d}:{timestamp.second:02d}.{timestamp.microsecond // 1000:03d}"
    )


def format_line(reading: EnergyReading) -> str:
    """Render ``reading`` as a log line without the trailing newline."""
    return f"{format_timestamp(reading.timestamp)}, {reading.source_name}: {reading.energy!r} {ENERGY_UNIT}"


def parse_line(line: str, line_no: Optional[int] = None, path: Optional[Path] = None) -> EnergyReading:
    """Parse one log line, raising :class:`LogParseError` when it is malformed."""
    text = line.rstrip("\r\n")
    match = _LINE_RE.match(text)
    if match is None:
        raise LogParseError("line does not match '<timestamp>, <source>: <energy> kW'", path=path, line_no=line_no, line=text)
    try:
        timestamp = datetime.strptime(match.group("timestamp"), TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise LogParseError(f"invalid timestamp: {exc}", path=path, line_no=line_no, line=text) from exc
    try:
        energy = float(match.group("energy"))
    except ValueError as exc:
        raise LogParseError("energy value is not numeric", path=path, line_no=line_no, line=text) from exc
    return EnergyReading(timestamp=timestamp, source_name=match.group("source"), energy=energy)


class EnergyLog:
    """Line-oriented reading store backed by a single text file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    @property
    def exists(self) -> bool:
        return self.path.exists()

    def record(self, timestamp: datetime, readings: Iterable[Tuple[str, float]]) -> List[EnergyReading]:
        """Append one line per ``(source_name, energy)`` pair stamped with ``timestamp``."""
        stamp = truncate_to_millis(timestamp)
        entries = [EnergyReading(stamp, name, float(energy)) for name, energy in readings]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as handle:
            for entry in entries:
                handle.write(format_line(entry) + "\n")
        LOGGER.info("Recorded %d readings at %s into %s", len(entries), format_timestamp(stamp), self.path)
        return entries

    def read_all(self) -> List[EnergyReading]:
        if not self.path.exists():
            LOGGER.debug("Energy log %s not found; no data collected yet", self.path)
            return []
        readings: List[EnergyReading] = []
        with self.path.open("r", encoding="utf-8") as handle:
            for line_no, line in enumerate(handle, start=1):
                if not line.strip():
                    continue
                try:
                    readings.append(parse_line(line, line_no=line_no, path=self.path))
                except LogParseError:
                    LOGGER.error("Malformed entry at %s:%d", self.path, line_no)
                    raise
        return readings
