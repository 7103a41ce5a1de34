"""Power plant aggregate owning the sources and their reading log."""
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd

from .energy_log import EnergyLog, EnergyReading
from .errors import InvalidInputError
from .settings import Settings
from .sources import EnergySource, default_sources
from .statistics import StatisticsSummary
from .window import filter_window

LOGGER = logging.getLogger(__name__)


class PowerPlant:
    """Ordered set of energy sources plus the only handle on the energy log."""

    def __init__(self, sources: Optional[Sequence[EnergySource]] = None, log: EnergyLog | Path | str = "energy_data.txt") -> None:
        self._sources: List[EnergySource] = list(sources) if sources is not None else default_sources()
        self._log = log if isinstance(log, EnergyLog) else EnergyLog(log)

    @classmethod
    def from_settings(cls, settings: Settings, data_file: Optional[Path] = None) -> "PowerPlant":
        return cls(settings.build_sources(), EnergyLog(data_file or settings.data_file))

    @property
    def log_path(self) -> Path:
        return self._log.path

    def sources(self) -> List[EnergySource]:
        return list(self._sources)

    def source(self, index: int) -> EnergySource:
        if not 0 <= index < len(self._sources):
            raise InvalidInputError(f"Source index {index + 1} is out of range (1-{len(self._sources)})")
        return self._sources[index]

    def collect(self, now: Optional[datetime] = None) -> List[EnergyReading]:
        """Sample every source once and append the readings under one timestamp."""
        timestamp = now or datetime.now()
        return self._log.record(timestamp, [(s.source_name, s.generate_energy()) for s in self._sources])

    def history(self) -> List[EnergyReading]:
        return self._log.read_all()

    def filter(self, start: datetime, end: datetime) -> List[EnergyReading]:
        return filter_window(self.history(), start, end)

    def analyze(self, start: datetime, end: datetime) -> Optional[StatisticsSummary]:
        window = self.filter(start, end)
        if not window:
            LOGGER.info("No readings between %s and %s", start, end)
            return None
        return StatisticsSummary.from_values([reading.energy for reading in window])

    def storage_capacity(self, readings: Optional[Sequence[EnergyReading]] = None) -> Dict[str, float]:
        """Total logged energy per configured source, in source order."""
        readings = self.history() if readings is None else readings
        names = [source.source_name for source in self._sources]
        frame = pd.DataFrame(
            {
                "source_name": pd.Series([reading.source_name for reading in readings], dtype=object),
                "energy": pd.Series([reading.energy for reading in readings], dtype=float),
            }
        )
        totals = frame.groupby("source_name")["energy"].sum().reindex(names, fill_value=0.0)
        return {name: float(total) for name, total in totals.items()}

    def check_issues(self) -> List[Tuple[EnergySource, Optional[str]]]:
        return [(source, source.check_for_issues()) for source in self._sources]
