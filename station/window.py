"""Time window selection over logged readings."""
from __future__ import annotations

from datetime import datetime
from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd

from .energy_log import EnergyReading
from .errors import InvalidInputError

WINDOW_PRESETS: Dict[str, pd.DateOffset] = {
    "hour": pd.DateOffset(hours=1),
    "day": pd.DateOffset(days=1),
    "week": pd.DateOffset(weeks=1),
    "month": pd.DateOffset(months=1),
}


def filter_window(readings: Iterable[EnergyReading], start: datetime, end: datetime) -> List[EnergyReading]:
    """Keep readings with ``start <= timestamp <= end``, preserving order."""
    return [reading for reading in readings if start <= reading.timestamp <= end]


def window_start(preset: str, now: datetime) -> datetime:
    try:
        offset = WINDOW_PRESETS[preset]
    except KeyError as exc:
        choices = ", ".join(WINDOW_PRESETS)
        raise InvalidInputError(f"Unknown time window '{preset}' (expected one of: {choices})") from exc
    # Month arithmetic clamps to the last day, e.g. 31 Mar -> 28/29 Feb.
    return (pd.Timestamp(now) - offset).to_pydatetime()


def preset_window(preset: str, now: Optional[datetime] = None) -> Tuple[datetime, datetime]:
    end = now or datetime.now()
    return window_start(preset, end), end
