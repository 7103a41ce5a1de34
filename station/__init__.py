"""Renewable energy station: sources, reading log and statistics."""
from __future__ import annotations

from .energy_log import EnergyLog, EnergyReading, format_line, parse_line
from .errors import InvalidInputError, LogParseError, StationError
from .plant import PowerPlant
from .settings import ConfigurationError, Settings, load_settings
from .sources import EnergySource, HydroPower, SolarPanel, WindTurbine, default_sources
from .statistics import StatisticsSummary, summarize
from .window import filter_window, preset_window

__all__ = [
    "ConfigurationError",
    "EnergyLog",
    "EnergyReading",
    "EnergySource",
    "HydroPower",
    "InvalidInputError",
    "LogParseError",
    "PowerPlant",
    "Settings",
    "SolarPanel",
    "StationError",
    "StatisticsSummary",
    "WindTurbine",
    "default_sources",
    "filter_window",
    "format_line",
    "load_settings",
    "parse_line",
    "preset_window",
    "summarize",
]
