"""Configuration for the energy station."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Type

import yaml

from .errors import StationError
from .sources import EnergySource, HydroPower, SolarPanel, WindTurbine

LOGGER = logging.getLogger(__name__)

CONFIG_ENV = "STATION_CONFIG"
DEFAULT_CONFIG_PATH = Path("config") / "station.yaml"
DEFAULT_DATA_FILE = Path("energy_data.txt")
DEFAULT_LOG_DIR = Path("logs")

SOURCE_KINDS: Dict[str, Type[EnergySource]] = {
    cls.KIND: cls for cls in (SolarPanel, WindTurbine, HydroPower)
}


class ConfigurationError(StationError):
    """Raised when the configuration file is invalid."""


@dataclass(slots=True)
class SourceSpec:
    name: str
    kind: str = ""
    initial: float = 0.0
    threshold: float = 0.0

    def build(self) -> EnergySource:
        cls = SOURCE_KINDS.get(self.kind, EnergySource)
        return cls(self.name, initial_energy=self.initial, threshold=self.threshold, kind=self.kind or None)


def _default_specs() -> List[SourceSpec]:
    return [SourceSpec(cls.NAME, cls.KIND, cls.INITIAL_ENERGY, cls.THRESHOLD) for cls in (SolarPanel, WindTurbine, HydroPower)]


@dataclass(slots=True)
class Settings:
    data_file: Path = DEFAULT_DATA_FILE
    log_dir: Path = DEFAULT_LOG_DIR
    sources: List[SourceSpec] = field(default_factory=_default_specs)
    config_path: Optional[Path] = None

    def build_sources(self) -> List[EnergySource]:
        return [spec.build() for spec in self.sources]


def _load_file(path: Path) -> Dict[str, object]:
    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    try:
        if suffix in {".yaml", ".yml"}:
            data = yaml.safe_load(text)
        elif suffix == ".json":
            data = json.loads(text)
        else:
            raise ConfigurationError("Unsupported configuration format; use YAML or JSON")
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"Invalid configuration format in {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration root in {path} must be a mapping")
    return data


def _coerce_path(value: object, base_dir: Path) -> Path:
    candidate = Path(str(value)).expanduser()
    if candidate.is_absolute():
        return candidate
    return base_dir / candidate


def _parse_sources(raw: object) -> List[SourceSpec]:
    if not isinstance(raw, list) or not raw:
        raise ConfigurationError("`sources` must be a non-empty list")
    specs: List[SourceSpec] = []
    seen = set()
    for position, entry in enumerate(raw, start=1):
        if not isinstance(entry, dict) or not str(entry.get("name") or "").strip():
            raise ConfigurationError(f"Source #{position} requires a `name`")
        name = str(entry["name"])
        if name in seen:
            raise ConfigurationError(f"Duplicate source name `{name}`")
        seen.add(name)
        kind = str(entry.get("kind", ""))
        defaults = SOURCE_KINDS.get(kind, EnergySource)
        try:
            initial = float(entry.get("initial", defaults.INITIAL_ENERGY))
            threshold = float(entry.get("threshold", defaults.THRESHOLD))
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Source `{name}` has a non-numeric initial level or threshold") from exc
        specs.append(SourceSpec(name=name, kind=kind, initial=initial, threshold=threshold))
    return specs


def load_settings(path: Optional[Path | str] = None) -> Settings:
    """Load settings from ``path``, ``$STATION_CONFIG`` or ``config/station.yaml``.

    Falls back to built-in defaults when no configuration file exists. An
    explicitly requested file that is missing is an error.
    """
    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file {config_path} does not exist")
    else:
        candidates: List[Path] = []
        env_path = os.getenv(CONFIG_ENV)
        if env_path:
            candidates.append(Path(env_path))
        candidates.append(DEFAULT_CONFIG_PATH)
        config_path = next((candidate for candidate in candidates if candidate.exists()), None)

    if config_path is None:
        LOGGER.debug("No configuration file found; using defaults")
        return Settings()

    raw = _load_file(config_path)
    base_dir = config_path.parent.resolve()
    settings = Settings(config_path=config_path)
    if raw.get("data_file"):
        settings.data_file = _coerce_path(raw["data_file"], base_dir)
    if raw.get("log_dir"):
        settings.log_dir = _coerce_path(raw["log_dir"], base_dir)
    if "sources" in raw:
        settings.sources = _parse_sources(raw["sources"])
    LOGGER.debug("Loaded configuration from %s", config_path)
    return settings
