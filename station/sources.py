"""Renewable energy sources monitored by the station."""
from __future__ import annotations

import logging
from typing import List, Optional

LOGGER = logging.getLogger(__name__)


class EnergySource:
    """A source reporting its current output level in kW.

    Variants declare ``NAME``, ``INITIAL_ENERGY`` and ``THRESHOLD`` as class
    attributes. Sources described in configuration pass the same values to
    the constructor instead.
    """

    NAME: str = ""
    KIND: str = ""
    INITIAL_ENERGY: float = 0.0
    THRESHOLD: float = 0.0

    def __init__(
        self,
        name: Optional[str] = None,
        *,
        initial_energy: Optional[float] = None,
        threshold: Optional[float] = None,
        kind: Optional[str] = None,
    ) -> None:
        self._name = name or self.NAME
        if not self._name.strip():
            raise ValueError("An energy source needs a non-blank name")
        self._kind = kind or self.KIND or type(self).__name__
        self._threshold = float(self.THRESHOLD if threshold is None else threshold)
        self._energy = float(self.INITIAL_ENERGY if initial_energy is None else initial_energy)

    @property
    def source_name(self) -> str:
        return self._name

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def threshold(self) -> float:
        return self._threshold

    def generate_energy(self) -> float:
        return self._energy

    def set_energy(self, new_energy: float) -> None:
        # Any value is accepted, negative output included.
        LOGGER.info("%s level changed %s -> %s kW", self._name, self._energy, new_energy)
        self._energy = float(new_energy)

    def issue_message(self) -> str:
        label = self._name.split()[0].lower()
        return f"Low {label} energy output detected."

    def check_for_issues(self) -> Optional[str]:
        if self.generate_energy() < self._threshold:
            return self.issue_message()
        return None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(source_name={self._name!r}, "
            f"energy={self._energy!r}, threshold={self._threshold!r})"
        )


class SolarPanel(EnergySource):
    NAME = "Solar Energy"
    KIND = "SolarPanel"
    INITIAL_ENERGY = 100.0
    THRESHOLD = 50.0


class WindTurbine(EnergySource):
    NAME = "Wind Energy"
    KIND = "WindTurbine"
    INITIAL_ENERGY = 200.0
    THRESHOLD = 100.0


class HydroPower(EnergySource):
    NAME = "Hydro Energy"
    KIND = "HydroPower"
    INITIAL_ENERGY = 300.0
    THRESHOLD = 200.0


def default_sources() -> List[EnergySource]:
    """Return fresh Solar, Wind and Hydro sources in display order."""
    return [SolarPanel(), WindTurbine(), HydroPower()]
