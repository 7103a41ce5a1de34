"""Descriptive statistics over energy readings."""
from __future__ import annotations

import math
from collections import Counter
from dataclasses import asdict, dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Dict, Sequence

from .errors import InvalidInputError


def _require_values(values: Sequence[float]) -> None:
    if len(values) == 0:
        raise InvalidInputError("Statistics require at least one reading")


def mean(values: Sequence[float]) -> float:
    _require_values(values)
    return sum(values) / len(values)


def median(values: Sequence[float]) -> float:
    _require_values(values)
    ordered = sorted(values)
    n = len(ordered)
    if n % 2 == 0:
        return (ordered[n // 2 - 1] + ordered[n // 2]) / 2.0
    return ordered[n // 2]


def mode(values: Sequence[float]) -> float:
    """Most frequent value; among equally frequent values the first seen wins."""
    _require_values(values)
    counts = Counter(values)
    highest = max(counts.values())
    # Counter keeps first-insertion order.
    return next(value for value, count in counts.items() if count == highest)


def value_range(values: Sequence[float]) -> float:
    _require_values(values)
    return max(values) - min(values)


def midrange(values: Sequence[float]) -> float:
    _require_values(values)
    return (max(values) + min(values)) / 2.0


def round_half_up(value: float, places: int = 2) -> float:
    """Round the shortest decimal form of ``value`` half-up to ``places`` digits.

    ``2.675`` rounds to ``2.68`` even though its binary value sits just below.
    """
    if not math.isfinite(value):
        return value
    shortest = Decimal(repr(value))
    with localcontext() as ctx:
        # Room for every integer digit plus the kept fraction.
        ctx.prec = max(28, shortest.adjusted() + places + 2)
        return float(shortest.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class StatisticsSummary:
    """Rounded statistics of one window of readings."""
    count: int
    mean: float
    median: float
    mode: float
    range: float
    midrange: float

    @classmethod
    def from_values(cls, values: Sequence[float], places: int = 2) -> "StatisticsSummary":
        values = list(values)
        return cls(
            count=len(values),
            mean=round_half_up(mean(values), places),
            median=round_half_up(median(values), places),
            mode=round_half_up(mode(values), places),
            range=round_half_up(value_range(values), places),
            midrange=round_half_up(midrange(values), places),
        )

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def summarize(values: Sequence[float], places: int = 2) -> StatisticsSummary:
    return StatisticsSummary.from_values(values, places)
