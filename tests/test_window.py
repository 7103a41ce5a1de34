"""Time window filtering and presets."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from station import InvalidInputError, filter_window, preset_window
from station.window import window_start
from tests.conftest import get_test_logger
from tests.helpers import build_readings

logger = get_test_logger(__name__)
logger.info("Starting tests for window module")


def test_bounds_are_inclusive() -> None:
    readings = build_readings(periods=5)
    start = datetime(2024, 1, 1, 1, 0)
    end = datetime(2024, 1, 1, 3, 0)

    selected = filter_window(readings, start, end)

    assert selected == [r for r in readings if start <= r.timestamp <= end]
    assert {r.timestamp for r in selected} == {start, datetime(2024, 1, 1, 2, 0), end}
    assert len(selected) == 9


def test_order_is_preserved_and_filter_is_idempotent() -> None:
    readings = list(reversed(build_readings(periods=4)))
    start, end = datetime(2024, 1, 1, 0, 30), datetime(2024, 1, 1, 2, 30)

    once = filter_window(readings, start, end)
    twice = filter_window(once, start, end)

    assert once == twice
    assert [r.timestamp for r in once] == sorted((r.timestamp for r in once), reverse=True)


def test_inverted_window_is_empty() -> None:
    readings = build_readings(periods=2)
    assert filter_window(readings, datetime(2024, 1, 2), datetime(2024, 1, 1)) == []


def test_window_start_presets(fixed_now: datetime) -> None:
    assert window_start("hour", fixed_now) == fixed_now - timedelta(hours=1)
    assert window_start("day", fixed_now) == fixed_now - timedelta(days=1)
    assert window_start("week", fixed_now) == fixed_now - timedelta(weeks=1)


def test_month_window_clamps_to_month_end(fixed_now: datetime) -> None:
    """31 March minus one calendar month lands on 29 February in a leap year."""
    assert window_start("month", fixed_now) == datetime(2024, 2, 29, 12, 0, 0, 250000)


def test_preset_window_ends_now(fixed_now: datetime) -> None:
    start, end = preset_window("day", fixed_now)
    assert end == fixed_now
    assert start == datetime(2024, 3, 30, 12, 0, 0, 250000)
    assert isinstance(start, datetime)


def test_unknown_preset() -> None:
    with pytest.raises(InvalidInputError):
        preset_window("fortnight")
