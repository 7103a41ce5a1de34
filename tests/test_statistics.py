"""Statistics engine: the five descriptive measures and rounding."""

from __future__ import annotations

import pytest

from station import InvalidInputError, StatisticsSummary, summarize
from station.statistics import mean, median, midrange, mode, round_half_up, value_range
from tests.conftest import get_test_logger

logger = get_test_logger(__name__)
logger.info("Starting tests for statistics module")


def test_summary_without_repeated_values() -> None:
    summary = summarize([90.0, 95.0, 100.0])

    assert summary == StatisticsSummary(count=3, mean=95.0, median=95.0, mode=90.0, range=10.0, midrange=95.0)


def test_summary_with_repeated_value() -> None:
    summary = summarize([10.0, 10.0, 20.0])

    assert summary.as_dict() == {
        "count": 3,
        "mean": 13.33,
        "median": 10.0,
        "mode": 10.0,
        "range": 10.0,
        "midrange": 15.0,
    }


def test_median_even_count_averages_middle_pair() -> None:
    assert median([4.0, 1.0, 3.0, 2.0]) == 2.5


def test_median_odd_count_is_middle_value() -> None:
    assert median([300.0, 100.0, 200.0]) == 200.0


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ([1.0, 2.0, 2.0], 2.0),
        ([20.0, 10.0, 10.0, 20.0], 20.0),
        ([3.0, 1.0, 2.0], 3.0),
        ([5.0, 7.0, 7.0, 5.0, 9.0, 9.0], 5.0),
    ],
)
def test_mode_prefers_first_seen_on_ties(values: list[float], expected: float) -> None:
    """Equally frequent values resolve to the one appearing first."""
    assert mode(values) == expected


def test_range_and_midrange() -> None:
    values = [250.5, 100.0, 300.0, 40.0]
    assert value_range(values) == 260.0
    assert midrange(values) == 170.0
    assert mean(values) == pytest.approx(172.625)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (13.333333, 13.33),
        (0.125, 0.13),
        (-0.125, -0.13),
        (2.675, 2.68),
        (1.005, 1.01),
        (166.665, 166.67),
        (95.0, 95.0),
    ],
)
def test_round_half_up(value: float, expected: float) -> None:
    assert round_half_up(value) == expected


@pytest.mark.parametrize("func", [mean, median, mode, value_range, midrange, summarize])
def test_empty_input_is_rejected(func) -> None:
    with pytest.raises(InvalidInputError):
        func([])


def test_round_half_up_keeps_large_values() -> None:
    """Values beyond the default decimal precision still round."""
    assert round_half_up(3.333333333333333e29) == 3.333333333333333e29
    assert round_half_up(1e300) == 1e300


def test_summary_of_huge_readings() -> None:
    summary = summarize([1e30, 2e30])

    assert summary.mean == 1.5e30
    assert summary.median == 1.5e30
    assert summary.range == 1e30
    assert summary.midrange == 1.5e30
