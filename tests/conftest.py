"""Shared test fixtures for datetimeutils tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

import pytest

# Ordinal of 1970-01-01 in the stdlib's proleptic Gregorian numbering (0001-01-01 = 1)
STDLIB_EPOCH_ORDINAL = date(1970, 1, 1).toordinal()


@pytest.fixture
def stdlib_epoch_days() -> Callable[[int, int, int], int]:
    """Reference day offset for years 1-9999, computed with the stdlib date type."""

    def epoch_days(year: int, month: int, day: int) -> int:
        return date(year, month, day).toordinal() - STDLIB_EPOCH_ORDINAL

    return epoch_days


@pytest.fixture
def fixed_clock() -> Callable[[float], Callable[[], float]]:
    """Build a host clock stub that always returns the given reading."""

    def make_clock(reading: float) -> Callable[[], float]:
        def clock() -> float:
            return reading

        return clock

    return make_clock


@pytest.fixture
def sample_instants() -> dict[str, tuple[int, tuple[int, int, int, int, int, int]]]:
    """Known epoch offsets and their calendar fields."""
    return {
        "epoch": (0, (1970, 1, 1, 0, 0, 0)),
        "one_second_before_epoch": (-1, (1969, 12, 31, 23, 59, 59)),
        "leap_day_2000": (951782400, (2000, 2, 29, 0, 0, 0)),
        "y2k38": (2147483647, (2038, 1, 19, 3, 14, 7)),
        "moon_landing": (-14182940, (1969, 7, 20, 20, 17, 40)),
        "year_one": (-62135596800, (1, 1, 1, 0, 0, 0)),
        "last_second_9999": (253402300799, (9999, 12, 31, 23, 59, 59)),
    }
