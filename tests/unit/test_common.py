"""Unit tests for calendar constants, enums and value tuples."""

from __future__ import annotations

import pytest

from src.datetimeutils.calendar.common import (
    DAYS_BEFORE_EPOCH,
    DAYS_PER_4_YEARS,
    DAYS_PER_100_YEARS,
    DAYS_PER_400_YEARS,
    MAX_DAYS,
    MAX_SECONDS,
    MAX_YEAR,
    MIN_DAYS,
    MIN_SECONDS,
    MIN_YEAR,
    SECONDS_PER_DAY,
    Breakdown,
    CalendarDateTime,
    Month,
    Weekday,
)
from src.datetimeutils.calendar.gregorian import days_before_year, days_from_date, days_in_year
from src.datetimeutils.exceptions import InvalidArgumentError

# =============================================================================
# Test Constants - Duplicated from src for test isolation
# =============================================================================
# If these values change in production code, tests will fail and alert us

TEST_SECONDS_PER_DAY = 86400
TEST_MAX_SECONDS = 253402300799  # 9999-12-31T23:59:59
TEST_MIN_SECONDS = -377705116800  # -9999-01-01T00:00:00


class TestConstants:
    """Tests for unit, cycle and range constants."""

    def test_clock_units(self) -> None:
        assert SECONDS_PER_DAY == TEST_SECONDS_PER_DAY

    def test_cycle_lengths(self) -> None:
        """Test that the block lengths agree with summed year lengths."""
        assert DAYS_PER_4_YEARS == sum(days_in_year(y) for y in range(1, 5))
        assert DAYS_PER_100_YEARS == sum(days_in_year(y) for y in range(1, 101))
        assert DAYS_PER_400_YEARS == sum(days_in_year(y) for y in range(1, 401))

    def test_epoch_offset(self) -> None:
        assert DAYS_BEFORE_EPOCH == days_before_year(1970)

    def test_range(self) -> None:
        """Test that the range constants are the offsets of the boundary dates."""
        assert days_from_date(MIN_YEAR, 1, 1) == MIN_DAYS
        assert days_from_date(MAX_YEAR, 12, 31) == MAX_DAYS
        assert MIN_SECONDS == TEST_MIN_SECONDS
        assert MAX_SECONDS == TEST_MAX_SECONDS


class TestWeekdayEnum:
    """Tests for Weekday."""

    def test_numbering(self) -> None:
        assert [int(day) for day in Weekday] == list(range(7))
        assert Weekday(0) is Weekday.SUNDAY
        assert Weekday(6) is Weekday.SATURDAY

    @pytest.mark.parametrize(
        ("day", "full_name", "abbreviation"),
        [
            (Weekday.SUNDAY, "Sunday", "Sun"),
            (Weekday.WEDNESDAY, "Wednesday", "Wed"),
            (Weekday.THURSDAY, "Thursday", "Thu"),
        ],
        ids=["sunday", "wednesday", "thursday"],
    )
    def test_names(self, day: Weekday, full_name: str, abbreviation: str) -> None:
        assert day.full_name == full_name
        assert day.abbreviation == abbreviation
        assert str(day) == full_name


class TestMonthEnum:
    """Tests for Month."""

    def test_index(self) -> None:
        assert [int(month) for month in Month] == list(range(1, 13))
        assert Month.JANUARY == 1
        assert Month.DECEMBER == 12

    def test_names(self) -> None:
        assert Month.SEPTEMBER.full_name == "September"
        assert Month.SEPTEMBER.abbreviation == "Sep"
        assert str(Month.MAY) == "May"

    def test_from_index(self) -> None:
        assert Month.from_index(2) is Month.FEBRUARY

    @pytest.mark.parametrize("index", [0, 13, -1], ids=["zero", "thirteen", "negative"])
    def test_from_index_out_of_range(self, index: int) -> None:
        with pytest.raises(InvalidArgumentError, match=f"Invalid month: {index}"):
            Month.from_index(index)

    def test_from_index_type(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Invalid month index type: str"):
            Month.from_index("1")  # type: ignore[arg-type]


class TestValueTuples:
    """Tests for CalendarDateTime and Breakdown."""

    def test_plain_tuple_equality(self) -> None:
        assert CalendarDateTime(1970, 1, 1, 0, 0, 0) == (1970, 1, 1, 0, 0, 0)

    def test_breakdown_to_components(self) -> None:
        b = Breakdown(1970, 1, 1, 0, 0, 0, Weekday.THURSDAY, 1, False)
        assert b.to_components() == CalendarDateTime(1970, 1, 1, 0, 0, 0)
