"""Common types and constants shared across the calendar components.

This module contains the fundamental types used throughout the calendar layer:
the clock unit constants, the representable range, the Weekday and Month
enums, and the plain value tuples returned by the conversions.

All tables are module-level tuples built once at import time.
"""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple

from ..exceptions import InvalidArgumentError

# =============================================================================
# Clock Units
# =============================================================================


SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR  # 3600
SECONDS_PER_DAY = SECONDS_PER_HOUR * HOURS_PER_DAY  # 86400

DAYS_PER_WEEK = 7
MONTHS_PER_YEAR = 12

# =============================================================================
# Gregorian Cycle Lengths
# =============================================================================


DAYS_PER_YEAR = 365
DAYS_PER_4_YEARS = 4 * DAYS_PER_YEAR + 1  # 1461
DAYS_PER_100_YEARS = 25 * DAYS_PER_4_YEARS - 1  # 36524 (first year not leap)
DAYS_PER_400_YEARS = 4 * DAYS_PER_100_YEARS + 1  # 146097 (first year leap again)

# Month lengths for a common year, index 0 unused so months are 1-indexed
DAYS_IN_MONTH: tuple[int, ...] = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Cumulative days before the first of each month in a common year, index 0 unused
DAYS_BEFORE_MONTH: tuple[int, ...] = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

# =============================================================================
# Epoch and Representable Range
# =============================================================================


EPOCH_YEAR = 1970
DAYS_BEFORE_EPOCH = 719_162  # Days from 0001-01-01 to 1970-01-01

MIN_YEAR = -9999
MAX_YEAR = 9999

MIN_DAYS = -4_371_587  # Day offset of -9999-01-01
MAX_DAYS = 2_932_896  # Day offset of 9999-12-31

MIN_SECONDS = MIN_DAYS * SECONDS_PER_DAY  # -9999-01-01T00:00:00
MAX_SECONDS = MAX_DAYS * SECONDS_PER_DAY + SECONDS_PER_DAY - 1  # 9999-12-31T23:59:59

# =============================================================================
# Enumerations
# =============================================================================


class Weekday(IntEnum):
    """Day of the week, numbered from Sunday.

    1970-01-01 (epoch day 0) is a THURSDAY.
    """

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @property
    def full_name(self) -> str:
        """English name, e.g. "Thursday"."""
        return self.name.capitalize()

    @property
    def abbreviation(self) -> str:
        """Three-letter English abbreviation, e.g. "Thu"."""
        return self.full_name[:3]

    def __str__(self) -> str:
        return self.full_name


class Month(IntEnum):
    """Month of the year; the value is the 1-based month index."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def from_index(cls, index: int) -> Month:
        """Look up a month by its 1-based index.

        Raises:
            InvalidArgumentError: If index is not in 1-12
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidArgumentError(f"Invalid month index type: {type(index).__name__}")
        if not 1 <= index <= MONTHS_PER_YEAR:
            raise InvalidArgumentError(f"Invalid month: {index} (expected 1-12)")
        return cls(index)

    @property
    def full_name(self) -> str:
        """English name, e.g. "January"."""
        return self.name.capitalize()

    @property
    def abbreviation(self) -> str:
        """Three-letter English abbreviation, e.g. "Jan"."""
        return self.full_name[:3]

    def __str__(self) -> str:
        return self.full_name


# =============================================================================
# Value Tuples
# =============================================================================


class CalendarDate(NamedTuple):
    """Proleptic Gregorian date."""

    year: int
    month: int  # 1-12
    day: int  # 1-days_in_month(year, month)


class TimeOfDay(NamedTuple):
    """Wall-clock time without sub-second part or leap second."""

    hour: int  # 0-23
    minute: int  # 0-59
    second: int  # 0-59


class CalendarDateTime(NamedTuple):
    """Date and time of day, isomorphic to one epoch offset in seconds."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    @property
    def date(self) -> CalendarDate:
        return CalendarDate(self.year, self.month, self.day)

    @property
    def time(self) -> TimeOfDay:
        return TimeOfDay(self.hour, self.minute, self.second)


class Breakdown(NamedTuple):
    """Everything the forward conversion derives from one epoch offset."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    weekday: Weekday
    day_of_year: int  # 1-based
    is_leap_year: bool

    def to_components(self) -> CalendarDateTime:
        """Drop the derived fields, keeping the six calendar fields."""
        return CalendarDateTime(self.year, self.month, self.day, self.hour, self.minute, self.second)
