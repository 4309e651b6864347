"""Proleptic Gregorian calendar arithmetic on whole days.

This module implements the date half of the calendar converter. It provides:

Functions:
    - is_leap_year / days_in_year / days_in_month: month and year lengths
    - days_before_year / days_before_month: cumulative day counts
    - weekday: day of week for an epoch day offset
    - date_from_days: epoch day offset -> (year, month, day)
    - days_from_date: (year, month, day) -> epoch day offset
    - day_of_year_from_days: 1-based ordinal day within the located year

Day offsets count whole days from 1970-01-01 and may be negative. Internally the
offsets are shifted to a 0-based index from 0001-01-01 so that the 400-year
Gregorian cycle lines up with multiples of DAYS_PER_400_YEARS:

    date           index from 0001-01-01     epoch day offset
    ----------     ---------------------     ----------------
    0000-12-31     -1                        -719163
    0001-01-01     0                         -719162
    1970-01-01     719162                    0

Every conversion uses floor division, so negative indexes bucket the same way
as positive ones and no year is visited individually.
"""

from __future__ import annotations

from ..exceptions import DateTimeOverflowError, InvalidArgumentError
from .common import (
    DAYS_BEFORE_EPOCH,
    DAYS_BEFORE_MONTH,
    DAYS_IN_MONTH,
    DAYS_PER_4_YEARS,
    DAYS_PER_100_YEARS,
    DAYS_PER_400_YEARS,
    DAYS_PER_WEEK,
    DAYS_PER_YEAR,
    MAX_DAYS,
    MAX_YEAR,
    MIN_DAYS,
    MIN_YEAR,
    MONTHS_PER_YEAR,
    CalendarDate,
    Weekday,
)

# Weekday of epoch day 0 (1970-01-01)
EPOCH_WEEKDAY = Weekday.THURSDAY

# =============================================================================
# Argument Checks
# =============================================================================


def require_int(name: str, value: object) -> int:
    """Reject anything that is not a plain integer (bool included)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"Invalid {name} type: {type(value).__name__} (expected int)")
    return value


def require_month(month: object) -> int:
    month = require_int("month", month)
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise InvalidArgumentError(f"Invalid month: {month} (expected 1-12)")
    return month


def check_year_range(year: int) -> None:
    """Raise DateTimeOverflowError if year is outside MIN_YEAR..MAX_YEAR."""
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise DateTimeOverflowError(f"Year {year} outside representable range {MIN_YEAR}..{MAX_YEAR}")


def check_days_range(days: int) -> None:
    """Raise DateTimeOverflowError if a day offset is outside MIN_DAYS..MAX_DAYS."""
    if not MIN_DAYS <= days <= MAX_DAYS:
        raise DateTimeOverflowError(f"Day offset {days} outside representable range {MIN_DAYS}..{MAX_DAYS}")


# =============================================================================
# Leap Year and Month Length
# =============================================================================


def is_leap_year(year: int) -> bool:
    """Determine whether a proleptic Gregorian year is a leap year.

    Divisible by 4, and either not divisible by 100 or divisible by 400.
    Year 0 and negative years follow the same rule (year 0 is leap).
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    """Number of days in the year: 366 for leap years, 365 otherwise."""
    return DAYS_PER_YEAR + 1 if is_leap_year(year) else DAYS_PER_YEAR


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month of the given year.

    Args:
        year: Gregorian year (needed for February)
        month: Month 1-12 (int or Month)

    Returns:
        28-31

    Raises:
        InvalidArgumentError: If year is not an int or month is not an int in 1-12
    """
    require_int("year", year)
    month = require_month(month)
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_before_month(year: int, month: int) -> int:
    """Number of days in the year before the first day of the month.

    Raises:
        InvalidArgumentError: If month is not an int in 1-12
    """
    month = require_month(month)
    return DAYS_BEFORE_MONTH[month] + (month > 2 and is_leap_year(year))


def days_before_year(year: int) -> int:
    """Number of days from 0001-01-01 to the first day of year.

    Closed form, negative for years before 1. Floor division makes the leap
    year counts correct for negative years as well.
    """
    y = year - 1
    return y * DAYS_PER_YEAR + y // 4 - y // 100 + y // 400


# =============================================================================
# Day of Week
# =============================================================================


def weekday(epoch_day: int) -> Weekday:
    """Day of week for a day offset from 1970-01-01 (a Thursday).

    Python's % is a floor modulo, so the result is periodic in 7 for
    negative offsets too.
    """
    return Weekday((epoch_day + EPOCH_WEEKDAY) % DAYS_PER_WEEK)


# =============================================================================
# Day Offset <-> Date
# =============================================================================


def locate_year(days: int) -> tuple[int, int]:
    """Split an epoch day offset into (year, 0-based day of year).

    Buckets the day index into 400, 100, 4 and 1 year blocks. The 100-year and
    1-year counts can reach 4 on the last day of a 400-year or 4-year block;
    that day is December 31 of the preceding (leap) year.
    """
    n = days + DAYS_BEFORE_EPOCH

    n400, n = divmod(n, DAYS_PER_400_YEARS)
    n100, n = divmod(n, DAYS_PER_100_YEARS)
    n4, n = divmod(n, DAYS_PER_4_YEARS)
    n1, n = divmod(n, DAYS_PER_YEAR)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    if n1 == 4 or n100 == 4:
        return year - 1, DAYS_PER_YEAR  # Dec 31 of a leap year, index 365

    return year, n


def date_from_days(days: int) -> CalendarDate:
    """Convert an epoch day offset into a calendar date.

    Args:
        days: Whole days since 1970-01-01 (negative for earlier dates)

    Returns:
        CalendarDate(year, month, day)

    Raises:
        InvalidArgumentError: If days is not an int
        DateTimeOverflowError: If days is outside MIN_DAYS..MAX_DAYS
    """
    days = require_int("day offset", days)
    check_days_range(days)

    year, n = locate_year(days)
    leap = is_leap_year(year)

    # At most twelve steps, independent of the year
    month = 1
    while True:
        length = DAYS_IN_MONTH[month] + (month == 2 and leap)
        if n < length:
            break
        n -= length
        month += 1

    return CalendarDate(year, month, n + 1)


def day_of_year_from_days(days: int) -> int:
    """1-based ordinal day within the year containing the epoch day offset.

    Raises:
        InvalidArgumentError: If days is not an int
        DateTimeOverflowError: If days is outside MIN_DAYS..MAX_DAYS
    """
    days = require_int("day offset", days)
    check_days_range(days)
    return locate_year(days)[1] + 1


def days_from_date(year: int, month: int, day: int) -> int:
    """Convert a calendar date into a day offset from 1970-01-01.

    Args:
        year: Gregorian year (MIN_YEAR..MAX_YEAR)
        month: Month 1-12
        day: Day 1-days_in_month(year, month)

    Returns:
        Whole days since 1970-01-01, negative for earlier dates

    Raises:
        InvalidArgumentError: If any field is not an int or out of range
        DateTimeOverflowError: If year is outside MIN_YEAR..MAX_YEAR
    """
    year, month, day = validate_date(year, month, day)
    return days_before_year(year) + days_before_month(year, month) + day - 1 - DAYS_BEFORE_EPOCH


def validate_date(year: int, month: int, day: int) -> CalendarDate:
    """Check that year, month and day form an existing date.

    Returns:
        The fields as a CalendarDate (month as a plain int)

    Raises:
        InvalidArgumentError: If a field is not an int, month is not 1-12, or
            day exceeds the length of that month in that year
        DateTimeOverflowError: If year is outside MIN_YEAR..MAX_YEAR
    """
    year = require_int("year", year)
    month = require_month(month)
    day = require_int("day", day)
    check_year_range(year)

    last_day = days_in_month(year, month)
    if not 1 <= day <= last_day:
        raise InvalidArgumentError(f"Invalid day: {day} (expected 1-{last_day} for {year}-{month:02d})")

    return CalendarDate(year, int(month), day)
