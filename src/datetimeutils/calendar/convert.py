"""Conversions between epoch seconds and calendar date + time of day.

Forward:  seconds -> split into (day offset, second of day) -> date + time
Inverse:  date + time -> validated -> day offset * 86400 + second of day

Both directions are exact inverses for every value in the representable range
(MIN_SECONDS..MAX_SECONDS). No timezone is applied and no leap second exists.
"""

from __future__ import annotations

from ..exceptions import DateTimeOverflowError, InvalidArgumentError
from .common import (
    MAX_SECONDS,
    MIN_SECONDS,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    Breakdown,
    CalendarDateTime,
    TimeOfDay,
)
from .gregorian import (
    date_from_days,
    days_from_date,
    is_leap_year,
    locate_year,
    require_int,
    weekday,
)

# =============================================================================
# Validation
# =============================================================================


def check_seconds_range(seconds: int) -> None:
    """Raise DateTimeOverflowError if seconds is outside MIN_SECONDS..MAX_SECONDS."""
    if not MIN_SECONDS <= seconds <= MAX_SECONDS:
        raise DateTimeOverflowError(
            f"Epoch offset {seconds} outside representable range {MIN_SECONDS}..{MAX_SECONDS}"
        )


def validate_time(hour: int, minute: int, second: int) -> TimeOfDay:
    """Check that hour, minute and second form a valid time of day.

    Raises:
        InvalidArgumentError: If a field is not an int or out of range
    """
    hour = require_int("hour", hour)
    minute = require_int("minute", minute)
    second = require_int("second", second)

    if not 0 <= hour <= 23:
        raise InvalidArgumentError(f"Invalid hour: {hour} (expected 0-23)")

    if not 0 <= minute <= 59:
        raise InvalidArgumentError(f"Invalid minute: {minute} (expected 0-59)")

    if not 0 <= second <= 59:
        raise InvalidArgumentError(f"Invalid second: {second} (expected 0-59)")

    return TimeOfDay(hour, minute, second)


# =============================================================================
# Forward Conversion
# =============================================================================


def split_seconds(seconds: int) -> tuple[int, int]:
    """Split epoch seconds into (day offset, second of day).

    Uses floor division so the second of day is always in [0, 86400):
    -1 becomes (-1, 86399), i.e. 23:59:59 on the day before the epoch.
    """
    return divmod(seconds, SECONDS_PER_DAY)


def time_from_seconds(second_of_day: int) -> TimeOfDay:
    """Convert a second of day in [0, 86400) into hour, minute, second.

    Raises:
        InvalidArgumentError: If second_of_day is outside [0, 86400)
    """
    second_of_day = require_int("second of day", second_of_day)
    if not 0 <= second_of_day < SECONDS_PER_DAY:
        raise InvalidArgumentError(f"Invalid second of day: {second_of_day} (expected 0-{SECONDS_PER_DAY - 1})")

    hour, remainder = divmod(second_of_day, SECONDS_PER_HOUR)
    minute, second = divmod(remainder, SECONDS_PER_MINUTE)
    return TimeOfDay(hour, minute, second)


def from_epoch_seconds(seconds: int) -> CalendarDateTime:
    """Convert epoch seconds into calendar date and time of day.

    Args:
        seconds: Signed seconds since 1970-01-01T00:00:00

    Returns:
        CalendarDateTime(year, month, day, hour, minute, second)

    Raises:
        InvalidArgumentError: If seconds is not an int
        DateTimeOverflowError: If seconds is outside MIN_SECONDS..MAX_SECONDS
    """
    seconds = require_int("epoch offset", seconds)
    check_seconds_range(seconds)

    days, second_of_day = split_seconds(seconds)
    return CalendarDateTime(*date_from_days(days), *time_from_seconds(second_of_day))


def decompose(seconds: int) -> Breakdown:
    """Convert epoch seconds into every derived calendar quantity.

    Same walk as from_epoch_seconds, additionally reporting the weekday, the
    1-based day of year and whether the located year is a leap year.

    Raises:
        InvalidArgumentError: If seconds is not an int
        DateTimeOverflowError: If seconds is outside MIN_SECONDS..MAX_SECONDS
    """
    seconds = require_int("epoch offset", seconds)
    check_seconds_range(seconds)

    days, second_of_day = split_seconds(seconds)
    year, month, day = date_from_days(days)
    hour, minute, second = time_from_seconds(second_of_day)

    return Breakdown(
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
        weekday=weekday(days),
        day_of_year=locate_year(days)[1] + 1,
        is_leap_year=is_leap_year(year),
    )


# =============================================================================
# Inverse Conversion
# =============================================================================


def to_epoch_seconds(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> int:
    """Convert calendar date and time of day into epoch seconds.

    Args:
        year: Gregorian year (MIN_YEAR..MAX_YEAR)
        month: Month 1-12
        day: Day 1-days_in_month(year, month)
        hour: Hour 0-23
        minute: Minute 0-59
        second: Second 0-59

    Returns:
        Signed seconds since 1970-01-01T00:00:00

    Raises:
        InvalidArgumentError: If any field is not an int or out of range
        DateTimeOverflowError: If year is outside MIN_YEAR..MAX_YEAR
    """
    days = days_from_date(year, month, day)
    hour, minute, second = validate_time(hour, minute, second)
    return days * SECONDS_PER_DAY + hour * SECONDS_PER_HOUR + minute * SECONDS_PER_MINUTE + second
