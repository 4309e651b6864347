"""Calendar layer: proleptic Gregorian arithmetic on epoch offsets.

This package contains the pure conversion functions behind EpochTime. Nothing
here performs I/O or keeps state.
"""

from .common import (
    MAX_DAYS,
    MAX_SECONDS,
    MAX_YEAR,
    MIN_DAYS,
    MIN_SECONDS,
    MIN_YEAR,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    Breakdown,
    CalendarDate,
    CalendarDateTime,
    Month,
    TimeOfDay,
    Weekday,
)
from .convert import (
    decompose,
    from_epoch_seconds,
    split_seconds,
    time_from_seconds,
    to_epoch_seconds,
    validate_time,
)
from .gregorian import (
    date_from_days,
    day_of_year_from_days,
    days_before_month,
    days_before_year,
    days_from_date,
    days_in_month,
    days_in_year,
    is_leap_year,
    validate_date,
    weekday,
)

__all__ = [
    # Range and units
    "MAX_DAYS",
    "MAX_SECONDS",
    "MAX_YEAR",
    "MIN_DAYS",
    "MIN_SECONDS",
    "MIN_YEAR",
    "SECONDS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    # Types
    "Breakdown",
    "CalendarDate",
    "CalendarDateTime",
    "Month",
    "TimeOfDay",
    "Weekday",
    # Day arithmetic
    "date_from_days",
    "day_of_year_from_days",
    "days_before_month",
    "days_before_year",
    "days_from_date",
    "days_in_month",
    "days_in_year",
    "is_leap_year",
    "validate_date",
    "weekday",
    # Second arithmetic
    "decompose",
    "from_epoch_seconds",
    "split_seconds",
    "time_from_seconds",
    "to_epoch_seconds",
    "validate_time",
]
