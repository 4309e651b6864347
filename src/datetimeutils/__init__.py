"""
datetimeutils: calendar and clock quantities from seconds since the Unix epoch.

Converts signed epoch offsets to proleptic Gregorian dates and times of day and
back, without consulting any timezone database. Leap seconds are not modeled.
"""

from __future__ import annotations

from .calendar import (
    MAX_SECONDS,
    MAX_YEAR,
    MIN_SECONDS,
    MIN_YEAR,
    Breakdown,
    CalendarDate,
    CalendarDateTime,
    Month,
    TimeOfDay,
    Weekday,
    days_in_month,
    days_in_year,
    decompose,
    from_epoch_seconds,
    is_leap_year,
    to_epoch_seconds,
    weekday,
)
from .epoch import EpochTime
from .exceptions import DateTimeError, DateTimeOverflowError, InvalidArgumentError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Value type
    "EpochTime",
    # Calendar types
    "Breakdown",
    "CalendarDate",
    "CalendarDateTime",
    "Month",
    "TimeOfDay",
    "Weekday",
    # Range
    "MAX_SECONDS",
    "MAX_YEAR",
    "MIN_SECONDS",
    "MIN_YEAR",
    # Functions
    "days_in_month",
    "days_in_year",
    "decompose",
    "from_epoch_seconds",
    "is_leap_year",
    "to_epoch_seconds",
    "weekday",
    # Exceptions
    "DateTimeError",
    "DateTimeOverflowError",
    "InvalidArgumentError",
]
