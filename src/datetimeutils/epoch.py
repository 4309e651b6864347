"""Immutable absolute-time value measured in seconds from the Unix epoch."""

from __future__ import annotations

import logging
import math
import time as _time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

from .calendar.common import (
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    Breakdown,
    CalendarDate,
    CalendarDateTime,
    Month,
    TimeOfDay,
    Weekday,
)
from .calendar.convert import (
    check_seconds_range,
    decompose,
    from_epoch_seconds,
    split_seconds,
    time_from_seconds,
    to_epoch_seconds,
)
from .calendar.gregorian import (
    date_from_days,
    day_of_year_from_days,
    days_in_month,
    days_in_year,
    is_leap_year,
    require_int,
    weekday,
)
from .exceptions import DateTimeOverflowError, InvalidArgumentError

logger = logging.getLogger(__name__)

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_SECOND = timedelta(seconds=1)


def _whole_seconds(delta: timedelta) -> int:
    """Convert a timedelta to seconds, rejecting sub-second parts."""
    if delta % _ONE_SECOND:
        raise InvalidArgumentError(f"Sub-second timedelta not supported: {delta!r}")
    return delta // _ONE_SECOND


@dataclass(frozen=True, order=True)
class EpochTime:
    """A point in time as whole seconds since 1970-01-01T00:00:00 (UTC).

    The only stored field is ``seconds``. Every calendar accessor is derived on
    demand from it through the proleptic Gregorian conversions; nothing is cached.
    Negative values are dates before the epoch.

    Values are immutable. Arithmetic and replace() return new instances:

        >>> t = EpochTime.from_components(2024, 2, 29, 12, 30)
        >>> str(t)
        'Thu, 29 Feb 2024 12:30:00'
        >>> str(t + 86400)
        'Fri, 1 Mar 2024 12:30:00'
        >>> t.replace(hour=0).isoformat()
        '2024-02-29T00:30:00'

    t.replace(year=2025) raises InvalidArgumentError: Feb 29 does not exist in 2025.

    Raises:
        InvalidArgumentError: If seconds is not an int
        DateTimeOverflowError: If seconds is outside MIN_SECONDS..MAX_SECONDS
    """

    seconds: int

    def __post_init__(self) -> None:
        require_int("epoch offset", self.seconds)
        check_seconds_range(self.seconds)

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def now(cls, clock: Callable[[], float] = _time.time) -> EpochTime:
        """Sample the host clock once.

        Args:
            clock: Callable returning seconds since the epoch (default time.time)
        """
        reading = clock()
        logger.debug("Sampled host clock: %r", reading)
        return cls.from_timestamp(reading)

    @classmethod
    def from_timestamp(cls, timestamp: float) -> EpochTime:
        """Create from a POSIX timestamp, flooring any fractional second.

        Flooring keeps instants before the epoch on the correct second:
        -0.5 belongs to 1969-12-31T23:59:59.

        Raises:
            InvalidArgumentError: If timestamp is not a real number or is NaN
            DateTimeOverflowError: If timestamp is infinite or out of range
        """
        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
            raise InvalidArgumentError(f"Invalid timestamp type: {type(timestamp).__name__}")

        if isinstance(timestamp, int):
            return cls(timestamp)

        if math.isnan(timestamp):
            raise InvalidArgumentError("Invalid timestamp: NaN")

        if math.isinf(timestamp):
            raise DateTimeOverflowError(f"Timestamp {timestamp} outside representable range")

        return cls(math.floor(timestamp))

    @classmethod
    def from_datetime(cls, dt: datetime) -> EpochTime:
        """Create from a timezone-aware datetime, flooring microseconds.

        Raises:
            InvalidArgumentError: If dt is not a datetime or is naive
        """
        if not isinstance(dt, datetime):
            raise InvalidArgumentError(f"Invalid datetime type: {type(dt).__name__}")

        if dt.tzinfo is None or dt.utcoffset() is None:
            raise InvalidArgumentError("Naive datetime has no defined offset from the epoch")

        return cls((dt - _UNIX_EPOCH) // _ONE_SECOND)

    @classmethod
    def from_components(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> EpochTime:
        """Create from calendar date and time of day (UTC, no timezone applied).

        Raises:
            InvalidArgumentError: If any field is not an int or out of range
            DateTimeOverflowError: If year is outside MIN_YEAR..MAX_YEAR
        """
        return cls(to_epoch_seconds(year, month, day, hour, minute, second))

    # =========================================================================
    # Derived Quantities
    # =========================================================================

    @property
    def days_since_epoch(self) -> int:
        """Whole days since 1970-01-01, floored (negative before the epoch)."""
        return split_seconds(self.seconds)[0]

    @property
    def second_in_day(self) -> int:
        """Seconds since midnight, 0-86399."""
        return split_seconds(self.seconds)[1]

    @property
    def second_in_hour(self) -> int:
        """Seconds since the start of the hour, 0-3599."""
        return self.second_in_day % SECONDS_PER_HOUR

    @property
    def day_of_week(self) -> Weekday:
        return weekday(self.days_since_epoch)

    @property
    def year(self) -> int:
        return date_from_days(self.days_since_epoch).year

    @property
    def month(self) -> Month:
        return Month(date_from_days(self.days_since_epoch).month)

    @property
    def day_of_month(self) -> int:
        return date_from_days(self.days_since_epoch).day

    @property
    def day_of_year(self) -> int:
        """1-based ordinal day within the year (1-366)."""
        return day_of_year_from_days(self.days_since_epoch)

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    @property
    def days_in_year(self) -> int:
        return days_in_year(self.year)

    @property
    def days_in_month(self) -> int:
        year, month, _ = date_from_days(self.days_since_epoch)
        return days_in_month(year, month)

    @property
    def hour(self) -> int:
        return self.second_in_day // SECONDS_PER_HOUR

    @property
    def minute(self) -> int:
        return self.second_in_hour // SECONDS_PER_MINUTE

    @property
    def second(self) -> int:
        return self.seconds % SECONDS_PER_MINUTE

    def date(self) -> CalendarDate:
        return date_from_days(self.days_since_epoch)

    def time(self) -> TimeOfDay:
        return time_from_seconds(self.second_in_day)

    def to_components(self) -> CalendarDateTime:
        return from_epoch_seconds(self.seconds)

    def breakdown(self) -> Breakdown:
        """All calendar quantities from a single conversion."""
        return decompose(self.seconds)

    def to_datetime(self) -> datetime:
        """Convert to an aware datetime in UTC.

        Raises:
            DateTimeOverflowError: If the year is outside datetime's 1-9999 range
        """
        try:
            return _UNIX_EPOCH + timedelta(seconds=self.seconds)
        except OverflowError as e:
            raise DateTimeOverflowError(f"Year {self.year} cannot be represented as datetime: {e}") from e

    # =========================================================================
    # Derived Values
    # =========================================================================

    def replace(
        self,
        *,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
    ) -> EpochTime:
        """Return a new EpochTime with the given calendar fields replaced.

        The combined fields are validated as a whole: replacing the year of
        Feb 29 with a common year raises instead of rolling over to March.

        Raises:
            InvalidArgumentError: If the resulting fields do not form a valid date/time
            DateTimeOverflowError: If the resulting year is out of range
        """
        current = self.to_components()
        return EpochTime.from_components(
            current.year if year is None else year,
            current.month if month is None else month,
            current.day if day is None else day,
            current.hour if hour is None else hour,
            current.minute if minute is None else minute,
            current.second if second is None else second,
        )

    def __add__(self, other: Any) -> EpochTime:
        if isinstance(other, timedelta):
            return EpochTime(self.seconds + _whole_seconds(other))
        if isinstance(other, int) and not isinstance(other, bool):
            return EpochTime(self.seconds + other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, EpochTime):
            return self.seconds - other.seconds
        if isinstance(other, timedelta):
            return EpochTime(self.seconds - _whole_seconds(other))
        if isinstance(other, int) and not isinstance(other, bool):
            return EpochTime(self.seconds - other)
        return NotImplemented

    # =========================================================================
    # Formatting
    # =========================================================================

    def isoformat(self) -> str:
        """ISO 8601 form without offset, e.g. "1970-01-01T00:00:00".

        Years before 0 carry a sign: "-0044-03-15T12:00:00".
        """
        year, month, day, hour, minute, second = self.to_components()
        year_str = f"{year:04d}" if year >= 0 else f"{year:05d}"
        return f"{year_str}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:{second:02d}"

    def __str__(self) -> str:
        """Human-readable form, e.g. "Thu, 1 Jan 1970 00:00:00"."""
        b = self.breakdown()
        return (
            f"{b.weekday.abbreviation}, {b.day} {Month(b.month).abbreviation} {b.year} "
            f"{b.hour:02d}:{b.minute:02d}:{b.second:02d}"
        )
