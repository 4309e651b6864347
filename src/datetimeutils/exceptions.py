"""datetimeutils exception classes."""

from __future__ import annotations


class DateTimeError(Exception):
    """Base exception for all datetimeutils errors."""


class InvalidArgumentError(DateTimeError, ValueError):
    """Input violates a documented precondition (out-of-range field, wrong type)."""


class DateTimeOverflowError(DateTimeError, OverflowError):
    """Input or result falls outside the representable range (MIN_YEAR..MAX_YEAR)."""
