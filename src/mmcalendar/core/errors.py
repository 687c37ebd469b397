from __future__ import annotations


class MmCalendarError(Exception):
    """Base error."""


class InvalidDateError(MmCalendarError, ValueError):
    """Raised when a Western date or time component is out of range."""

    def __init__(self, message: str, *, year: int | None = None, month: int | None = None, day: int | None = None):
        super().__init__(message)
        self.year = year
        self.month = month
        self.day = day


class InvalidMyanmarDateError(MmCalendarError, ValueError):
    """Raised when a Myanmar date component is out of range."""

    def __init__(self, message: str, *, year: int | None = None, month: int | None = None, day: int | None = None):
        super().__init__(message)
        self.year = year
        self.month = month
        self.day = day


class OutOfSupportedJdnRangeError(MmCalendarError, ValueError):
    """Raised when a Julian Day Number falls outside the supported range."""

    def __init__(self, jdn: float, lo: float, hi: float):
        super().__init__(f"JDN {jdn} is outside the supported range [{lo}, {hi}]")
        self.jdn = jdn
        self.lo = lo
        self.hi = hi


class EraTableLookupFailure(MmCalendarError, LookupError):
    """Raised when the era table cannot answer a lookup (table misconfigured)."""


class InvalidConfigurationError(MmCalendarError, ValueError):
    """Raised when a CalendarConfig field is out of range."""
