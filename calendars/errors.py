"""
Exceptions raised by the calendar arithmetic core.

Validation failures are never exceptions (they surface as None / failure
results); only configuration defects such as a Jalali year outside the
break-point table end up here.
"""

from __future__ import annotations


class CalendarError(Exception):
    """Base class for calendar engine errors."""


class JalaliYearOutOfRangeError(CalendarError, ValueError):
    """The Jalali break-point table does not cover the requested year."""

    message = "سال شمسی خارج از بازه معتبر است."

    def __init__(self, year: int) -> None:
        self.year = year
        super().__init__(self.message)
