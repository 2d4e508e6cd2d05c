"""
Validation & leap-year layer.

Validators are pure predicates: they return False for anything out of range
and never raise. `is_leap_jalali` is the exception: it exposes the
break-point scanner directly and raises JalaliYearOutOfRangeError outside
the table, so `is_valid_jalali_date` checks its own year bounds first.
"""

from __future__ import annotations

from calendars.arithmetic import (
    days_in_gregorian_month,
    days_in_islamic_month,
    is_leap_gregorian,
    is_leap_islamic,
    jalali_calendar,
)
from models.domain import CalendarType, DateParts

GREGORIAN_YEAR_MIN, GREGORIAN_YEAR_MAX = 1, 9999
JALALI_YEAR_MIN, JALALI_YEAR_MAX = 1, 3177
ISLAMIC_YEAR_MIN, ISLAMIC_YEAR_MAX = 1, 9666


def is_leap_jalali(year: int) -> bool:
    return jalali_calendar(year).leap == 0


def is_valid_gregorian_date(d: DateParts) -> bool:
    if d.year < GREGORIAN_YEAR_MIN or d.year > GREGORIAN_YEAR_MAX:
        return False
    # days_in_gregorian_month is 0 for a bad month, so the day check fails too
    return 1 <= d.day <= days_in_gregorian_month(d.year, d.month)


def is_valid_jalali_date(d: DateParts) -> bool:
    if d.year < JALALI_YEAR_MIN or d.year > JALALI_YEAR_MAX:
        return False
    if d.month < 1 or d.month > 12:
        return False
    if d.month <= 6:
        max_day = 31
    elif d.month <= 11:
        max_day = 30
    else:
        max_day = 30 if is_leap_jalali(d.year) else 29
    return 1 <= d.day <= max_day


def is_valid_islamic_date(d: DateParts) -> bool:
    if d.year < ISLAMIC_YEAR_MIN or d.year > ISLAMIC_YEAR_MAX:
        return False
    if d.month < 1 or d.month > 12:
        return False
    return 1 <= d.day <= days_in_islamic_month(d.year, d.month)


# ── Dispatchers ───────────────────────────────────────────────────────────────

_VALIDATORS = {
    CalendarType.GREGORIAN: is_valid_gregorian_date,
    CalendarType.JALALI:    is_valid_jalali_date,
    CalendarType.ISLAMIC:   is_valid_islamic_date,
}

_LEAP_RULES = {
    CalendarType.GREGORIAN: is_leap_gregorian,
    CalendarType.JALALI:    is_leap_jalali,
    CalendarType.ISLAMIC:   is_leap_islamic,
}


def is_valid_date(d: DateParts, calendar: CalendarType) -> bool:
    return _VALIDATORS[CalendarType(calendar)](d)


def is_leap_year(year: int, calendar: CalendarType) -> bool:
    """Leap status in `calendar`. The Jalali rule may raise for out-of-table years."""
    return _LEAP_RULES[CalendarType(calendar)](year)
