"""
Day-level arithmetic on Gregorian DateParts.

Callers holding a Jalali or Islamic date normalize it first
(services.conversion_service.normalize_to_gregorian). Absolute day counts
go through the Julian Day Number, so month and year boundaries need no
special handling in either direction.
"""

from __future__ import annotations

from calendars.arithmetic import days_in_gregorian_month, gregorian_to_jdn, jdn_to_gregorian
from models.domain import DateParts, YmdDelta

# Indexed 0=Sunday … 5=Friday; Saturday is the fall-through.
WEEKDAY_NAMES: tuple[str, ...] = (
    "یکشنبه",
    "دوشنبه",
    "سه‌شنبه",
    "چهارشنبه",
    "پنجشنبه",
    "جمعه",
)
SATURDAY_NAME = "شنبه"


def _day_number(d: DateParts) -> int:
    return gregorian_to_jdn(d.year, d.month, d.day)


def compare_date_parts(a: DateParts, b: DateParts) -> int:
    """-1, 0 or 1 comparing (year, month, day) lexicographically."""
    if a == b:
        return 0
    return -1 if a < b else 1


def add_days(date: DateParts, offset_days: int) -> DateParts:
    return jdn_to_gregorian(_day_number(date) + offset_days)


def difference_in_days(start: DateParts, end: DateParts) -> int:
    """Signed elapsed days, end - start."""
    return _day_number(end) - _day_number(start)


def difference_in_ymd(start: DateParts, end: DateParts) -> YmdDelta:
    """
    Civil year/month/day difference.

    Fields are subtracted independently. A negative day count borrows the
    length of the month before `end`'s month; a negative month count then
    borrows a year.
    """
    years = end.year - start.year
    months = end.month - start.month
    days = end.day - start.day

    if days < 0:
        months -= 1
        prev_month = 12 if end.month == 1 else end.month - 1
        prev_year = end.year - 1 if end.month == 1 else end.year
        days += days_in_gregorian_month(prev_year, prev_month)

    if months < 0:
        years -= 1
        months += 12

    return YmdDelta(years=years, months=months, days=days)


def day_of_year(date: DateParts) -> int:
    return sum(days_in_gregorian_month(date.year, m) for m in range(1, date.month)) + date.day


def weekday_index(date: DateParts) -> int:
    """0=Sunday … 6=Saturday."""
    return (_day_number(date) + 1) % 7


def get_weekday_name(date: DateParts) -> str:
    index = weekday_index(date)
    if index < len(WEEKDAY_NAMES):
        return WEEKDAY_NAMES[index]
    return SATURDAY_NAME
