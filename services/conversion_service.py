"""
Cross-calendar conversion hub.

Every conversion is routed through Gregorian, so only four directional
primitives exist:

    Jalali  → Gregorian     Gregorian → Jalali
    Islamic → Gregorian     Gregorian → Islamic

Invalid input is an expected condition: normalize_to_gregorian() returns
None and convert_date() returns a failed Result tagged with the source
calendar's INVALID_<CALENDAR>_DATE code. Nothing here raises for bad dates.
"""

from __future__ import annotations

import logging

from calendars.arithmetic import (
    gregorian_to_islamic,
    gregorian_to_jalali,
    islamic_to_gregorian,
    jalali_to_gregorian,
)
from calendars.validation import (
    is_valid_gregorian_date,
    is_valid_islamic_date,
    is_valid_jalali_date,
)
from models.domain import INVALID_DATE_CODES, CalendarType, DateParts, Result

logger = logging.getLogger("taqvim.services.conversion")


def normalize_to_gregorian(date: DateParts, calendar: CalendarType) -> DateParts | None:
    """Validate `date` in `calendar` and express it in Gregorian, or None if invalid."""
    calendar = CalendarType(calendar)
    if calendar == CalendarType.GREGORIAN:
        return date if is_valid_gregorian_date(date) else None
    if calendar == CalendarType.JALALI:
        if not is_valid_jalali_date(date):
            return None
        return jalali_to_gregorian(date.year, date.month, date.day)
    if not is_valid_islamic_date(date):
        return None
    return islamic_to_gregorian(date.year, date.month, date.day)


def from_gregorian(date: DateParts, calendar: CalendarType) -> DateParts:
    """Express a valid Gregorian date in `calendar`. Total for valid input."""
    calendar = CalendarType(calendar)
    if calendar == CalendarType.GREGORIAN:
        return date
    if calendar == CalendarType.JALALI:
        return gregorian_to_jalali(date.year, date.month, date.day)
    return gregorian_to_islamic(date.year, date.month, date.day)


def convert_date(
    date: DateParts,
    from_calendar: CalendarType,
    to_calendar: CalendarType,
) -> Result[DateParts]:
    """
    Convert `date` from one calendar to another.

    Same-calendar conversion is a pass-through and performs no validation.
    Only the source is range-checked: the last Islamic years map past
    Gregorian 9999 and are returned as is.
    """
    from_calendar = CalendarType(from_calendar)
    to_calendar = CalendarType(to_calendar)

    if from_calendar == to_calendar:
        return Result.success(date)

    gregorian = normalize_to_gregorian(date, from_calendar)
    if gregorian is None:
        logger.debug(
            "convert_date rejected %s date %s (target=%s)",
            from_calendar.value, date, to_calendar.value,
        )
        return Result.failure(INVALID_DATE_CODES[from_calendar])

    return Result.success(from_gregorian(gregorian, to_calendar))
