"""
Composite date tools built on the conversion hub and day arithmetic.

Each tool accepts dates in any supported calendar, normalizes them to
Gregorian and reports invalid input as a failed Result rather than raising.
"""

from __future__ import annotations

import logging
from datetime import date as GDate

from models.domain import (
    AgeResult,
    CalendarType,
    DateParts,
    ErrorCode,
    Result,
    ShiftResult,
    SpanResult,
)
from services.conversion_service import from_gregorian, normalize_to_gregorian
from services.date_arithmetic import (
    add_days,
    compare_date_parts,
    difference_in_days,
    difference_in_ymd,
    get_weekday_name,
)

logger = logging.getLogger("taqvim.services.tools")


def today_parts(calendar: CalendarType = CalendarType.GREGORIAN) -> DateParts:
    """The local current date expressed in `calendar`."""
    return from_gregorian(DateParts.from_date(GDate.today()), calendar)


def compute_age(
    birth: DateParts,
    birth_calendar: CalendarType,
    reference: DateParts | None = None,
    reference_calendar: CalendarType = CalendarType.GREGORIAN,
) -> Result[AgeResult]:
    """
    Age at `reference` (today when omitted) for a birth date in any calendar.
    """
    dob = normalize_to_gregorian(birth, birth_calendar)
    if dob is None:
        return Result.failure(ErrorCode.INVALID_BIRTH_DATE)

    if reference is None:
        ref = today_parts()
    else:
        ref = normalize_to_gregorian(reference, reference_calendar)
    if ref is None:
        return Result.failure(ErrorCode.INVALID_REFERENCE_DATE)

    if compare_date_parts(ref, dob) < 0:
        logger.debug("compute_age: birth %s after reference %s", dob, ref)
        return Result.failure(ErrorCode.BIRTH_AFTER_REFERENCE)

    return Result.success(AgeResult(
        ymd=difference_in_ymd(dob, ref),
        days=difference_in_days(dob, ref),
        reference=ref,
    ))


def date_span(
    start: DateParts,
    start_calendar: CalendarType,
    end: DateParts,
    end_calendar: CalendarType,
) -> Result[SpanResult]:
    """Elapsed days and civil Y/M/D between two dates, possibly in different calendars."""
    s = normalize_to_gregorian(start, start_calendar)
    e = normalize_to_gregorian(end, end_calendar)
    if s is None or e is None:
        return Result.failure(ErrorCode.INVALID_DATE_RANGE)
    return Result.success(SpanResult(
        days=difference_in_days(s, e),
        ymd=difference_in_ymd(s, e),
        start=s,
        end=e,
    ))


def shift_date(date: DateParts, calendar: CalendarType, offset_days: int) -> Result[ShiftResult]:
    """Move a date by `offset_days` and name the resulting weekday."""
    base = normalize_to_gregorian(date, calendar)
    if base is None:
        return Result.failure(ErrorCode.INVALID_INPUT_DATE)
    shifted = add_days(base, offset_days)
    return Result.success(ShiftResult(
        base=base,
        shifted=shifted,
        weekday=get_weekday_name(shifted),
    ))
