"""
Core domain models for the Taqvim date engine.

These are plain frozen dataclasses passed by value between the calendar
core, the conversion hub and the holiday lookup. None of them carries its
own calendar: the caller always supplies a CalendarType alongside.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


# ── Enums ─────────────────────────────────────────────────────────────────────

class CalendarType(str, Enum):
    JALALI    = "jalali"      # Persian solar Hijri
    GREGORIAN = "gregorian"   # proleptic Gregorian
    ISLAMIC   = "islamic"     # tabular lunar Hijri


class HolidayType(str, Enum):
    OFFICIAL = "official"
    CULTURAL = "cultural"


class ErrorCode(str, Enum):
    INVALID_JALALI_DATE    = "INVALID_JALALI_DATE"
    INVALID_GREGORIAN_DATE = "INVALID_GREGORIAN_DATE"
    INVALID_ISLAMIC_DATE   = "INVALID_ISLAMIC_DATE"
    INVALID_INPUT_DATE     = "INVALID_INPUT_DATE"
    INVALID_BIRTH_DATE     = "INVALID_BIRTH_DATE"
    INVALID_REFERENCE_DATE = "INVALID_REFERENCE_DATE"
    BIRTH_AFTER_REFERENCE  = "BIRTH_AFTER_REFERENCE"
    INVALID_DATE_RANGE     = "INVALID_DATE_RANGE"


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_JALALI_DATE:    "تاریخ شمسی معتبر نیست.",
    ErrorCode.INVALID_GREGORIAN_DATE: "تاریخ میلادی معتبر نیست.",
    ErrorCode.INVALID_ISLAMIC_DATE:   "تاریخ قمری معتبر نیست.",
    ErrorCode.INVALID_INPUT_DATE:     "تاریخ واردشده معتبر نیست.",
    ErrorCode.INVALID_BIRTH_DATE:     "تاریخ تولد معتبر نیست.",
    ErrorCode.INVALID_REFERENCE_DATE: "تاریخ مرجع معتبر نیست.",
    ErrorCode.BIRTH_AFTER_REFERENCE:  "تاریخ تولد نباید بعد از تاریخ مرجع باشد.",
    ErrorCode.INVALID_DATE_RANGE:     "یکی از تاریخ‌ها معتبر نیست.",
}

# Failure code reported by the conversion hub, keyed by the source calendar.
INVALID_DATE_CODES: dict[CalendarType, ErrorCode] = {
    CalendarType.JALALI:    ErrorCode.INVALID_JALALI_DATE,
    CalendarType.GREGORIAN: ErrorCode.INVALID_GREGORIAN_DATE,
    CalendarType.ISLAMIC:   ErrorCode.INVALID_ISLAMIC_DATE,
}


# ── Date values ───────────────────────────────────────────────────────────────

@dataclass(frozen=True, order=True)
class DateParts:
    """A (year, month, day) triple. Ordering is lexicographic on the fields."""
    year: int
    month: int
    day: int

    def to_date(self) -> date:
        """Gregorian parts as a datetime.date (raises ValueError if invalid)."""
        return date(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, d: date) -> "DateParts":
        return cls(year=d.year, month=d.month, day=d.day)


@dataclass(frozen=True)
class YmdDelta:
    """Civil "X years, Y months, Z days" difference."""
    years: int
    months: int
    days: int


# ── Holidays ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class HolidayEntry:
    """One row of a static, year-independent holiday table."""
    month: int
    day: int
    title: str
    type: HolidayType
    calendar: CalendarType


@dataclass(frozen=True)
class HolidayResult:
    """A HolidayEntry resolved against a concrete year."""
    year: int
    month: int
    day: int
    title: str
    type: HolidayType
    calendar: CalendarType

    @classmethod
    def from_entry(
        cls,
        entry: HolidayEntry,
        year: int,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> "HolidayResult":
        """Attach `year`; month/day default to the entry's own (unshifted) values."""
        return cls(
            year=year,
            month=entry.month if month is None else month,
            day=entry.day if day is None else day,
            title=entry.title,
            type=entry.type,
            calendar=entry.calendar,
        )


@dataclass(frozen=True)
class DatedHoliday:
    """A holiday pinned to the Gregorian day on which it falls."""
    gregorian: DateParts
    holiday: HolidayResult


# ── Results ───────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ToolError:
    code: ErrorCode
    message: str


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Tagged success/failure value.

    ok=True  → `data` holds the payload, `error` is None
    ok=False → `error` holds the code and localized message, `data` is None
    """
    ok: bool
    data: Optional[T] = None
    error: Optional[ToolError] = None

    @classmethod
    def success(cls, data: T) -> "Result[T]":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, code: ErrorCode, message: Optional[str] = None) -> "Result[T]":
        return cls(ok=False, error=ToolError(code=code, message=message or ERROR_MESSAGES[code]))


@dataclass(frozen=True)
class AgeResult:
    ymd: YmdDelta
    days: int
    reference: DateParts          # Gregorian reference date actually used


@dataclass(frozen=True)
class SpanResult:
    days: int
    ymd: YmdDelta
    start: DateParts              # both normalized to Gregorian
    end: DateParts


@dataclass(frozen=True)
class ShiftResult:
    base: DateParts               # Gregorian
    shifted: DateParts            # Gregorian
    weekday: str
