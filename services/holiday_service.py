"""
HolidayService: static, in-memory Jalali and Islamic holiday lookup.

Tables:
    JALALI_HOLIDAYS   fixed civil holidays, keyed by (month, day)
    ISLAMIC_HOLIDAYS  lunar holidays on the tabular Hijri calendar

Islamic administrative offsets:
    The tabular calendar can drift a day or two from the officially announced
    month starts. An offset N for Islamic year Y means every lunar holiday of
    Y is observed N days after its tabular date. list_islamic_holidays()
    shifts each entry by +N; get_islamic_holiday() shifts the query by -N
    before matching, so both views always agree.

    Offsets come from ISLAMIC_YEAR_OFFSETS (built in, empty by default)
    merged with settings.islamic_year_offsets at construction time.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from calendars.arithmetic import days_in_islamic_month
from config.settings import settings
from models.domain import (
    CalendarType,
    DatedHoliday,
    DateParts,
    HolidayEntry,
    HolidayResult,
    HolidayType,
)
from services.conversion_service import from_gregorian, normalize_to_gregorian
from services.date_arithmetic import add_days

logger = logging.getLogger("taqvim.services.holidays")

_J = CalendarType.JALALI
_I = CalendarType.ISLAMIC
OFFICIAL = HolidayType.OFFICIAL
CULTURAL = HolidayType.CULTURAL

# ── Holiday tables ────────────────────────────────────────────────────────────

JALALI_HOLIDAYS: tuple[HolidayEntry, ...] = (
    HolidayEntry( 1,  1, "نوروز",                  OFFICIAL, _J),
    HolidayEntry( 1,  2, "نوروز",                  OFFICIAL, _J),
    HolidayEntry( 1,  3, "نوروز",                  OFFICIAL, _J),
    HolidayEntry( 1,  4, "نوروز",                  OFFICIAL, _J),
    HolidayEntry( 1, 12, "روز جمهوری اسلامی",      OFFICIAL, _J),
    HolidayEntry( 1, 13, "روز طبیعت",              OFFICIAL, _J),
    HolidayEntry( 2, 25, "روز بزرگداشت فردوسی",    CULTURAL, _J),
    HolidayEntry( 3, 14, "رحلت امام خمینی",        OFFICIAL, _J),
    HolidayEntry( 3, 15, "قیام ۱۵ خرداد",           OFFICIAL, _J),
    HolidayEntry( 7,  8, "روز بزرگداشت مولوی",     CULTURAL, _J),
    HolidayEntry( 9, 30, "شب یلدا",                CULTURAL, _J),
    HolidayEntry(11, 22, "پیروزی انقلاب اسلامی",   OFFICIAL, _J),
    HolidayEntry(12, 29, "ملی شدن صنعت نفت",       OFFICIAL, _J),
)

# Day numbers stay within the tabular month lengths (even months have 29 days).
ISLAMIC_HOLIDAYS: tuple[HolidayEntry, ...] = (
    HolidayEntry( 1,  1, "آغاز سال هجری قمری",                       CULTURAL, _I),
    HolidayEntry( 1,  9, "تاسوعای حسینی",                            OFFICIAL, _I),
    HolidayEntry( 1, 10, "عاشورای حسینی",                            OFFICIAL, _I),
    HolidayEntry( 2, 20, "اربعین حسینی",                             OFFICIAL, _I),
    HolidayEntry( 2, 28, "رحلت رسول اکرم و شهادت امام حسن مجتبی",     OFFICIAL, _I),
    HolidayEntry( 2, 29, "شهادت امام رضا",                           OFFICIAL, _I),
    HolidayEntry( 3,  8, "شهادت امام حسن عسکری",                     OFFICIAL, _I),
    HolidayEntry( 3, 17, "میلاد رسول اکرم و امام جعفر صادق",          OFFICIAL, _I),
    HolidayEntry( 6,  3, "شهادت حضرت فاطمه زهرا",                    OFFICIAL, _I),
    HolidayEntry( 7, 13, "ولادت امام علی",                           OFFICIAL, _I),
    HolidayEntry( 7, 27, "مبعث رسول اکرم",                           OFFICIAL, _I),
    HolidayEntry( 8, 15, "ولادت حضرت قائم",                          OFFICIAL, _I),
    HolidayEntry( 9,  1, "آغاز ماه رمضان",                           CULTURAL, _I),
    HolidayEntry( 9, 21, "شهادت حضرت علی",                           OFFICIAL, _I),
    HolidayEntry(10,  1, "عید سعید فطر",                             OFFICIAL, _I),
    HolidayEntry(10,  2, "تعطیل به مناسبت عید سعید فطر",              OFFICIAL, _I),
    HolidayEntry(10, 25, "شهادت امام جعفر صادق",                     OFFICIAL, _I),
    HolidayEntry(12, 10, "عید سعید قربان",                           OFFICIAL, _I),
    HolidayEntry(12, 18, "عید سعید غدیر خم",                         OFFICIAL, _I),
)

# Authoritative per-year corrections. Add entries only when an official
# calendar announces a shift for that year.
ISLAMIC_YEAR_OFFSETS: Mapping[int, int] = MappingProxyType({})


# ── Helpers ───────────────────────────────────────────────────────────────────

def shift_islamic_date(date: DateParts, offset_days: int) -> DateParts:
    """Move an Islamic date by `offset_days`, one day at a time through the month table."""
    year, month, day = date.year, date.month, date.day
    step = 1 if offset_days > 0 else -1
    for _ in range(abs(offset_days)):
        day += step
        if day > days_in_islamic_month(year, month):
            day = 1
            month += 1
            if month > 12:
                month = 1
                year += 1
        elif day < 1:
            month -= 1
            if month < 1:
                month = 12
                year -= 1
            day = days_in_islamic_month(year, month)
    return DateParts(year=year, month=month, day=day)


def _find(table: tuple[HolidayEntry, ...], month: int, day: int) -> HolidayEntry | None:
    for entry in table:
        if entry.month == month and entry.day == day:
            return entry
    return None


# ── HolidayService ────────────────────────────────────────────────────────────

class HolidayService:
    """
    Read-only holiday lookup for the Jalali and Islamic calendars.

    The merged offset map is frozen at construction; instances are safe to
    share between threads.
    """

    def __init__(self, extra_offsets: Mapping[int, int] | None = None) -> None:
        merged = dict(ISLAMIC_YEAR_OFFSETS)
        if extra_offsets:
            merged.update({int(year): int(offset) for year, offset in extra_offsets.items()})

        bound = settings.max_islamic_offset_days
        for year, offset in merged.items():
            if abs(offset) > bound:
                raise ValueError(
                    f"Islamic offset {offset} for year {year} exceeds ±{bound} days"
                )

        self._offsets: Mapping[int, int] = MappingProxyType(merged)
        if extra_offsets:
            logger.info("Loaded Islamic year offsets: %s", dict(self._offsets))

    @property
    def islamic_offsets(self) -> Mapping[int, int]:
        return self._offsets

    def islamic_offset(self, year: int) -> int:
        return self._offsets.get(year, 0)

    # ── Jalali ────────────────────────────────────────────────────────────────

    def get_jalali_holiday(self, date: DateParts) -> HolidayResult | None:
        entry = _find(JALALI_HOLIDAYS, date.month, date.day)
        if entry is None:
            return None
        return HolidayResult.from_entry(entry, date.year)

    def list_jalali_holidays(self, year: int) -> list[HolidayResult]:
        return [HolidayResult.from_entry(entry, year) for entry in JALALI_HOLIDAYS]

    # ── Islamic ───────────────────────────────────────────────────────────────

    def get_islamic_holiday(self, date: DateParts) -> HolidayResult | None:
        offset = self.islamic_offset(date.year)
        query = shift_islamic_date(date, -offset) if offset else date
        if offset:
            logger.debug("Islamic offset %+d for %s: matching tabular %s", offset, date, query)
        entry = _find(ISLAMIC_HOLIDAYS, query.month, query.day)
        if entry is None:
            return None
        return HolidayResult.from_entry(entry, date.year, date.month, date.day)

    def list_islamic_holidays(self, year: int) -> list[HolidayResult]:
        """
        Every Islamic holiday of `year`, month/day moved by that year's offset.

        `year` on each result is the holiday year, not the observed year: a
        negative offset can move 1 Muharram into the last days of year - 1
        while the result still reads `year`.
        """
        offset = self.islamic_offset(year)
        results = []
        for entry in ISLAMIC_HOLIDAYS:
            observed = shift_islamic_date(DateParts(year, entry.month, entry.day), offset)
            results.append(HolidayResult.from_entry(entry, year, observed.month, observed.day))
        return results

    # ── Gregorian views ───────────────────────────────────────────────────────

    def holidays_on(self, gregorian: DateParts) -> list[HolidayResult]:
        """Every Jalali and Islamic holiday observed on a Gregorian date."""
        if normalize_to_gregorian(gregorian, CalendarType.GREGORIAN) is None:
            return []
        found = []
        jalali = self.get_jalali_holiday(from_gregorian(gregorian, CalendarType.JALALI))
        if jalali is not None:
            found.append(jalali)
        islamic = self.get_islamic_holiday(from_gregorian(gregorian, CalendarType.ISLAMIC))
        if islamic is not None:
            found.append(islamic)
        return found

    def upcoming_holidays(self, from_date: DateParts, days: int = 30) -> list[DatedHoliday]:
        """
        Holidays in the half-open Gregorian window [from_date, from_date + days),
        sorted by date, Jalali before Islamic on the same day.
        """
        result: list[DatedHoliday] = []
        for i in range(max(days, 0)):
            current = add_days(from_date, i)
            for holiday in self.holidays_on(current):
                result.append(DatedHoliday(gregorian=current, holiday=holiday))
        return result


@lru_cache(maxsize=1)
def default_holiday_service() -> HolidayService:
    """Process-wide service built from settings."""
    return HolidayService(settings.islamic_year_offsets)


# ── Module-level API ──────────────────────────────────────────────────────────

def get_jalali_holiday(date: DateParts) -> HolidayResult | None:
    return default_holiday_service().get_jalali_holiday(date)


def list_jalali_holidays(year: int) -> list[HolidayResult]:
    return default_holiday_service().list_jalali_holidays(year)


def get_islamic_holiday(date: DateParts) -> HolidayResult | None:
    return default_holiday_service().get_islamic_holiday(date)


def list_islamic_holidays(year: int) -> list[HolidayResult]:
    return default_holiday_service().list_islamic_holidays(year)
