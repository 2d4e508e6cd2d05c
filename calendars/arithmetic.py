"""
Calendar arithmetic core: pure integer routines, no I/O, no logging.

Three bridges:
    Gregorian  ↔ JDN       standard proleptic-Gregorian Julian Day Number formula
    Islamic    ↔ JDN       tabular (arithmetic) Hijri calendar, 30-year leap cycle
    Jalali     ↔ Gregorian day-counting method from the public-domain jalali.js
                           conversion, anchored at Jalali 979 / Gregorian 1600

Jalali leap status uses the break-point scan (`jalali_calendar`) adapted from
jalaali-js. That scanner is the only function here that raises; everything
else is total and may return a meaningless triple for invalid input, so
callers validate first (see calendars.validation).
"""

from __future__ import annotations

from typing import NamedTuple

from calendars.errors import JalaliYearOutOfRangeError
from models.domain import DateParts

# ── Constants ─────────────────────────────────────────────────────────────────

GREGORIAN_MONTH_DAYS: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Years at which the 33-year Jalali leap pattern shifts. Strictly ascending;
# the scanner is undefined before the first entry and at/after the last.
JALALI_BREAKS: tuple[int, ...] = (
    -61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181,
    1210, 1635, 2060, 2097, 2192, 2262, 2324, 2394, 2456, 3178,
)

# JDN of 1 Muharram 1 AH (15 July 622, Julian calendar).
ISLAMIC_EPOCH = 1948439

# Positions inside the 30-year cycle that carry a 30-day Dhu al-Hijjah.
ISLAMIC_LEAP_YEARS: frozenset[int] = frozenset({2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29})


# ── Truncating integer helpers (break-point scanner only) ─────────────────────

def _div(a: int, b: int) -> int:
    """Integer division truncated toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _mod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend, paired with _div."""
    return a - _div(a, b) * b


# ── Gregorian ─────────────────────────────────────────────────────────────────

def is_leap_gregorian(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_gregorian_month(year: int, month: int) -> int:
    """Month length, or 0 when `month` is outside 1..12."""
    if month < 1 or month > 12:
        return 0
    if month == 2:
        return 29 if is_leap_gregorian(year) else 28
    return GREGORIAN_MONTH_DAYS[month - 1]


def days_in_gregorian_year(year: int) -> int:
    return 366 if is_leap_gregorian(year) else 365


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def jdn_to_gregorian(jdn: int) -> DateParts:
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    return DateParts(
        year=100 * b + d - 4800 + m // 10,
        month=m + 3 - 12 * (m // 10),
        day=e - (153 * m + 2) // 5 + 1,
    )


# ── Islamic (tabular) ─────────────────────────────────────────────────────────

def is_leap_islamic(year: int) -> bool:
    return ((year - 1) % 30) + 1 in ISLAMIC_LEAP_YEARS


def days_in_islamic_month(year: int, month: int) -> int:
    if month == 12:
        return 30 if is_leap_islamic(year) else 29
    return 30 if month % 2 == 1 else 29


def islamic_to_jdn(year: int, month: int, day: int) -> int:
    days_before_month = 30 * (month - 1) - (month - 1) // 2
    days_before_year = (year - 1) * 354 + (3 + 11 * year) // 30
    return day + days_before_month + days_before_year + ISLAMIC_EPOCH - 1


def jdn_to_islamic(jdn: int) -> DateParts:
    year = (30 * (jdn - ISLAMIC_EPOCH) + 10646) // 10631
    month = 1
    while month < 12 and jdn >= islamic_to_jdn(year, month + 1, 1):
        month += 1
    day = jdn - islamic_to_jdn(year, month, 1) + 1
    return DateParts(year=year, month=month, day=day)


def islamic_to_gregorian(year: int, month: int, day: int) -> DateParts:
    return jdn_to_gregorian(islamic_to_jdn(year, month, day))


def gregorian_to_islamic(year: int, month: int, day: int) -> DateParts:
    return jdn_to_islamic(gregorian_to_jdn(year, month, day))


# ── Jalali ────────────────────────────────────────────────────────────────────

class JalaliYearInfo(NamedTuple):
    leap: int    # 0 for a leap year, 1..4 = years since the last leap
    gy: int      # Gregorian year in which the Jalali year begins
    march: int   # March day of Nowruz


def jalali_calendar(jy: int) -> JalaliYearInfo:
    """
    Break-point scan for Jalali year `jy`.

    Raises JalaliYearOutOfRangeError outside [JALALI_BREAKS[0], JALALI_BREAKS[-1]).
    The truncating _div/_mod sequence below is load-bearing near break points.
    """
    if jy < JALALI_BREAKS[0] or jy >= JALALI_BREAKS[-1]:
        raise JalaliYearOutOfRangeError(jy)

    gy = jy + 621
    leap_j = -14
    jp = JALALI_BREAKS[0]
    jump = 0

    for jm in JALALI_BREAKS[1:]:
        jump = jm - jp
        if jy < jm:
            break
        leap_j += _div(jump, 33) * 8 + _div(_mod(jump, 33), 4)
        jp = jm

    n = jy - jp
    leap_j += _div(n, 33) * 8 + _div(_mod(n, 33) + 3, 4)
    if _mod(jump, 33) == 4 and jump - n == 4:
        leap_j += 1

    leap_g = _div(gy, 4) - _div(_div(gy, 100) + 1, 4) * 3 - 150
    march = 20 + leap_j - leap_g

    if jump - n < 6:
        n = n - jump + _div(jump + 4, 33) * 33

    leap = _mod(_mod(n + 1, 33) - 1, 4)
    if leap == -1:
        leap = 4

    return JalaliYearInfo(leap=leap, gy=gy, march=march)


def jalali_to_gregorian(jy: int, jm: int, jd: int) -> DateParts:
    jy -= 979
    jm -= 1
    jd -= 1

    j_day_no = 365 * jy + (jy // 33) * 8 + ((jy % 33) + 3) // 4 + jd
    for i in range(jm):
        j_day_no += 31 if i < 6 else 30

    g_day_no = j_day_no + 79

    gy = 1600 + 400 * (g_day_no // 146097)
    g_day_no %= 146097

    leap = True
    if g_day_no >= 36525:
        g_day_no -= 1
        gy += 100 * (g_day_no // 36524)
        g_day_no %= 36524
        if g_day_no >= 365:
            g_day_no += 1
        else:
            leap = False

    gy += 4 * (g_day_no // 1461)
    g_day_no %= 1461

    if g_day_no >= 366:
        leap = False
        g_day_no -= 1
        gy += g_day_no // 365
        g_day_no %= 365

    month_days = list(GREGORIAN_MONTH_DAYS)
    if leap:
        month_days[1] = 29

    gm = 0
    while gm < 12 and g_day_no >= month_days[gm]:
        g_day_no -= month_days[gm]
        gm += 1

    return DateParts(year=gy, month=gm + 1, day=g_day_no + 1)


def gregorian_to_jalali(gy: int, gm: int, gd: int) -> DateParts:
    gy -= 1600
    gm -= 1
    gd -= 1

    g_day_no = 365 * gy + (gy + 3) // 4 - (gy + 99) // 100 + (gy + 399) // 400
    g_day_no += sum(GREGORIAN_MONTH_DAYS[:max(gm, 0)])
    if gm > 1 and is_leap_gregorian(gy + 1600):
        g_day_no += 1
    g_day_no += gd

    j_day_no = g_day_no - 79

    j_np = j_day_no // 12053
    j_day_no %= 12053

    jy = 979 + 33 * j_np + 4 * (j_day_no // 1461)
    j_day_no %= 1461

    if j_day_no >= 366:
        jy += (j_day_no - 1) // 365
        j_day_no = (j_day_no - 1) % 365

    if j_day_no < 186:
        jm = 1 + j_day_no // 31
        jd = 1 + j_day_no % 31
    else:
        jm = 7 + (j_day_no - 186) // 30
        jd = 1 + (j_day_no - 186) % 30

    return DateParts(year=jy, month=jm, day=jd)
