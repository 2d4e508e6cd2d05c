"""
Tests for the validation & leap-year layer.

Validators must never raise; only is_leap_jalali surfaces the break-point
range error.
"""

from __future__ import annotations

import pytest

from calendars.errors import JalaliYearOutOfRangeError
from calendars.validation import (
    is_leap_jalali,
    is_leap_year,
    is_valid_date,
    is_valid_gregorian_date,
    is_valid_islamic_date,
    is_valid_jalali_date,
)
from models.domain import CalendarType, DateParts


def dp(year: int, month: int, day: int) -> DateParts:
    return DateParts(year, month, day)


class TestGregorianValidation:
    def test_leap_day(self) -> None:
        assert is_valid_gregorian_date(dp(2024, 2, 29)) is True
        assert is_valid_gregorian_date(dp(2023, 2, 29)) is False

    def test_year_bounds(self) -> None:
        assert is_valid_gregorian_date(dp(0, 1, 1)) is False
        assert is_valid_gregorian_date(dp(1, 1, 1)) is True
        assert is_valid_gregorian_date(dp(9999, 12, 31)) is True
        assert is_valid_gregorian_date(dp(10000, 1, 1)) is False

    def test_bad_month_is_false_not_error(self) -> None:
        assert is_valid_gregorian_date(dp(2024, 13, 1)) is False
        assert is_valid_gregorian_date(dp(2024, 0, 1)) is False

    def test_day_bounds(self) -> None:
        assert is_valid_gregorian_date(dp(2024, 4, 30)) is True
        assert is_valid_gregorian_date(dp(2024, 4, 31)) is False
        assert is_valid_gregorian_date(dp(2024, 4, 0)) is False


class TestJalaliValidation:
    def test_leap_years(self) -> None:
        assert is_leap_jalali(1399) is True
        assert is_leap_jalali(1400) is False

    def test_esfand_30(self) -> None:
        assert is_valid_jalali_date(dp(1399, 12, 30)) is True
        assert is_valid_jalali_date(dp(1400, 12, 30)) is False
        assert is_valid_jalali_date(dp(1401, 12, 30)) is False
        assert is_valid_jalali_date(dp(1401, 12, 29)) is True

    def test_month_lengths(self) -> None:
        assert is_valid_jalali_date(dp(1402, 6, 31)) is True
        assert is_valid_jalali_date(dp(1402, 7, 31)) is False
        assert is_valid_jalali_date(dp(1402, 11, 30)) is True

    def test_bad_month(self) -> None:
        assert is_valid_jalali_date(dp(1401, 13, 1)) is False
        assert is_valid_jalali_date(dp(1401, 0, 1)) is False

    def test_year_bounds(self) -> None:
        assert is_valid_jalali_date(dp(0, 1, 1)) is False
        assert is_valid_jalali_date(dp(1, 1, 1)) is True
        assert is_valid_jalali_date(dp(3177, 1, 1)) is True

    def test_out_of_table_year_is_false_not_error(self) -> None:
        # year check runs before the leap scanner is consulted
        assert is_valid_jalali_date(dp(3178, 12, 30)) is False
        assert is_valid_jalali_date(dp(4000, 12, 30)) is False

    def test_leap_query_outside_table_raises(self) -> None:
        with pytest.raises(JalaliYearOutOfRangeError):
            is_leap_jalali(4000)


class TestIslamicValidation:
    def test_last_month_of_leap_year(self) -> None:
        assert is_valid_islamic_date(dp(1442, 12, 30)) is True
        assert is_valid_islamic_date(dp(1443, 12, 30)) is False

    def test_even_month_has_29_days(self) -> None:
        assert is_valid_islamic_date(dp(1445, 2, 29)) is True
        assert is_valid_islamic_date(dp(1445, 2, 30)) is False

    def test_bounds(self) -> None:
        assert is_valid_islamic_date(dp(1, 1, 30)) is True
        assert is_valid_islamic_date(dp(0, 1, 1)) is False
        assert is_valid_islamic_date(dp(9666, 1, 1)) is True
        assert is_valid_islamic_date(dp(9667, 1, 1)) is False
        assert is_valid_islamic_date(dp(1444, 13, 1)) is False


class TestDispatchers:
    @pytest.mark.parametrize(
        "calendar, parts, expected",
        [
            (CalendarType.GREGORIAN, dp(2024, 2, 29), True),
            (CalendarType.JALALI, dp(1403, 12, 30), True),
            (CalendarType.ISLAMIC, dp(1443, 12, 30), False),
            ("jalali", dp(1403, 13, 1), False),
        ],
    )
    def test_is_valid_date(self, calendar, parts: DateParts, expected: bool) -> None:
        assert is_valid_date(parts, calendar) is expected

    def test_is_leap_year(self) -> None:
        assert is_leap_year(2024, CalendarType.GREGORIAN) is True
        assert is_leap_year(1399, CalendarType.JALALI) is True
        assert is_leap_year(1442, CalendarType.ISLAMIC) is True
        assert is_leap_year(1443, CalendarType.ISLAMIC) is False
