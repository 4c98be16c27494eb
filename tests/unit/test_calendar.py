"""
Calendar helper tests.

Verifies the Gregorian leap-year rule, day-of-year to date conversion
and whole-year age computation.
"""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from lknic.adapters.time_colombo import ColomboTimeAdapter, FrozenTimeAdapter
from lknic.components.nic import (
    Birthday,
    age_on,
    birthday_from_day_of_year,
    days_in_year,
    is_leap,
    today,
)
from lknic.components.nic._calendar import resolve_clock


class TestLeapYears:
    """Gregorian leap-year rule."""

    @pytest.mark.parametrize("year", [1904, 1996, 2000, 2024, 2400])
    def test_leap_years(self, year: int) -> None:
        assert is_leap(year) is True
        assert days_in_year(year) == 366

    @pytest.mark.parametrize("year", [1900, 1901, 1995, 2100, 2023])
    def test_common_years(self, year: int) -> None:
        assert is_leap(year) is False
        assert days_in_year(year) == 365


class TestBirthdayFromDayOfYear:
    """Day-of-year decoding must match real calendar dates."""

    def test_first_day(self) -> None:
        assert birthday_from_day_of_year(1995, 1) == Birthday(1995, 1, 1)

    def test_month_end_exact_match(self) -> None:
        """A day equal to a cumulative total is the last day of that month."""
        assert birthday_from_day_of_year(1995, 31) == Birthday(1995, 1, 31)
        assert birthday_from_day_of_year(1995, 151) == Birthday(1995, 5, 31)

    def test_leap_day(self) -> None:
        assert birthday_from_day_of_year(1996, 60) == Birthday(1996, 2, 29)
        assert birthday_from_day_of_year(1995, 60) == Birthday(1995, 3, 1)

    def test_leap_year_shift(self) -> None:
        assert birthday_from_day_of_year(1996, 152) == Birthday(1996, 5, 31)

    def test_last_day(self) -> None:
        assert birthday_from_day_of_year(1995, 365) == Birthday(1995, 12, 31)
        assert birthday_from_day_of_year(1996, 366) == Birthday(1996, 12, 31)

    @pytest.mark.parametrize("year", [1995, 1996, 2000, 2100])
    def test_agrees_with_datetime_for_every_day(self, year: int) -> None:
        start = date(year, 1, 1)
        for offset in range(days_in_year(year)):
            expected = start + timedelta(days=offset)
            assert birthday_from_day_of_year(year, offset + 1).to_date() == expected

    def test_to_dict(self) -> None:
        assert Birthday(1974, 7, 11).to_dict() == {"year": 1974, "month": 7, "day": 11}


class TestAgeOn:
    """Whole-year age computation."""

    def test_birthday_passed(self) -> None:
        assert age_on(Birthday(1995, 1, 1), date(2026, 2, 28)) == 31

    def test_birthday_today(self) -> None:
        assert age_on(Birthday(1995, 2, 28), date(2026, 2, 28)) == 31

    def test_birthday_later_same_month(self) -> None:
        assert age_on(Birthday(1995, 2, 28), date(2026, 2, 15)) == 30

    def test_birthday_later_month(self) -> None:
        assert age_on(Birthday(1995, 12, 31), date(2026, 2, 28)) == 30

    def test_leap_day_birthday_in_common_year(self) -> None:
        """Feb 29 birthdays are reached on Mar 1 in common years."""
        birthday = Birthday(2016, 2, 29)
        assert age_on(birthday, date(2031, 2, 28)) == 14
        assert age_on(birthday, date(2031, 3, 1)) == 15


class TestToday:
    """today() routes through the injected clock."""

    def test_uses_injected_clock(self) -> None:
        clock = FrozenTimeAdapter.on_local_date(date(2026, 2, 28))
        assert today(clock) == date(2026, 2, 28)

    def test_default_clock_is_colombo(self) -> None:
        clock = resolve_clock(None)
        assert isinstance(clock, ColomboTimeAdapter)
        assert clock.timezone_name == "Asia/Colombo"
