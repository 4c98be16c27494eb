"""
Calendar helpers for NIC decoding.

Pure functions apart from resolve_clock(), which supplies the default
Asia/Colombo clock when none is injected.
"""

from __future__ import annotations

from datetime import date

from .models import Birthday
from .ports import TimePort

# Cumulative day count at the end of each month in a common year
MONTH_END_TOTALS = (31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365)


def is_leap(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_year(year: int) -> int:
    """Number of days in the given year (365 or 366)."""
    return 366 if is_leap(year) else 365


def birthday_from_day_of_year(birth_year: int, day_of_year: int) -> Birthday:
    """
    Convert a 1-based day-of-year to a calendar date.

    In leap years every month end from February onward shifts by one day.
    """
    totals = MONTH_END_TOTALS
    if is_leap(birth_year):
        totals = (totals[0],) + tuple(count + 1 for count in totals[1:])

    prev = 0
    month = 1
    for total in totals:
        if day_of_year <= total:
            break
        month += 1
        prev = total

    return Birthday(year=birth_year, month=month, day=day_of_year - prev)


def age_on(birthday: Birthday, today: date) -> int:
    """Completed years between birthday and today (birthday itself counts)."""
    age = today.year - birthday.year
    if (today.month, today.day) < (birthday.month, birthday.day):
        age -= 1
    return age


def resolve_clock(clock: TimePort | None) -> TimePort:
    """Return the injected clock, or the Asia/Colombo system clock."""
    if clock is not None:
        return clock

    from lknic.adapters.time_colombo import ColomboTimeAdapter

    return ColomboTimeAdapter()


def today(clock: TimePort | None = None) -> date:
    """Current calendar date in the reference timezone (Asia/Colombo)."""
    return resolve_clock(clock).today()
