"""
Regression invariants for NIC decoding.

R1: Inputs matching neither structure always fail with INVALID_NIC_STRUCTURE
R2: parse(str(r)) == r for every valid record
R3: OLD -> NEW -> OLD round trip is lossless for voter ("V") records
R4: Day 366 is valid only in leap years; day 365 always
R5: Raw day 501 is female day 1; raw day 500 is male and out of range
"""

from datetime import date

import pytest

from lknic.adapters.time_colombo import FrozenTimeAdapter
from lknic.components.nic import (
    Gender,
    NICErrorCode,
    NICType,
    days_in_year,
    is_leap,
    parse,
    validate,
)


@pytest.fixture
def frozen() -> FrozenTimeAdapter:
    return FrozenTimeAdapter.on_local_date(date(2026, 2, 28))


def _sample_new_numbers() -> list[str]:
    samples = []
    for year in (1901, 1950, 1996, 2000, 2010):
        for day in (1, 59, 60, days_in_year(year)):
            for offset in (0, 500):
                samples.append(f"{year}{day + offset:03d}{(year * day) % 10000:04d}{day % 10}")
    return samples


def _sample_old_numbers() -> list[str]:
    samples = []
    for yy in (1, 50, 91, 96, 99):
        for day in (1, 104, 365):
            for letter in ("V", "X"):
                samples.append(f"{yy:02d}{day:03d}{(yy * day) % 1000:03d}{yy % 10}{letter}")
    return samples


# --- R1: Structure ---
@pytest.mark.parametrize(
    "nic",
    ["", "V", "12345678V", "1234567890", "12345678901", "1234567890123", "123456789A", "abc"],
)
def test_R1_structure(nic: str, frozen: FrozenTimeAdapter) -> None:
    result = validate(nic, clock=frozen)
    assert result.error is not None
    assert result.error.code is NICErrorCode.INVALID_NIC_STRUCTURE


# --- R2: Canonical round trip ---
@pytest.mark.parametrize("nic", _sample_new_numbers() + _sample_old_numbers())
def test_R2_canonical_round_trip(nic: str, frozen: FrozenTimeAdapter) -> None:
    record = parse(nic.lower(), clock=frozen)
    assert parse(str(record), clock=frozen) == record


# --- R3: OLD -> NEW -> OLD ---
@pytest.mark.parametrize("nic", [n for n in _sample_old_numbers() if n.endswith("V")])
def test_R3_old_new_old(nic: str, frozen: FrozenTimeAdapter) -> None:
    record = parse(nic, clock=frozen)
    intermediate = parse(record.convert(), clock=frozen)
    assert intermediate.nic_type is NICType.NEW
    assert intermediate.birthday == record.birthday
    assert intermediate.gender is record.gender
    assert intermediate.convert() == str(record)


# --- R4: Leap day bounds ---
@pytest.mark.parametrize("year", [1901, 1904, 1996, 1999, 2000])
def test_R4_leap_bounds(year: int, frozen: FrozenTimeAdapter) -> None:
    assert validate(f"{year}36502757", clock=frozen).valid

    day_366 = validate(f"{year}36602757", clock=frozen)
    if is_leap(year):
        assert day_366.valid
    else:
        assert day_366.error is not None
        assert day_366.error.code is NICErrorCode.INVALID_DAY_OF_YEAR


# --- R5: Gender boundary ---
def test_R5_gender_boundary(frozen: FrozenTimeAdapter) -> None:
    female = parse("199550102757", clock=frozen)
    assert female.gender is Gender.FEMALE
    assert female.day_of_birth_year == 1

    male_500 = validate("199550002757", clock=frozen)
    assert male_500.error is not None
    assert male_500.error.code is NICErrorCode.INVALID_DAY_OF_YEAR
