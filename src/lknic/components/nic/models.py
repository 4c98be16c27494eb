"""
NIC component data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import NICError


class NICType(str, Enum):
    """NIC number format."""

    OLD = "old"  # 9 digits + V/X, issued before 2016
    NEW = "new"  # 12 digits


class Gender(str, Enum):
    """Gender encoded in the day-of-year field (female days are offset by 500)."""

    MALE = "male"
    FEMALE = "female"


@dataclass(frozen=True)
class NICParts:
    """Verbatim fixed-width fields of a NIC number."""

    year: str  # always 4 digits ("19" prepended for OLD)
    days: str
    serial: str  # 3 digits for OLD, 4 for NEW
    checkdigit: str
    letter: str | None = None  # "V"/"X" for OLD, None for NEW

    def to_dict(self) -> dict[str, str | None]:
        return {
            "year": self.year,
            "days": self.days,
            "serial": self.serial,
            "checkdigit": self.checkdigit,
            "letter": self.letter,
        }


@dataclass(frozen=True)
class Birthday:
    """Calendar date of birth decoded from a NIC."""

    year: int
    month: int  # 1-12
    day: int  # 1-31

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def to_dict(self) -> dict[str, int]:
        return {"year": self.year, "month": self.month, "day": self.day}


@dataclass(frozen=True)
class DecodedNIC:
    """Fields of a NIC that passed every validation check."""

    nic: str
    nic_type: NICType
    birth_year: int
    day_of_birth_year: int  # 1-366, female offset removed
    gender: Gender
    parts: NICParts


@dataclass(frozen=True)
class ValidationResult:
    """Output of validate()."""

    valid: bool
    error: NICError | None = None
