"""
Parsed NIC record.

A NIC instance exists only for numbers that passed every validation check.
Derived values (birthday, age, voter) are recomputed on each access.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from ._calendar import age_on, birthday_from_day_of_year, resolve_clock
from ._impl import convert_parts
from .models import Birthday, DecodedNIC, Gender, NICParts, NICType
from .ports import TimePort


class _DecodedToken:
    # Pickles by reference so copies of a record keep the same token
    def __reduce__(self) -> str:
        return "_DECODED"


# Only from_decoded() passes this; direct construction is rejected
_DECODED = _DecodedToken()


@dataclass(frozen=True)
class NIC:
    """
    A validated Sri Lankan National Identity Card number.

    Create instances with parse(); the constructor rejects direct calls.
    Equality compares the decoded data, not the clock the record was
    parsed with.
    """

    value: str  # trimmed, uppercased
    nic_type: NICType
    gender: Gender
    parts: NICParts
    birth_year: int = field(repr=False)
    day_of_birth_year: int = field(repr=False)
    clock: TimePort | None = field(default=None, repr=False, compare=False)
    _token: object = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self._token is not _DECODED:
            raise TypeError("NIC records are created by parse(), not constructed directly")

    @classmethod
    def from_decoded(cls, decoded: DecodedNIC, clock: TimePort | None = None) -> NIC:
        return cls(
            value=decoded.nic,
            nic_type=decoded.nic_type,
            gender=decoded.gender,
            parts=decoded.parts,
            birth_year=decoded.birth_year,
            day_of_birth_year=decoded.day_of_birth_year,
            clock=clock,
            _token=_DECODED,
        )

    @property
    def birthday(self) -> Birthday:
        """Date of birth."""
        return birthday_from_day_of_year(self.birth_year, self.day_of_birth_year)

    @property
    def age(self) -> int:
        """Age in whole years as of today in Asia/Colombo."""
        return self.age_on(resolve_clock(self.clock).today())

    def age_on(self, on: date) -> int:
        """Age in whole years on the given date."""
        return age_on(self.birthday, on)

    @property
    def voter(self) -> bool | None:
        """
        Voter status from the OLD format letter ("V" voter, "X" non-voter).

        None for NEW format, which does not encode it.
        """
        if self.nic_type is NICType.NEW:
            return None
        return self.parts.letter == "V"

    def convert(self) -> str:
        """
        Convert to the opposite format.

        Raises:
            NICError: If a NEW number cannot be expressed in the OLD format.
        """
        return convert_parts(self.nic_type, self.parts)

    def __str__(self) -> str:
        return self.value

    def to_dict(self) -> dict[str, Any]:
        """Plain, JSON-serializable representation."""
        return {
            "nic": self.value,
            "type": self.nic_type.value,
            "gender": self.gender.value,
            "birthday": self.birthday.to_dict(),
            "age": self.age,
            "voter": self.voter,
            "parts": self.parts.to_dict(),
        }
