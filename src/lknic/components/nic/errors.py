"""
NIC error taxonomy.

Each NICErrorCode has a message template. Rendering is a pure function of
the code, its parameters and the config in effect, so callers can branch on
the code without matching message text.

Codes:
- INVALID_NIC_STRUCTURE: neither 9 digits + V/X nor 12 digits
- MAXIMUM_AGE_REQUIREMENT_NOT_MET: birth year before the oldest valid year
- MINIMUM_AGE_REQUIREMENT_NOT_MET: holder younger than the minimum legal age
- INVALID_DAY_OF_YEAR: day-of-year outside the birth year
- INVALID_YEAR_FOR_OLD_FORMAT_CONVERSION: NEW -> OLD with a non-19xx year (param: year)
- SERIAL_NUMBER_TOO_LARGE_FOR_OLD_FORMAT: NEW -> OLD with a 4-digit serial (param: serial)
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from .config import NICConfig, get_config


class NICErrorCode(str, Enum):
    """Closed set of NIC failure kinds."""

    INVALID_NIC_STRUCTURE = "INVALID_NIC_STRUCTURE"
    MAXIMUM_AGE_REQUIREMENT_NOT_MET = "MAXIMUM_AGE_REQUIREMENT_NOT_MET"
    MINIMUM_AGE_REQUIREMENT_NOT_MET = "MINIMUM_AGE_REQUIREMENT_NOT_MET"
    INVALID_DAY_OF_YEAR = "INVALID_DAY_OF_YEAR"
    INVALID_YEAR_FOR_OLD_FORMAT_CONVERSION = "INVALID_YEAR_FOR_OLD_FORMAT_CONVERSION"
    SERIAL_NUMBER_TOO_LARGE_FOR_OLD_FORMAT = "SERIAL_NUMBER_TOO_LARGE_FOR_OLD_FORMAT"


# --- Message Templates ---


def _invalid_structure(config: NICConfig) -> str:
    return (
        "Invalid NIC structure in the given NIC number. Old format requires 9 digits "
        "followed by 'V' or 'X'. New format requires 12 digits."
    )


def _maximum_age(config: NICConfig) -> str:
    return (
        "Invalid birth year in the given NIC number. Old format requires a year between "
        f"{config.oldest_valid_birth_year} and 1999 (inclusive). New format requires a year "
        f"between {config.oldest_valid_birth_year} and the current year minus the minimum "
        f"legal age ({config.minimum_legal_age}) to have an NIC (inclusive)."
    )


def _minimum_age(config: NICConfig) -> str:
    return (
        "Minimum age requirement not met in the given NIC number. The legal age to obtain "
        f"an NIC in Sri Lanka is {config.minimum_legal_age} years."
    )


def _invalid_day(config: NICConfig) -> str:
    return (
        "Invalid day of the year in the given NIC number. Must be between 001 and 365 or "
        "366 (inclusive) for males, or 501 and 865 or 866 (inclusive) for females."
    )


def _invalid_year_for_old(config: NICConfig, year: str) -> str:
    return (
        "Only 19xx born NICs can be converted to the OLD format. "
        f"The provided NIC has the birth year {year}."
    )


def _serial_too_large(config: NICConfig, serial: str) -> str:
    return (
        f'The serial number "{serial}" in this new-format NIC is too large '
        "(4 digits starting with 1-9) to fit into the old 3-digit format."
    )


MESSAGE_TEMPLATES: dict[NICErrorCode, Callable[..., str]] = {
    NICErrorCode.INVALID_NIC_STRUCTURE: _invalid_structure,
    NICErrorCode.MAXIMUM_AGE_REQUIREMENT_NOT_MET: _maximum_age,
    NICErrorCode.MINIMUM_AGE_REQUIREMENT_NOT_MET: _minimum_age,
    NICErrorCode.INVALID_DAY_OF_YEAR: _invalid_day,
    NICErrorCode.INVALID_YEAR_FOR_OLD_FORMAT_CONVERSION: _invalid_year_for_old,
    NICErrorCode.SERIAL_NUMBER_TOO_LARGE_FOR_OLD_FORMAT: _serial_too_large,
}


def render_message(
    code: NICErrorCode,
    params: tuple[str, ...] = (),
    config: NICConfig | None = None,
) -> str:
    """Render the human-readable message for an error code."""
    return MESSAGE_TEMPLATES[code](config or get_config(), *params)


class NICError(ValueError):
    """
    Raised when a NIC fails validation or cannot be converted.

    Attributes:
        code: The failure kind
        params: Values interpolated into the message (offending year or serial)
        message: Rendered message
    """

    def __init__(
        self,
        code: NICErrorCode | str,
        *params: str,
        config: NICConfig | None = None,
    ) -> None:
        self.code = NICErrorCode(code)
        self.params = params
        self.message = render_message(self.code, params, config)
        super().__init__(self.message)

    def __reduce__(self) -> tuple[Any, ...]:
        # Rebuild from code and params, keeping the message rendered at raise time
        return type(self), (self.code, *self.params), {"message": self.message}

    def __setstate__(self, state: dict[str, Any]) -> None:
        self.__dict__.update(state)
        self.args = (self.message,)

    def __repr__(self) -> str:
        return f"NICError({self.code.value!r}, params={self.params!r})"
