"""
NIC validation engine and format conversion.

Key behaviors:
- Input is trimmed and uppercased before anything else
- Format is detected from shape alone (9 digits + V/X, or 12 digits)
- Checks run in a fixed order and the first failure wins:
  1. structure
  2. birth year >= oldest valid year
  3. birth year <= current year - minimum legal age
  4. 1 <= day-of-year <= days in birth year
  5. exact age >= minimum legal age when born in the boundary year
- Day-of-year values above 500 encode female holders
"""

from __future__ import annotations

import logging
import re

from ._calendar import age_on, birthday_from_day_of_year, days_in_year, resolve_clock
from ._parts import get_nic_parts
from .config import NICConfig, get_config
from .errors import NICError, NICErrorCode
from .models import DecodedNIC, Gender, NICParts, NICType
from .ports import TimePort

logger = logging.getLogger(__name__)

STRUCTURE_OLD = re.compile(r"[0-9]{9}[VX]")
STRUCTURE_NEW = re.compile(r"[0-9]{12}")

FEMALE_DAY_OFFSET = 500

# Unicode whitespace plus the byte-order mark
_SURROUNDING_SPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


# --- Structure ---


def normalize(nic: str) -> str:
    """Trim surrounding whitespace (including a BOM) and uppercase."""
    return _SURROUNDING_SPACE.sub("", nic).upper()


def detect_type(nic: str) -> NICType | None:
    """Detect the format of a normalized NIC, or None if it matches neither."""
    if STRUCTURE_OLD.fullmatch(nic):
        return NICType.OLD
    if STRUCTURE_NEW.fullmatch(nic):
        return NICType.NEW
    return None


def decode_gender(raw_days: int) -> tuple[Gender, int]:
    """Split a raw day-of-year into gender and true day-of-year."""
    if raw_days > FEMALE_DAY_OFFSET:
        return Gender.FEMALE, raw_days - FEMALE_DAY_OFFSET
    return Gender.MALE, raw_days


# --- Validator ---


def run_validator(
    nic: str,
    config: NICConfig | None = None,
    clock: TimePort | None = None,
) -> tuple[DecodedNIC | None, NICError | None]:
    """
    Validate and decode a raw NIC string.

    Returns:
        Tuple of (decoded, error). Exactly one of them is None.
    """
    config = config or get_config()
    nic = normalize(nic)

    nic_type = detect_type(nic)
    if nic_type is None:
        return _reject(NICErrorCode.INVALID_NIC_STRUCTURE, None, config)

    parts = get_nic_parts(nic, nic_type)
    birth_year = int(parts.year)
    gender, day_of_birth_year = decode_gender(int(parts.days))

    # Both age checks use this single snapshot
    today = resolve_clock(clock).today()
    latest_valid_birth_year = today.year - config.minimum_legal_age

    if birth_year < config.oldest_valid_birth_year:
        return _reject(NICErrorCode.MAXIMUM_AGE_REQUIREMENT_NOT_MET, nic_type, config)

    if birth_year > latest_valid_birth_year:
        return _reject(NICErrorCode.MINIMUM_AGE_REQUIREMENT_NOT_MET, nic_type, config)

    if not 1 <= day_of_birth_year <= days_in_year(birth_year):
        return _reject(NICErrorCode.INVALID_DAY_OF_YEAR, nic_type, config)

    # Born in the year they turn the minimum age: the birthday must have passed
    if birth_year == latest_valid_birth_year:
        birthday = birthday_from_day_of_year(birth_year, day_of_birth_year)
        if age_on(birthday, today) < config.minimum_legal_age:
            return _reject(NICErrorCode.MINIMUM_AGE_REQUIREMENT_NOT_MET, nic_type, config)

    decoded = DecodedNIC(
        nic=nic,
        nic_type=nic_type,
        birth_year=birth_year,
        day_of_birth_year=day_of_birth_year,
        gender=gender,
        parts=parts,
    )
    return decoded, None


def _reject(
    code: NICErrorCode,
    nic_type: NICType | None,
    config: NICConfig,
) -> tuple[None, NICError]:
    # Never log the NIC number itself
    logger.debug(
        "NIC rejected: %s (format=%s)",
        code.value,
        nic_type.value if nic_type else "unknown",
    )
    return None, NICError(code, config=config)


# --- Conversion ---


def convert_parts(nic_type: NICType, parts: NICParts) -> str:
    """
    Convert NIC fields to the opposite format.

    OLD -> NEW always succeeds; the 4th serial digit is a synthesized "0".
    NEW -> OLD needs a 19xx year and a serial starting with "0". The voter
    letter is not recoverable, so the result always ends in "V".

    Raises:
        NICError: INVALID_YEAR_FOR_OLD_FORMAT_CONVERSION or
            SERIAL_NUMBER_TOO_LARGE_FOR_OLD_FORMAT
    """
    year, days, serial, checkdigit = parts.year, parts.days, parts.serial, parts.checkdigit

    if nic_type is NICType.OLD:
        return f"{year}{days}0{serial}{checkdigit}"

    if not year.startswith("19"):
        raise NICError(NICErrorCode.INVALID_YEAR_FOR_OLD_FORMAT_CONVERSION, year)

    if not serial.startswith("0"):
        raise NICError(NICErrorCode.SERIAL_NUMBER_TOO_LARGE_FOR_OLD_FORMAT, serial)

    return f"{year[2:]}{days}{serial[1:]}{checkdigit}V"
