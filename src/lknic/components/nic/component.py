"""
NIC component - Sri Lankan National Identity Card decoding.

Validates OLD (9 digits + V/X) and NEW (12 digits) NIC numbers, decodes
birth date and gender, and converts between the formats.

Invariants:
- I1: A NIC record exists only if every validation check passed
- I2: validate() and is_valid() never raise for string input
- I3: parse() and sanitize() raise NICError with the first failing check
- I4: Records are immutable; config changes do not affect parsed records

All entry points accept keyword-only overrides:
- config: thresholds to validate against (default: get_config())
- clock: TimePort used for "today" (default: Asia/Colombo system clock)
"""

from __future__ import annotations

from ._impl import run_validator
from .config import NICConfig
from .models import ValidationResult
from .ports import TimePort
from .record import NIC


def validate(
    nic: str,
    *,
    config: NICConfig | None = None,
    clock: TimePort | None = None,
) -> ValidationResult:
    """
    Validate a NIC and report why it failed.

    Args:
        nic: Raw NIC string (surrounding whitespace and case are ignored).
        config: Optional validation thresholds.
        clock: Optional time port.

    Returns:
        ValidationResult with valid=True, or valid=False and the NICError.
    """
    decoded, error = run_validator(nic, config, clock)
    if decoded is None:
        return ValidationResult(valid=False, error=error)
    return ValidationResult(valid=True)


def is_valid(
    nic: str,
    *,
    config: NICConfig | None = None,
    clock: TimePort | None = None,
) -> bool:
    """Check whether a NIC is valid."""
    return validate(nic, config=config, clock=clock).valid


def sanitize(
    nic: str,
    *,
    config: NICConfig | None = None,
    clock: TimePort | None = None,
) -> str:
    """
    Validate a NIC and return its canonical (trimmed, uppercased) form.

    Raises:
        NICError: If the NIC is invalid.
    """
    decoded, error = run_validator(nic, config, clock)
    if decoded is None:
        assert error is not None
        raise error
    return decoded.nic


def parse(
    nic: str,
    *,
    config: NICConfig | None = None,
    clock: TimePort | None = None,
) -> NIC:
    """
    Parse a NIC into a validated record.

    Args:
        nic: Raw NIC string.
        config: Optional validation thresholds.
        clock: Optional time port, also used by the record's age.

    Returns:
        Immutable NIC record.

    Raises:
        NICError: If the NIC is invalid.
    """
    decoded, error = run_validator(nic, config, clock)
    if decoded is None:
        assert error is not None
        raise error
    return NIC.from_decoded(decoded, clock=clock)
