"""
NIC validation thresholds.

Provides the NICConfig value object and the process-wide default used when
an operation is called without an explicit config.

Concurrency: the default is swapped as a whole (configs are immutable), so a
validation call always sees one consistent config. Callers that change the
default at runtime must serialize their own read-modify-write sequences;
this module does not lock.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

# "Every person who is a citizen of Sri Lanka and who has attained or attains
# the age of 15 years shall apply for a National Identity card."
# https://drp.gov.lk/en/normal.php
DEFAULT_MINIMUM_LEGAL_AGE = 15
DEFAULT_OLDEST_VALID_BIRTH_YEAR = 1901


@dataclass(frozen=True)
class NICConfig:
    """Validation thresholds."""

    minimum_legal_age: int = DEFAULT_MINIMUM_LEGAL_AGE
    oldest_valid_birth_year: int = DEFAULT_OLDEST_VALID_BIRTH_YEAR

    def __post_init__(self) -> None:
        if self.minimum_legal_age < 0:
            raise ValueError(f"minimum_legal_age must be >= 0, got {self.minimum_legal_age}")
        if self.oldest_valid_birth_year < 1:
            raise ValueError(
                f"oldest_valid_birth_year must be >= 1, got {self.oldest_valid_birth_year}"
            )


DEFAULT_CONFIG = NICConfig()

# Process-wide default
_active_config: NICConfig = DEFAULT_CONFIG


def get_config() -> NICConfig:
    """Get the process-wide default config."""
    return _active_config


def set_config(config: NICConfig) -> NICConfig:
    """Replace the process-wide default config."""
    global _active_config
    _active_config = config
    return _active_config


def configure(
    *,
    minimum_legal_age: int | None = None,
    oldest_valid_birth_year: int | None = None,
) -> NICConfig:
    """
    Update one or both thresholds of the process-wide default.

    Records that were already parsed are not re-validated.

    Returns:
        The new default config.
    """
    changes: dict[str, int] = {}
    if minimum_legal_age is not None:
        changes["minimum_legal_age"] = minimum_legal_age
    if oldest_valid_birth_year is not None:
        changes["oldest_valid_birth_year"] = oldest_valid_birth_year

    return set_config(replace(_active_config, **changes))


def reset_config() -> None:
    """Restore the documented defaults (for testing)."""
    set_config(DEFAULT_CONFIG)
