"""
NIC component - Sri Lankan National Identity Card decoding.
"""

from ._calendar import age_on, birthday_from_day_of_year, days_in_year, is_leap, today
from ._impl import convert_parts, detect_type, normalize, run_validator
from ._parts import get_nic_parts
from .component import is_valid, parse, sanitize, validate
from .config import (
    DEFAULT_CONFIG,
    NICConfig,
    configure,
    get_config,
    reset_config,
    set_config,
)
from .errors import NICError, NICErrorCode, render_message
from .fields import NICStr
from .models import Birthday, DecodedNIC, Gender, NICParts, NICType, ValidationResult
from .ports import TimePort
from .record import NIC

__all__ = [
    # Entry points
    "is_valid",
    "parse",
    "sanitize",
    "validate",
    # Models
    "Birthday",
    "DecodedNIC",
    "Gender",
    "NIC",
    "NICParts",
    "NICStr",
    "NICType",
    "ValidationResult",
    # Errors
    "NICError",
    "NICErrorCode",
    "render_message",
    # Config
    "DEFAULT_CONFIG",
    "NICConfig",
    "configure",
    "get_config",
    "reset_config",
    "set_config",
    # Ports
    "TimePort",
    # _impl re-exports
    "age_on",
    "birthday_from_day_of_year",
    "convert_parts",
    "days_in_year",
    "detect_type",
    "get_nic_parts",
    "is_leap",
    "normalize",
    "run_validator",
    "today",
]
