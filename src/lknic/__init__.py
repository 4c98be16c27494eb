"""
lknic - Sri Lankan National Identity Card (NIC) number decoder.

    >>> import lknic
    >>> nic = lknic.parse("911042754V")
    >>> nic.convert()
    '199110402754'
"""

from lknic.adapters.time_colombo import ColomboTimeAdapter, FrozenTimeAdapter
from lknic.components.nic import (
    NIC,
    Birthday,
    Gender,
    NICConfig,
    NICError,
    NICErrorCode,
    NICParts,
    NICStr,
    NICType,
    TimePort,
    ValidationResult,
    configure,
    days_in_year,
    get_config,
    is_leap,
    is_valid,
    parse,
    reset_config,
    sanitize,
    validate,
)
from lknic.rules import init_rules, load_rules

__version__ = "1.0.0"

__all__ = [
    "NIC",
    "Birthday",
    "ColomboTimeAdapter",
    "FrozenTimeAdapter",
    "Gender",
    "NICConfig",
    "NICError",
    "NICErrorCode",
    "NICParts",
    "NICStr",
    "NICType",
    "TimePort",
    "ValidationResult",
    "__version__",
    "configure",
    "days_in_year",
    "get_config",
    "init_rules",
    "is_leap",
    "is_valid",
    "load_rules",
    "parse",
    "reset_config",
    "sanitize",
    "validate",
]
