"""Rules file loading for NIC validation thresholds."""

from .loader import DEFAULT_RULES_PATH, RULES_PATH_ENV, init_rules, load_rules, resolve_rules_path
from .models import NICRules, NICRulesSection

__all__ = [
    "DEFAULT_RULES_PATH",
    "NICRules",
    "NICRulesSection",
    "RULES_PATH_ENV",
    "init_rules",
    "load_rules",
    "resolve_rules_path",
]
