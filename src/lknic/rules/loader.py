"""
NIC rules loader.

Reads validation thresholds from a YAML rules file and installs them as the
process-wide default config.

Path resolution (first match wins):
1. Explicit path argument
2. LKNIC_RULES_PATH environment variable
3. nic_rules.yaml at the project root
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from lknic.components.nic.config import NICConfig, set_config
from lknic.rules.models import NICRules

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = "nic_rules.yaml"
RULES_PATH_ENV = "LKNIC_RULES_PATH"


def _find_project_root() -> Path:
    """Find project root by looking for marker files."""
    current = Path.cwd()

    # Walk up looking for pyproject.toml or .git
    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return current


def resolve_rules_path(rules_path: Path | str | None = None) -> Path:
    """Resolve the rules file location."""
    if rules_path is not None:
        return Path(rules_path)

    env_path = os.environ.get(RULES_PATH_ENV)
    if env_path:
        return Path(env_path)

    return _find_project_root() / DEFAULT_RULES_PATH


def load_rules(rules_path: Path | str | None = None) -> NICRules:
    """
    Load and validate the rules file.

    Raises:
        FileNotFoundError: If the rules file is missing.
        ValueError: If the file is not valid YAML or fails schema validation.
    """
    path = resolve_rules_path(rules_path)
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return NICRules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e


def init_rules(rules_path: Path | str | None = None) -> NICConfig:
    """
    Load the rules file and make it the process-wide default config.

    Call once at startup, before validating NICs.

    Returns:
        The installed config.
    """
    path = resolve_rules_path(rules_path)
    rules = load_rules(path)
    config = set_config(rules.nic.to_config())
    logger.info(
        "Applied NIC rules from %s (minimum_legal_age=%d, oldest_valid_birth_year=%d)",
        path,
        config.minimum_legal_age,
        config.oldest_valid_birth_year,
    )
    return config
