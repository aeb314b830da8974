"""
Rule configuration loading.

Reads per-rule overrides from a JSON file or an in-memory mapping,
validates the document against rule_config.schema.json, and merges it
over DEFAULT_RULE_CONFIGS. The result is immutable.

Example rules.json:

    {
      "enabled_rules": ["NO_CYCLIC_DEPENDENCY", "NO_FAT_SERVICE"],
      "rules": {
        "NO_FAT_SERVICE": {"params": {"max_methods": 15}}
      }
    }
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

import jsonschema

from archquest.domain.exceptions import RuleConfigError
from archquest.domain.rules import (
    DEFAULT_RULE_CONFIGS,
    STANDARD_RULES,
    RuleConfig,
    ValidationRule,
    parse_rule_list,
)
from archquest.infrastructure.json_document import read_json_document
from archquest.schemas import validate_rule_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleSettings:
    """Rules to run (in order) and the configuration for every rule."""

    rules: tuple[ValidationRule, ...]
    configs: Mapping[ValidationRule, RuleConfig]


def load_rule_settings(source: str | Path | Mapping[str, Any]) -> RuleSettings:
    """
    Load and validate a rule configuration document.

    Args:
        source: Path to a JSON file, or an already-parsed mapping

    Returns:
        RuleSettings with overrides merged over the defaults (params are
        merged key-wise, so partial overrides keep the other defaults)

    Raises:
        RuleConfigError: If the file is missing, not JSON, or fails the schema
    """
    data = read_json_document(source, RuleConfigError, "Rule configuration")
    try:
        validate_rule_config(data)
    except jsonschema.ValidationError as e:
        raise RuleConfigError(f"Invalid rule configuration: {e.message}") from e

    configs = dict(DEFAULT_RULE_CONFIGS)
    for name, override in data.get("rules", {}).items():
        rule = ValidationRule(name)
        configs[rule] = configs[rule].merged(
            enabled=override.get("enabled"),
            severity=override.get("severity"),
            params=override.get("params"),
        )

    rules = parse_rule_list(data.get("enabled_rules", STANDARD_RULES))
    logger.debug(
        "Loaded rule settings: %s",
        ", ".join(f"{r.value}={'on' if configs[r].enabled else 'off'}" for r in rules),
    )
    return RuleSettings(rules=rules, configs=MappingProxyType(configs))


def load_rule_configs(
    source: str | Path | Mapping[str, Any],
) -> Mapping[ValidationRule, RuleConfig]:
    """Configuration half of load_rule_settings."""
    return load_rule_settings(source).configs
