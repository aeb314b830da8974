"""Archquest JSON Schema definitions and validation utilities.

Schemas:
    - rule_config.schema.json: Per-rule overrides (enabled, severity, params)
      and the ordered list of rules to run
    - structure.schema.json: Blocks placed into layers and the connections
      between them

Usage:
    from archquest.schemas import validate_rule_config

    with open("rules.json") as f:
        data = json.load(f)
    validate_rule_config(data)  # Raises jsonschema.ValidationError if invalid
"""

from __future__ import annotations

import json
from importlib.resources import files
from typing import Any

import jsonschema


def _load_schema(name: str) -> dict[str, Any]:
    """Load a JSON schema from the schemas package.

    Args:
        name: Schema filename (e.g., 'rule_config.schema.json')

    Returns:
        Parsed JSON schema as a dictionary
    """
    schema_text = files("archquest.schemas").joinpath(name).read_text()
    result: dict[str, Any] = json.loads(schema_text)
    return result


def get_rule_config_schema() -> dict[str, Any]:
    """Get the rule_config.json schema."""
    return _load_schema("rule_config.schema.json")


def get_structure_schema() -> dict[str, Any]:
    """Get the structure.json schema."""
    return _load_schema("structure.schema.json")


def validate_rule_config(data: dict[str, Any]) -> None:
    """Validate a rule configuration document against the schema.

    Args:
        data: Rule configuration dictionary

    Raises:
        jsonschema.ValidationError: If validation fails
    """
    jsonschema.validate(data, get_rule_config_schema())


def validate_structure(data: dict[str, Any]) -> None:
    """Validate a structure document against the schema.

    Args:
        data: Structure dictionary

    Raises:
        jsonschema.ValidationError: If validation fails
    """
    jsonschema.validate(data, get_structure_schema())


__all__ = [
    "get_rule_config_schema",
    "get_structure_schema",
    "validate_rule_config",
    "validate_structure",
]
