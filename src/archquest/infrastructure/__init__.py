"""
Infrastructure layer for the architecture validation engine.

Contains adapters for external concerns (configuration and structure files).
"""

from archquest.infrastructure.config import (
    RuleSettings,
    load_rule_configs,
    load_rule_settings,
)
from archquest.infrastructure.structure_file import load_structure

__all__ = [
    "RuleSettings",
    "load_rule_configs",
    "load_rule_settings",
    "load_structure",
]
