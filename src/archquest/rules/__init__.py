"""
Rules for the architecture validator.

Rules are read-only inspections that return zero or more violations.
The set is closed: RULE_CLASSES maps every ValidationRule to exactly one
implementation, and the validator dispatches through that table.

Organization by what a rule inspects:
- structural/: The connection graph (direction, cycles, layer skipping)
- content/: Declarations inside blocks (DTO properties, service size)
"""

from collections.abc import Mapping
from types import MappingProxyType

from archquest.domain.interfaces import RuleInterface
from archquest.domain.rules import RuleConfig, ValidationRule
from archquest.rules.content import DtoPurityRule, NoFatServiceRule
from archquest.rules.structural import (
    DependencyDirectionRule,
    NoCyclicDependencyRule,
    NoPresentationToInfraRule,
)

RULE_CLASSES: Mapping[ValidationRule, type[RuleInterface]] = MappingProxyType(
    {
        ValidationRule.NO_DEPENDENCY_VIOLATION: DependencyDirectionRule,
        ValidationRule.NO_CYCLIC_DEPENDENCY: NoCyclicDependencyRule,
        ValidationRule.NO_PRESENTATION_TO_INFRA: NoPresentationToInfraRule,
        ValidationRule.NO_UI_IN_DTO: DtoPurityRule,
        ValidationRule.NO_FAT_SERVICE: NoFatServiceRule,
    }
)


def build_rule(rule: ValidationRule, config: RuleConfig) -> RuleInterface:
    """Instantiate the implementation for ``rule`` with its configuration."""
    return RULE_CLASSES[ValidationRule(rule)](config)


__all__ = [
    # Structural rules
    "DependencyDirectionRule",
    "NoCyclicDependencyRule",
    "NoPresentationToInfraRule",
    # Content rules
    "DtoPurityRule",
    "NoFatServiceRule",
    # Dispatch
    "RULE_CLASSES",
    "build_rule",
]
