"""
ArchitectureValidator: runs the configured rules against a structure.

Evaluates rules in the order given, skips disabled ones, and accumulates
every violation (no short-circuit) before computing the penalty score.
"""

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from archquest.domain.interfaces import RuleInterface
from archquest.domain.layer_structure import LayerStructure
from archquest.domain.models import ValidationResult, Violation
from archquest.domain.rules import (
    DEFAULT_RULE_CONFIGS,
    STANDARD_RULES,
    RuleConfig,
    ValidationRule,
)
from archquest.rules import build_rule

logger = logging.getLogger(__name__)


class ArchitectureValidator:
    """
    Rule engine over a LayerStructure.

    Configuration is fixed at construction. ``validate`` is a pure read-only
    inspection: the same structure and configuration always yield the same
    violations in the same order.
    """

    def __init__(
        self,
        rules: Iterable[ValidationRule] = STANDARD_RULES,
        rule_configs: Mapping[ValidationRule, RuleConfig] | None = None,
    ):
        """
        Args:
            rules: Rules to run, in evaluation order
            rule_configs: Per-rule configuration; rules missing from the
                mapping use DEFAULT_RULE_CONFIGS
        """
        self._rules = tuple(ValidationRule(rule) for rule in rules)
        configs = dict(DEFAULT_RULE_CONFIGS)
        for rule, config in (rule_configs or {}).items():
            configs[ValidationRule(rule)] = config
        self._configs: Mapping[ValidationRule, RuleConfig] = MappingProxyType(configs)
        self._checks: tuple[tuple[ValidationRule, RuleInterface], ...] = tuple(
            (rule, build_rule(rule, self._configs[rule]))
            for rule in self._rules
            if self._configs[rule].enabled
        )

    @property
    def rules(self) -> tuple[ValidationRule, ...]:
        """Configured rules, in evaluation order (including disabled ones)."""
        return self._rules

    @property
    def rule_configs(self) -> Mapping[ValidationRule, RuleConfig]:
        return self._configs

    @property
    def enabled_rules(self) -> tuple[ValidationRule, ...]:
        return tuple(rule for rule, _ in self._checks)

    def validate(self, structure: LayerStructure) -> ValidationResult:
        """
        Run every enabled rule against ``structure``.

        Returns:
            ValidationResult with all violations in rule order and the
            violation-penalty score
        """
        violations: list[Violation] = []

        for rule, check in self._checks:
            found = check.check(structure)
            if found:
                logger.debug("%s: %d violation(s)", rule.value, len(found))
            violations.extend(found)

        result = ValidationResult.from_violations(violations)
        logger.info(
            "Validated %d block(s), %d connection(s): %d violation(s), score %d",
            len(structure),
            len(structure.get_connections()),
            len(result.violations),
            result.score,
        )
        return result
