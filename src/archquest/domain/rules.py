"""
Rule catalogue and per-rule configuration.

The rule set is closed: ValidationRule enumerates every rule the engine
knows about, and each rule is configured by an immutable RuleConfig.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any


class ValidationRule(str, Enum):
    """Rules the architecture validator can run."""

    NO_DEPENDENCY_VIOLATION = "NO_DEPENDENCY_VIOLATION"
    NO_CYCLIC_DEPENDENCY = "NO_CYCLIC_DEPENDENCY"
    NO_PRESENTATION_TO_INFRA = "NO_PRESENTATION_TO_INFRA"
    NO_UI_IN_DTO = "NO_UI_IN_DTO"
    NO_FAT_SERVICE = "NO_FAT_SERVICE"


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class RuleConfig:
    """Immutable configuration for one rule."""

    enabled: bool = True
    severity: Severity = Severity.ERROR
    params: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        object.__setattr__(self, "severity", Severity(self.severity))
        if not isinstance(self.params, MappingProxyType):
            object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def param(self, name: str, default: Any = None) -> Any:
        return self.params.get(name, default)

    def merged(
        self,
        enabled: bool | None = None,
        severity: Severity | str | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> "RuleConfig":
        """Copy with the given fields overridden; params merge key-wise."""
        return replace(
            self,
            enabled=self.enabled if enabled is None else enabled,
            severity=self.severity if severity is None else Severity(severity),
            params={**self.params, **(params or {})},
        )


DEFAULT_RULE_CONFIGS: Mapping[ValidationRule, RuleConfig] = MappingProxyType(
    {
        ValidationRule.NO_DEPENDENCY_VIOLATION: RuleConfig(),
        ValidationRule.NO_CYCLIC_DEPENDENCY: RuleConfig(),
        ValidationRule.NO_PRESENTATION_TO_INFRA: RuleConfig(),
        ValidationRule.NO_UI_IN_DTO: RuleConfig(),
        ValidationRule.NO_FAT_SERVICE: RuleConfig(
            severity=Severity.WARNING,
            params={"max_methods": 20, "max_lines": 200},
        ),
    }
)

# Rule order used by game submissions.
STANDARD_RULES: tuple[ValidationRule, ...] = (
    ValidationRule.NO_DEPENDENCY_VIOLATION,
    ValidationRule.NO_CYCLIC_DEPENDENCY,
    ValidationRule.NO_PRESENTATION_TO_INFRA,
    ValidationRule.NO_UI_IN_DTO,
    ValidationRule.NO_FAT_SERVICE,
)


def parse_rule_list(names: Iterable[str | ValidationRule]) -> tuple[ValidationRule, ...]:
    """
    Turn rule names into ValidationRules, preserving order.

    Raises:
        ValueError: If a name is not a known rule
    """
    return tuple(ValidationRule(name) for name in names)
