"""
ScoringService: outcome-value facade over the domain scoring objects.

Domain value objects raise on invalid input; callers of the engine get a
Result instead, so a bad metric never escapes as an uncaught fault.
"""

import logging
from collections.abc import Iterable, Mapping

from archquest.application.validator import ArchitectureValidator
from archquest.domain.exceptions import ScoreOutOfRange
from archquest.domain.layer_structure import LayerStructure
from archquest.domain.models import FailureKind, Result, ValidationResult
from archquest.domain.rules import STANDARD_RULES, RuleConfig, ValidationRule
from archquest.domain.score import Bonus, Metrics, Score

logger = logging.getLogger(__name__)


class ScoringService:
    """Entry points used by session orchestration and API handlers."""

    def __init__(
        self,
        rule_configs: Mapping[ValidationRule, RuleConfig] | None = None,
    ):
        """
        Args:
            rule_configs: Configuration passed to every validator this
                service builds (defaults apply to missing rules)
        """
        self._rule_configs = rule_configs

    def validate(
        self,
        structure: LayerStructure,
        rules: Iterable[ValidationRule] = STANDARD_RULES,
    ) -> ValidationResult:
        """Validate with a fresh ArchitectureValidator."""
        return ArchitectureValidator(rules, self._rule_configs).validate(structure)

    def weighted_score(self, metrics: Metrics) -> Result[Score]:
        """Composite score, or METRIC_OUT_OF_RANGE if any metric is outside [0, 100]."""
        try:
            return Result.ok(Score.calculate(metrics))
        except ScoreOutOfRange as e:
            logger.debug("Rejected metrics %s: %s", metrics, e)
            return Result.fail(FailureKind.METRIC_OUT_OF_RANGE, str(e))

    def apply_bonuses(self, score: Score, *bonuses: Bonus) -> Result[Score]:
        """Apply bonuses in order, or fail if a step leaves [0, 100]."""
        try:
            return Result.ok(score.apply_bonuses(*bonuses))
        except ScoreOutOfRange as e:
            return Result.fail(FailureKind.METRIC_OUT_OF_RANGE, str(e))
