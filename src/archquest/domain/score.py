"""
Scoring value objects.

Two independent scoring paths that happen to share the [0, 100] range:

- calculate_penalty_score: 100 minus fixed per-violation-type penalties.
  This is the score attached to a ValidationResult.
- Score.calculate: weighted blend of four externally judged metrics, with
  multiplicative bonuses applied on top.
"""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields
from enum import Enum
from types import MappingProxyType

from archquest.domain.exceptions import MetricOutOfRange, ScoreOutOfRange
from archquest.domain.models import Violation, ViolationType

MIN_SCORE = 0
MAX_SCORE = 100

VIOLATION_PENALTIES: Mapping[str, int] = MappingProxyType(
    {
        ViolationType.CYCLIC_DEPENDENCY.value: 30,
        ViolationType.DEPENDENCY_VIOLATION.value: 20,
        ViolationType.DTO_PURITY_VIOLATION.value: 15,
        ViolationType.PRESENTATION_TO_INFRA.value: 15,
        ViolationType.FAT_SERVICE.value: 10,
    }
)
UNCLASSIFIED_PENALTY = 5


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity (82.5 -> 83)."""
    return math.floor(value + 0.5)


def penalty_for(violation_type: str) -> int:
    tag = getattr(violation_type, "value", violation_type)
    return VIOLATION_PENALTIES.get(tag, UNCLASSIFIED_PENALTY)


def calculate_penalty_score(violations: Iterable[Violation]) -> int:
    """
    Convert violations into a 0-100 score.

    The running total may go negative; only the final value is clamped.
    """
    score = MAX_SCORE
    for violation in violations:
        score -= penalty_for(violation.type)
    return max(MIN_SCORE, min(MAX_SCORE, score))


# =============================================================================
# WEIGHTED COMPOSITE SCORE
# =============================================================================


@dataclass(frozen=True)
class Metrics:
    """Externally judged quality metrics, each in [0, 100]."""

    accuracy: float
    efficiency: float
    maintainability: float
    speed: float


METRIC_WEIGHTS: Mapping[str, float] = MappingProxyType(
    {
        "accuracy": 0.35,
        "efficiency": 0.25,
        "maintainability": 0.25,
        "speed": 0.15,
    }
)


class BonusType(str, Enum):
    NO_HINTS = "NO_HINTS"
    NO_ANTIPATTERNS = "NO_ANTIPATTERNS"


@dataclass(frozen=True)
class Bonus:
    """Multiplicative score adjustment (1.05 = +5%)."""

    type: BonusType
    multiplier: float


@dataclass(frozen=True)
class Score:
    """Immutable composite score in [0, 100]."""

    value: int

    def __post_init__(self) -> None:
        if not MIN_SCORE <= self.value <= MAX_SCORE:
            raise ScoreOutOfRange(
                f"Score must be between {MIN_SCORE} and {MAX_SCORE}, got {self.value}",
                self.value,
            )

    @classmethod
    def calculate(cls, metrics: Metrics) -> "Score":
        """
        Weighted blend: accuracy 35%, efficiency 25%, maintainability 25%,
        speed 15%, rounded half-up.

        Raises:
            MetricOutOfRange: If any metric is outside [0, 100]; checked
                before anything is computed.
        """
        for metric in fields(metrics):
            value = getattr(metrics, metric.name)
            if not MIN_SCORE <= value <= MAX_SCORE:
                raise MetricOutOfRange(metric.name, value)

        weighted_sum = (
            metrics.accuracy * METRIC_WEIGHTS["accuracy"]
            + metrics.efficiency * METRIC_WEIGHTS["efficiency"]
            + metrics.maintainability * METRIC_WEIGHTS["maintainability"]
            + metrics.speed * METRIC_WEIGHTS["speed"]
        )
        return cls(round_half_up(weighted_sum))

    def add_bonus(self, bonus: Bonus) -> "Score":
        """
        Apply one bonus; the product is re-rounded half-up.

        Raises:
            ScoreOutOfRange: If the boosted score leaves [0, 100] or is not
                a finite number
        """
        product = self.value * bonus.multiplier
        boosted = round_half_up(product) if math.isfinite(product) else product
        if not MIN_SCORE <= boosted <= MAX_SCORE:
            raise ScoreOutOfRange(
                f"Score {self.value} with bonus {bonus.type.value} "
                f"(x{bonus.multiplier}) must stay between {MIN_SCORE} and "
                f"{MAX_SCORE}, got {boosted}",
                boosted,
            )
        return Score(boosted)

    def apply_bonuses(self, *bonuses: Bonus) -> "Score":
        """Apply bonuses left to right. Order matters because each step rounds."""
        score = self
        for bonus in bonuses:
            score = score.add_bonus(bonus)
        return score
