"""
No-cyclic-dependency rule.

Delegates to the cycle detector and reports one violation per cycle.
"""

from archquest.domain.cycles import CycleDetector
from archquest.domain.interfaces import RuleInterface
from archquest.domain.layer_structure import LayerStructure
from archquest.domain.models import Violation, ViolationType


class NoCyclicDependencyRule(RuleInterface):
    """One CYCLIC_DEPENDENCY per cycle reported by CycleDetector."""

    def check(self, structure: LayerStructure) -> list[Violation]:
        return [
            Violation(
                type=ViolationType.CYCLIC_DEPENDENCY.value,
                message=f"Cyclic dependency detected: {' -> '.join(cycle)}",
                details={"cycle": tuple(cycle)},
            )
            for cycle in CycleDetector().detect(structure)
        ]
