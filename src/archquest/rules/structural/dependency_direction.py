"""
Dependency-direction rule.

Re-checks the layer legality table against the connections actually
stored in a structure. Connections built through
LayerStructure.create_connection are already legal; this catches
structures rehydrated through LayerStructure.restore.
"""

from archquest.domain.interfaces import RuleInterface
from archquest.domain.layer_structure import LayerStructure, check_dependency
from archquest.domain.models import Violation, ViolationType


class DependencyDirectionRule(RuleInterface):
    """One DEPENDENCY_VIOLATION per stored connection that points the wrong way."""

    def check(self, structure: LayerStructure) -> list[Violation]:
        violations: list[Violation] = []

        for connection in structure.get_connections():
            source = structure.get_block(connection.source)
            target = structure.get_block(connection.target)
            if source is None or target is None:
                continue

            reason = check_dependency(source.layer_id, target.layer_id)
            if reason is None:
                continue

            violations.append(
                Violation(
                    type=ViolationType.DEPENDENCY_VIOLATION.value,
                    message=f"{reason}: {source.block.name} -> {target.block.name}",
                    details={
                        "source": connection.source,
                        "target": connection.target,
                        "source_layer": source.layer_id.value,
                        "target_layer": target.layer_id.value,
                    },
                )
            )

        return violations
