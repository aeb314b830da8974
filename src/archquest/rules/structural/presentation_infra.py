"""
No-presentation-to-infrastructure rule.

Independent of the direction table: flags every connection from a
presentation block straight to an infrastructure block.
"""

from archquest.domain.interfaces import RuleInterface
from archquest.domain.layer_structure import LayerStructure
from archquest.domain.models import LayerId, Violation, ViolationType


class NoPresentationToInfraRule(RuleInterface):
    def check(self, structure: LayerStructure) -> list[Violation]:
        violations: list[Violation] = []

        for connection in structure.get_connections():
            source = structure.get_block(connection.source)
            target = structure.get_block(connection.target)
            if source is None or target is None:
                continue
            if (
                source.layer_id is not LayerId.PRESENTATION
                or target.layer_id is not LayerId.INFRASTRUCTURE
            ):
                continue

            violations.append(
                Violation(
                    type=ViolationType.PRESENTATION_TO_INFRA.value,
                    message=(
                        f'Presentation "{source.block.name}" depends directly '
                        f'on infrastructure "{target.block.name}"'
                    ),
                    details={"source": connection.source, "target": connection.target},
                )
            )

        return violations
