"""
DTO purity rule.

A DTO carries data across layer boundaries and must not leak UI concerns
such as event handlers or DOM event types into its properties.
"""

from archquest.domain.interfaces import RuleInterface
from archquest.domain.layer_structure import LayerStructure
from archquest.domain.models import BlockType, Violation, ViolationType
from archquest.domain.rules import RuleConfig


class DtoPurityRule(RuleInterface):
    """
    One DTO_PURITY_VIOLATION per DTO property whose type mentions a UI marker.

    Matching is a plain substring test on the declared type string.
    Extra markers can be supplied through the ``ui_markers`` param.
    """

    UI_MARKERS: tuple[str, ...] = (
        "onClick",
        "onSubmit",
        "onChange",
        "onFocus",
        "onBlur",
        "() => void",
        "EventHandler",
        "MouseEvent",
        "KeyboardEvent",
        "FormEvent",
        "ChangeEvent",
        "FocusEvent",
    )

    def __init__(self, config: RuleConfig):
        super().__init__(config)
        extra = tuple(config.param("ui_markers", ()) or ())
        self.markers = self.UI_MARKERS + tuple(m for m in extra if m not in self.UI_MARKERS)

    def is_ui_related(self, type_signature: str) -> bool:
        return any(marker in type_signature for marker in self.markers)

    def check(self, structure: LayerStructure) -> list[Violation]:
        violations: list[Violation] = []

        for placement in structure.get_all_blocks():
            block = placement.block
            if block.block_type is not BlockType.DTO:
                continue

            for prop in block.properties:
                if not self.is_ui_related(prop.type):
                    continue
                violations.append(
                    Violation(
                        type=ViolationType.DTO_PURITY_VIOLATION.value,
                        message=f"DTO contains UI concerns: {block.name}.{prop.name}",
                        details={"dto": block.name, "property": prop.name, "type": prop.type},
                    )
                )

        return violations
