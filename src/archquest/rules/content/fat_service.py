"""
No-fat-service rule (God class detection).
"""

from archquest.domain.interfaces import RuleInterface
from archquest.domain.layer_structure import LayerStructure
from archquest.domain.models import BlockType, Violation, ViolationType
from archquest.domain.rules import RuleConfig

DEFAULT_MAX_METHODS = 20
DEFAULT_MAX_LINES = 200


class NoFatServiceRule(RuleInterface):
    """
    Flags Service blocks that have grown too large.

    Two independent checks per service, each its own FAT_SERVICE violation:
    - more than ``max_methods`` methods (one violation)
    - any method longer than ``max_lines`` lines (one violation per method)
    """

    def __init__(self, config: RuleConfig):
        super().__init__(config)
        # falsy values (0, None) fall back to the defaults
        self.max_methods = int(config.param("max_methods") or DEFAULT_MAX_METHODS)
        self.max_lines = int(config.param("max_lines") or DEFAULT_MAX_LINES)

    def check(self, structure: LayerStructure) -> list[Violation]:
        violations: list[Violation] = []

        for placement in structure.get_all_blocks():
            block = placement.block
            if block.block_type is not BlockType.SERVICE:
                continue

            method_count = len(block.methods)
            if method_count > self.max_methods:
                violations.append(
                    Violation(
                        type=ViolationType.FAT_SERVICE.value,
                        message=(
                            f'Service "{block.name}" has too many methods '
                            f"({method_count}, threshold: {self.max_methods})"
                        ),
                        details={
                            "service": block.name,
                            "method_count": method_count,
                            "threshold": self.max_methods,
                        },
                    )
                )

            for method in block.methods:
                if method.lines <= self.max_lines:
                    continue
                violations.append(
                    Violation(
                        type=ViolationType.FAT_SERVICE.value,
                        message=(
                            f'Service "{block.name}" method "{method.name}" is too long '
                            f"({method.lines} lines, threshold: {self.max_lines})"
                        ),
                        details={
                            "service": block.name,
                            "method": method.name,
                            "lines": method.lines,
                            "threshold": self.max_lines,
                        },
                    )
                )

        return violations
