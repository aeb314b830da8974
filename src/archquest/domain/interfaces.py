"""
Domain interfaces (Ports) for the architecture validation engine.

These abstract base classes define the contracts that rule
implementations must satisfy. They have no external dependencies.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archquest.domain.layer_structure import LayerStructure
    from archquest.domain.models import Violation
    from archquest.domain.rules import RuleConfig


class RuleInterface(ABC):
    """
    Port for a single architecture rule.

    Rules are read-only inspections: they look at a LayerStructure and
    report zero or more violations. They must never mutate the structure
    and must return violations in a stable order.
    """

    def __init__(self, config: "RuleConfig"):
        """
        Args:
            config: This rule's configuration (read-only)
        """
        self.config = config

    @abstractmethod
    def check(self, structure: "LayerStructure") -> list["Violation"]:
        """
        Inspect a structure.

        Args:
            structure: The structure to inspect

        Returns:
            Violations found, in a deterministic order (empty if none)
        """
        pass
