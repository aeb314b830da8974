"""
Structural rules - inspect the connection graph.
"""

from archquest.rules.structural.cycles import NoCyclicDependencyRule
from archquest.rules.structural.dependency_direction import DependencyDirectionRule
from archquest.rules.structural.presentation_infra import NoPresentationToInfraRule

__all__ = [
    "DependencyDirectionRule",
    "NoCyclicDependencyRule",
    "NoPresentationToInfraRule",
]
