"""
Application layer for the architecture validation engine.

Contains the rule engine and the scoring facade that coordinate domain objects.
"""

from archquest.application.scoring_service import ScoringService
from archquest.application.validator import ArchitectureValidator

__all__ = [
    "ArchitectureValidator",
    "ScoringService",
]
