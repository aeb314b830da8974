"""
Domain layer for the architecture validation engine.

Contains the graph model, cycle detection and scoring with no external
dependencies.
"""

from archquest.domain.cycles import CycleDetector, find_cycles
from archquest.domain.exceptions import (
    ArchQuestError,
    BlockNotFound,
    DuplicateBlock,
    MetricOutOfRange,
    RuleConfigError,
    ScoreOutOfRange,
    StructureFileError,
)
from archquest.domain.interfaces import RuleInterface
from archquest.domain.layer_structure import (
    LayerStructure,
    check_dependency,
    check_placement,
)
from archquest.domain.models import (
    BlockMethod,
    BlockPlacement,
    BlockProperty,
    BlockType,
    CodeBlock,
    Connection,
    FailureKind,
    Layer,
    LayerId,
    Result,
    ValidationResult,
    Violation,
    ViolationType,
)
from archquest.domain.rules import (
    DEFAULT_RULE_CONFIGS,
    STANDARD_RULES,
    RuleConfig,
    Severity,
    ValidationRule,
    parse_rule_list,
)
from archquest.domain.score import (
    VIOLATION_PENALTIES,
    Bonus,
    BonusType,
    Metrics,
    Score,
    calculate_penalty_score,
    round_half_up,
)

__all__ = [
    # Models
    "LayerId",
    "Layer",
    "BlockType",
    "BlockProperty",
    "BlockMethod",
    "CodeBlock",
    "Connection",
    "BlockPlacement",
    "FailureKind",
    "Result",
    "ViolationType",
    "Violation",
    "ValidationResult",
    # Graph model
    "LayerStructure",
    "check_placement",
    "check_dependency",
    # Cycles
    "CycleDetector",
    "find_cycles",
    # Rules
    "ValidationRule",
    "Severity",
    "RuleConfig",
    "DEFAULT_RULE_CONFIGS",
    "STANDARD_RULES",
    "parse_rule_list",
    # Scoring
    "VIOLATION_PENALTIES",
    "calculate_penalty_score",
    "round_half_up",
    "Metrics",
    "Bonus",
    "BonusType",
    "Score",
    # Interfaces
    "RuleInterface",
    # Exceptions
    "ArchQuestError",
    "ScoreOutOfRange",
    "MetricOutOfRange",
    "BlockNotFound",
    "DuplicateBlock",
    "RuleConfigError",
    "StructureFileError",
]
