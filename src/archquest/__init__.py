"""
Archquest: layered-architecture validation and scoring engine.

A learner places code blocks into four fixed layers and wires dependency
connections between them; the engine judges the structure against
layered-architecture rules and assigns a reproducible 0-100 score.

Example:
    from archquest import (
        ArchitectureValidator,
        BlockType,
        CodeBlock,
        LayerId,
        LayerStructure,
    )

    structure = LayerStructure.create()
    view = CodeBlock("UserView", BlockType.UI_COMPONENT)
    service = CodeBlock("UserService", BlockType.SERVICE)
    structure.add_block(LayerId.PRESENTATION, view)
    structure.add_block(LayerId.APPLICATION, service)
    structure.create_connection(view.block_id, service.block_id)

    result = ArchitectureValidator().validate(structure)
    print(result.is_valid, result.score)
"""

# Application layer (rule engine and scoring facade)
from archquest.application import ArchitectureValidator, ScoringService

# Domain exceptions
from archquest.domain.exceptions import (
    ArchQuestError,
    BlockNotFound,
    DuplicateBlock,
    MetricOutOfRange,
    RuleConfigError,
    ScoreOutOfRange,
    StructureFileError,
)

# Graph model
from archquest.domain.layer_structure import LayerStructure
from archquest.domain.models import (
    BlockMethod,
    BlockProperty,
    BlockType,
    CodeBlock,
    Connection,
    FailureKind,
    LayerId,
    Result,
    ValidationResult,
    Violation,
    ViolationType,
)

# Rule catalogue
from archquest.domain.rules import (
    DEFAULT_RULE_CONFIGS,
    STANDARD_RULES,
    RuleConfig,
    Severity,
    ValidationRule,
)

# Scoring
from archquest.domain.score import Bonus, BonusType, Metrics, Score

# Infrastructure (explicit import encouraged for configuration loading)
from archquest.infrastructure import (
    load_rule_configs,
    load_rule_settings,
    load_structure,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Graph model
    "LayerStructure",
    "LayerId",
    "BlockType",
    "BlockProperty",
    "BlockMethod",
    "CodeBlock",
    "Connection",
    # Outcomes
    "Result",
    "FailureKind",
    "Violation",
    "ViolationType",
    "ValidationResult",
    # Rules
    "ValidationRule",
    "Severity",
    "RuleConfig",
    "DEFAULT_RULE_CONFIGS",
    "STANDARD_RULES",
    # Scoring
    "Metrics",
    "Bonus",
    "BonusType",
    "Score",
    # Application layer
    "ArchitectureValidator",
    "ScoringService",
    # Infrastructure
    "load_rule_configs",
    "load_rule_settings",
    "load_structure",
    # Exceptions
    "ArchQuestError",
    "ScoreOutOfRange",
    "MetricOutOfRange",
    "BlockNotFound",
    "DuplicateBlock",
    "RuleConfigError",
    "StructureFileError",
]
