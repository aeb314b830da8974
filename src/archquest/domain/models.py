"""
Domain models for the architecture validation engine.

These are pure data structures describing a candidate architecture:
the four fixed layers, the code blocks placed into them, and the
directed connections between blocks. Outcome types (Result, Violation,
ValidationResult) are immutable (frozen dataclasses).
"""

import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_EMPTY_DETAILS: Mapping[str, Any] = MappingProxyType({})


# =============================================================================
# LAYERS
# =============================================================================


class LayerId(str, Enum):
    """The four fixed architectural layers."""

    PRESENTATION = "presentation"
    APPLICATION = "application"
    DOMAIN = "domain"
    INFRASTRUCTURE = "infrastructure"


LAYER_NAMES: Mapping[LayerId, str] = MappingProxyType(
    {
        LayerId.PRESENTATION: "Presentation Layer",
        LayerId.APPLICATION: "Application Layer",
        LayerId.DOMAIN: "Domain Layer",
        LayerId.INFRASTRUCTURE: "Infrastructure Layer",
    }
)


class Layer:
    """A layer and the ids of the blocks currently assigned to it."""

    def __init__(self, layer_id: LayerId, name: str | None = None):
        self.layer_id = layer_id
        self.name = name or LAYER_NAMES[layer_id]
        # dict keeps insertion order, unlike set
        self._blocks: dict[str, None] = {}

    def add_block(self, block_id: str) -> None:
        self._blocks[block_id] = None

    def has_block(self, block_id: str) -> bool:
        return block_id in self._blocks

    def get_blocks(self) -> list[str]:
        return list(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    def __repr__(self) -> str:
        return f"Layer({self.layer_id.value!r}, blocks={len(self)})"


# =============================================================================
# CODE BLOCKS
# =============================================================================


class BlockType(str, Enum):
    """Closed set of code-element kinds a learner can place."""

    UI_COMPONENT = "ui-component"
    ENTITY = "entity"
    VALUE_OBJECT = "value-object"
    SERVICE = "service"
    USE_CASE = "usecase"
    DTO = "dto"
    REPOSITORY = "repository"
    REPOSITORY_IMPL = "repository-impl"
    CONTROLLER = "controller"
    DOMAIN_SERVICE = "domain-service"


@dataclass(frozen=True)
class BlockProperty:
    """Declared property: name plus its type signature as written."""

    name: str
    type: str


@dataclass(frozen=True)
class BlockMethod:
    """Declared method and its length in lines."""

    name: str
    lines: int


class CodeBlock:
    """
    A named, typed unit of code placed into exactly one layer.

    The identifier is assigned once at creation and cannot be changed.
    Properties and methods may be attached by the caller before the
    structure is validated; the engine itself never modifies them.
    """

    def __init__(
        self,
        name: str,
        block_type: BlockType,
        block_id: str | None = None,
        properties: list[BlockProperty] | None = None,
        methods: list[BlockMethod] | None = None,
    ):
        """
        Args:
            name: Human-readable block name (e.g. "UserService")
            block_type: Kind of code element
            block_id: Explicit identifier; generated when omitted
            properties: Declared properties, in declaration order
            methods: Declared methods, in declaration order
        """
        self._block_id = block_id or f"{block_type.value}-{name}-{uuid.uuid4().hex}"
        self.name = name
        self.block_type = block_type
        self.properties: list[BlockProperty] = list(properties or [])
        self.methods: list[BlockMethod] = list(methods or [])

    @property
    def block_id(self) -> str:
        """Opaque identifier (read-only)."""
        return self._block_id

    def is_ui_component(self) -> bool:
        return self.block_type is BlockType.UI_COMPONENT

    def is_entity(self) -> bool:
        return self.block_type is BlockType.ENTITY

    def is_value_object(self) -> bool:
        return self.block_type is BlockType.VALUE_OBJECT

    def is_domain_model(self) -> bool:
        return (
            self.is_entity()
            or self.is_value_object()
            or self.block_type is BlockType.DOMAIN_SERVICE
        )

    def is_infrastructure(self) -> bool:
        return self.block_type is BlockType.REPOSITORY_IMPL

    def __repr__(self) -> str:
        return f"CodeBlock({self.name!r}, {self.block_type.value!r}, id={self._block_id!r})"


@dataclass(frozen=True)
class Connection:
    """Directed edge: ``source`` depends on ``target``."""

    source: str
    target: str


@dataclass(frozen=True)
class BlockPlacement:
    """A registered block together with the layer it was placed in."""

    block: CodeBlock
    layer_id: LayerId


# =============================================================================
# OPERATION OUTCOMES
# =============================================================================


class FailureKind(str, Enum):
    """Kinds of recoverable failure reported by engine operations."""

    PLACEMENT_VIOLATION = "placement_violation"
    DEPENDENCY_VIOLATION = "dependency_violation"
    NOT_FOUND = "not_found"
    METRIC_OUT_OF_RANGE = "metric_out_of_range"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Immutable success/failure outcome of a single engine operation."""

    success: bool
    payload: T | None = None
    reason: str | None = None
    kind: FailureKind | None = None

    @classmethod
    def ok(cls, value: T | None = None) -> "Result[T]":
        return cls(success=True, payload=value)

    @classmethod
    def fail(cls, kind: FailureKind, error: str) -> "Result[T]":
        return cls(success=False, reason=error, kind=kind)

    def is_success(self) -> bool:
        return self.success

    def is_failure(self) -> bool:
        return not self.success

    @property
    def value(self) -> T | None:
        if not self.success:
            raise ValueError(f"Cannot get value from failed result: {self.reason}")
        return self.payload

    @property
    def error(self) -> str:
        if self.success:
            raise ValueError("Cannot get error from successful result")
        return self.reason or ""


# =============================================================================
# VIOLATIONS
# =============================================================================


class ViolationType(str, Enum):
    """Violation tags produced by the built-in rules."""

    CYCLIC_DEPENDENCY = "CYCLIC_DEPENDENCY"
    DEPENDENCY_VIOLATION = "DEPENDENCY_VIOLATION"
    DTO_PURITY_VIOLATION = "DTO_PURITY_VIOLATION"
    PRESENTATION_TO_INFRA = "PRESENTATION_TO_INFRA"
    FAT_SERVICE = "FAT_SERVICE"


@dataclass(frozen=True)
class Violation:
    """A single detected rule breach."""

    type: str  # ViolationType value, or any other tag (scored as unclassified)
    message: str
    details: Mapping[str, Any] = field(default_factory=lambda: _EMPTY_DETAILS)

    def __post_init__(self) -> None:
        if not isinstance(self.details, MappingProxyType):
            object.__setattr__(self, "details", MappingProxyType(dict(self.details)))


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one validation call: validity, violations and penalty score."""

    is_valid: bool
    violations: tuple[Violation, ...] = ()
    score: int = 100

    @classmethod
    def from_violations(cls, violations: "tuple[Violation, ...] | list[Violation]") -> "ValidationResult":
        """Build a result whose validity and score follow from ``violations``."""
        # Lazy import to avoid circular dependency
        from archquest.domain.score import calculate_penalty_score

        violations = tuple(violations)
        return cls(
            is_valid=not violations,
            violations=violations,
            score=calculate_penalty_score(violations),
        )

    def violations_of(self, violation_type: str) -> tuple[Violation, ...]:
        """Violations carrying the given type tag."""
        tag = getattr(violation_type, "value", violation_type)
        return tuple(v for v in self.violations if v.type == tag)
