"""
LayerStructure: the in-memory graph of layers, blocks and connections.

Owns placement legality (which block types may live in which layer) and
direct-dependency legality (which layer may depend on which) at mutation
time. Every mutation is all-or-nothing and reports its outcome as a Result.
"""

import logging
from collections.abc import Iterable, Iterator

from archquest.domain.cycles import CycleDetector
from archquest.domain.exceptions import BlockNotFound, DuplicateBlock
from archquest.domain.models import (
    BlockPlacement,
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

logger = logging.getLogger(__name__)

BLOCK_NOT_FOUND = "The specified block does not exist"


def check_placement(layer_id: LayerId, block: CodeBlock) -> str | None:
    """Return the reason ``block`` may not live in ``layer_id``, or None."""
    if block.is_ui_component() and layer_id is not LayerId.PRESENTATION:
        return "UI components can only be placed in the presentation layer"
    if block.is_domain_model() and layer_id is not LayerId.DOMAIN:
        return "Domain models can only be placed in the domain layer"
    if block.is_infrastructure() and layer_id is not LayerId.INFRASTRUCTURE:
        return "Repository implementations can only be placed in the infrastructure layer"
    return None


def check_dependency(source: LayerId, target: LayerId) -> str | None:
    """
    Return the reason a ``source`` -> ``target`` dependency is illegal, or None.

    Rules are evaluated in a fixed order and the first failure wins.
    Same-layer dependencies are always legal.
    """
    if source is LayerId.DOMAIN and target is not LayerId.DOMAIN:
        return "The domain layer cannot depend on other layers"
    if source is LayerId.PRESENTATION and target is LayerId.INFRASTRUCTURE:
        return "The presentation layer cannot depend directly on the infrastructure layer"
    if source is LayerId.PRESENTATION and target is LayerId.DOMAIN:
        return "The presentation layer cannot depend directly on the domain layer"
    if source is LayerId.APPLICATION and target is LayerId.PRESENTATION:
        return "The application layer cannot depend on the presentation layer"
    if source is LayerId.INFRASTRUCTURE and target in (
        LayerId.PRESENTATION,
        LayerId.APPLICATION,
    ):
        return "The infrastructure layer cannot depend on upper layers"
    return None


class LayerStructure:
    """
    A candidate architecture: four fixed layers, placed blocks, connections.

    Not safe for concurrent mutation; build one instance per submission.
    """

    def __init__(self) -> None:
        self._layers: dict[LayerId, Layer] = {
            layer_id: Layer(layer_id) for layer_id in LayerId
        }
        self._blocks: dict[str, BlockPlacement] = {}
        self._connections: list[Connection] = []

    @classmethod
    def create(cls) -> "LayerStructure":
        """Create an empty structure with the four layers."""
        return cls()

    @classmethod
    def restore(
        cls,
        placements: Iterable[tuple[LayerId, CodeBlock]],
        connections: Iterable[tuple[str, str] | Connection],
    ) -> "LayerStructure":
        """
        Rehydrate a previously stored structure without legality checks.

        Placement and direction rules are NOT re-applied here; run the
        dependency-direction rule to catch illegal stored connections.

        Raises:
            DuplicateBlock: If a block id is placed twice
            BlockNotFound: If a connection references an unplaced block
        """
        structure = cls()
        for layer_id, block in placements:
            existing = structure._blocks.get(block.block_id)
            if existing is not None:
                raise DuplicateBlock(block.block_id, existing.layer_id.value)
            structure._register(LayerId(layer_id), block)
        for item in connections:
            connection = item if isinstance(item, Connection) else Connection(*item)
            for block_id in (connection.source, connection.target):
                if block_id not in structure._blocks:
                    raise BlockNotFound(block_id)
            structure._connections.append(connection)
        return structure

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def add_block(self, layer_id: LayerId, block: CodeBlock) -> Result[None]:
        """
        Place ``block`` into ``layer_id``.

        Returns:
            Result.ok() on success, or a PLACEMENT_VIOLATION failure; the
            structure is unchanged on failure.
        """
        layer_id = LayerId(layer_id)
        existing = self._blocks.get(block.block_id)
        if existing is not None:
            return Result.fail(
                FailureKind.PLACEMENT_VIOLATION,
                f"Block '{block.block_id}' is already placed in the "
                f"{existing.layer_id.value} layer",
            )

        reason = check_placement(layer_id, block)
        if reason is not None:
            logger.debug("Rejected %s in %s: %s", block.name, layer_id.value, reason)
            return Result.fail(FailureKind.PLACEMENT_VIOLATION, reason)

        self._register(layer_id, block)
        logger.debug("Placed %s (%s) in %s", block.name, block.block_type.value, layer_id.value)
        return Result.ok()

    def create_connection(self, source_id: str, target_id: str) -> Result[Connection]:
        """
        Record that ``source_id`` depends on ``target_id``.

        Returns:
            Result carrying the new Connection, or a NOT_FOUND /
            DEPENDENCY_VIOLATION failure; nothing is recorded on failure.
        """
        source = self._blocks.get(source_id)
        target = self._blocks.get(target_id)
        if source is None or target is None:
            return Result.fail(FailureKind.NOT_FOUND, BLOCK_NOT_FOUND)

        reason = check_dependency(source.layer_id, target.layer_id)
        if reason is not None:
            logger.debug(
                "Rejected connection %s -> %s: %s",
                source.block.name,
                target.block.name,
                reason,
            )
            return Result.fail(FailureKind.DEPENDENCY_VIOLATION, reason)

        connection = Connection(source_id, target_id)
        self._connections.append(connection)
        return Result.ok(connection)

    def _register(self, layer_id: LayerId, block: CodeBlock) -> None:
        self._layers[layer_id].add_block(block.block_id)
        self._blocks[block.block_id] = BlockPlacement(block=block, layer_id=layer_id)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_layer(self, layer_id: LayerId) -> Layer:
        return self._layers[LayerId(layer_id)]

    @property
    def layers(self) -> tuple[Layer, ...]:
        return tuple(self._layers.values())

    def get_block(self, block_id: str) -> BlockPlacement | None:
        return self._blocks.get(block_id)

    def get_block_layer(self, block_id: str) -> LayerId | None:
        placement = self._blocks.get(block_id)
        return placement.layer_id if placement else None

    def get_all_blocks(self) -> list[BlockPlacement]:
        """All placements in registration order."""
        return list(self._blocks.values())

    def get_connections(self) -> list[Connection]:
        """All connections in insertion order (a copy)."""
        return list(self._connections)

    def __contains__(self, block_id: object) -> bool:
        return block_id in self._blocks

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[BlockPlacement]:
        return iter(self.get_all_blocks())

    # -------------------------------------------------------------------------
    # Self-check
    # -------------------------------------------------------------------------

    def validate(self) -> ValidationResult:
        """
        Minimal self-check: cycle detection only.

        Full multi-rule validation belongs to ArchitectureValidator.
        """
        violations = [
            Violation(
                type=ViolationType.CYCLIC_DEPENDENCY.value,
                message=f"Cyclic dependency detected: {' -> '.join(cycle)}",
                details={"cycle": tuple(cycle)},
            )
            for cycle in CycleDetector().detect(self)
        ]
        return ValidationResult.from_violations(violations)
