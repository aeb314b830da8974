"""Shared pytest fixtures for archquest tests."""

import logging

import pytest

from archquest.application.validator import ArchitectureValidator
from archquest.domain.layer_structure import LayerStructure
from archquest.domain.models import BlockType, CodeBlock, LayerId
from archquest.domain.rules import STANDARD_RULES


def make_block(name: str, block_type: BlockType = BlockType.SERVICE) -> CodeBlock:
    """Create a block with a readable, deterministic id."""
    return CodeBlock(name, block_type, block_id=name)


@pytest.fixture
def structure() -> LayerStructure:
    """Create an empty LayerStructure."""
    return LayerStructure.create()


@pytest.fixture
def validator() -> ArchitectureValidator:
    """Create a validator running the five standard rules."""
    return ArchitectureValidator(STANDARD_RULES)


@pytest.fixture
def layered_structure() -> LayerStructure:
    """A clean three-layer structure: UserView -> UserService -> User."""
    structure = LayerStructure.create()
    view = make_block("UserView", BlockType.UI_COMPONENT)
    service = make_block("UserService", BlockType.SERVICE)
    entity = make_block("User", BlockType.ENTITY)

    structure.add_block(LayerId.PRESENTATION, view)
    structure.add_block(LayerId.APPLICATION, service)
    structure.add_block(LayerId.DOMAIN, entity)
    structure.create_connection(view.block_id, service.block_id)
    structure.create_connection(service.block_id, entity.block_id)
    return structure


@pytest.fixture
def cyclic_structure() -> LayerStructure:
    """Three application services wired S1 -> S2 -> S3 -> S1."""
    structure = LayerStructure.create()
    for name in ("S1", "S2", "S3"):
        structure.add_block(LayerId.APPLICATION, make_block(name))
    structure.create_connection("S1", "S2")
    structure.create_connection("S2", "S3")
    structure.create_connection("S3", "S1")
    return structure


@pytest.fixture
def block():
    """Factory fixture: ``block("Name", BlockType.X)`` with id == name."""
    return make_block


@pytest.fixture(autouse=True)
def restore_archquest_logger():
    """Undo setup_logging() so handlers and propagation do not leak between tests."""
    logger = logging.getLogger("archquest")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate
