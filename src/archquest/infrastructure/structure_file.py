"""
Structure document loading.

Turns a JSON document describing placed blocks and connections into a
LayerStructure. The document is validated against structure.schema.json
and rehydrated with LayerStructure.restore, so illegal placements and
connections are kept as written and surface as rule violations.

Example structure.json:

    {
      "blocks": [
        {"id": "view", "name": "UserView", "type": "ui-component",
         "layer": "presentation"},
        {"id": "svc", "name": "UserService", "type": "service",
         "layer": "application",
         "methods": [{"name": "register", "lines": 40}]}
      ],
      "connections": [{"source": "view", "target": "svc"}]
    }
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import jsonschema

from archquest.domain.exceptions import BlockNotFound, StructureFileError
from archquest.domain.layer_structure import LayerStructure
from archquest.domain.models import (
    BlockMethod,
    BlockProperty,
    BlockType,
    CodeBlock,
    Connection,
    LayerId,
)
from archquest.infrastructure.json_document import read_json_document
from archquest.schemas import validate_structure

logger = logging.getLogger(__name__)


def _block_from_entry(entry: Mapping[str, Any]) -> CodeBlock:
    return CodeBlock(
        entry["name"],
        BlockType(entry["type"]),
        block_id=entry.get("id", entry["name"]),
        properties=[BlockProperty(p["name"], p["type"]) for p in entry.get("properties", [])],
        methods=[BlockMethod(m["name"], m["lines"]) for m in entry.get("methods", [])],
    )


def load_structure(source: str | Path | Mapping[str, Any]) -> LayerStructure:
    """
    Load a structure document.

    Args:
        source: Path to a JSON file, or an already-parsed mapping

    Returns:
        The rehydrated LayerStructure. Blocks without an ``id`` use their
        name as id.

    Raises:
        StructureFileError: If the document is unreadable, fails the schema,
            repeats a block id, or connects an unknown block
    """
    data = read_json_document(source, StructureFileError, "Structure document")
    try:
        validate_structure(data)
    except jsonschema.ValidationError as e:
        raise StructureFileError(f"Invalid structure document: {e.message}") from e

    placements: list[tuple[LayerId, CodeBlock]] = []
    seen: set[str] = set()
    for entry in data["blocks"]:
        block = _block_from_entry(entry)
        if block.block_id in seen:
            raise StructureFileError(f"Duplicate block id: {block.block_id}")
        seen.add(block.block_id)
        placements.append((LayerId(entry["layer"]), block))

    connections = [Connection(c["source"], c["target"]) for c in data.get("connections", [])]
    try:
        structure = LayerStructure.restore(placements, connections)
    except BlockNotFound as e:
        raise StructureFileError(f"Connection references unknown block: {e.block_id}") from e

    logger.debug(
        "Loaded structure with %d block(s), %d connection(s)",
        len(structure),
        len(connections),
    )
    return structure
