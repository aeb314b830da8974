"""
Shared JSON document reading for the file adapters.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from archquest.domain.exceptions import ArchQuestError


def read_json_document(
    source: str | Path | Mapping[str, Any],
    error: type[ArchQuestError],
    kind: str,
) -> dict[str, Any]:
    """
    Read a JSON object from a file, or copy an already-parsed mapping.

    Args:
        source: Path to a JSON file, or a mapping
        error: Exception class raised on failure
        kind: Document description used in error messages

    Raises:
        error: If the file is missing, not JSON, or not a JSON object
    """
    if isinstance(source, Mapping):
        return dict(source)

    path = Path(source)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise error(f"{kind} not found: {path}") from e
    except json.JSONDecodeError as e:
        raise error(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise error(f"{kind} must be a JSON object: {path}")
    return data
