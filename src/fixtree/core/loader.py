from __future__ import annotations

"""
Description Loader.

Reads serialized tree descriptions (JSON) for the CLI. JSON objects become
name -> content mappings, strings are file text, null is absent content and
arrays hold {"name": ..., "content": ...} node objects.
"""

import json
import logging
import sys
from typing import Any

from fixtree.domain.errors import DescriptionLoadError, ShapeError
from fixtree.domain.tree_models import Node

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


def load_description(path: str, encoding: str = "utf-8") -> Any:
    """
    Load and convert a JSON description file ('-' reads standard input).

    Raises:
        DescriptionLoadError: If the file cannot be read or parsed.
    """
    try:
        if path == STDIN_MARKER:
            raw = sys.stdin.read()
        else:
            with open(path, "r", encoding=encoding) as f:
                raw = f.read()
    except OSError as e:
        raise DescriptionLoadError(f"cannot read description {path}: {e}", path) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise DescriptionLoadError(f"invalid JSON in {path}: {e}", path) from e

    logger.debug(f"Loaded description from {path}")
    return description_from_json(data)


def description_from_json(data: Any) -> Any:
    """
    Convert parsed JSON into a tree description.

    Scalars other than strings and null are passed through unchanged so the
    classifier reports them as shape errors with their full path.
    """
    if isinstance(data, dict):
        return {name: description_from_json(value) for name, value in data.items()}
    if isinstance(data, list):
        return [_node_from_json(item, i) for i, item in enumerate(data)]
    return data


def _node_from_json(item: Any, index: int) -> Node:
    if not isinstance(item, dict) or "name" not in item:
        raise DescriptionLoadError(f"array item {index} must be an object with a 'name' key")

    unknown = set(item) - {"name", "content"}
    if unknown:
        raise DescriptionLoadError(f"array item {index} has unknown keys: {', '.join(sorted(unknown))}")

    try:
        return Node(item["name"], description_from_json(item.get("content")))
    except ShapeError as e:
        raise DescriptionLoadError(f"array item {index}: {e.message}") from e
