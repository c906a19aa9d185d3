from __future__ import annotations

"""
Content Classifier.

Decides how a dynamically typed content value is interpreted for a node
of a given kind, and rejects values whose shape does not fit.
"""

from collections.abc import Mapping
from typing import Any, Optional, Tuple

from fixtree.domain.config import GeneratorConfig
from fixtree.domain.errors import ShapeError
from fixtree.domain.tree_models import Node, NodeKind, Shape, ShapeKind
from fixtree.infra.fs import is_readable

FILE_SHAPE_MESSAGE = "file content must be textual, byte-stream, or absent"
DIRECTORY_SHAPE_MESSAGE = "directory content must be a node, a collection of nodes, or absent"

_EMPTY = Shape(kind=ShapeKind.EMPTY)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def classify_content(
        kind: NodeKind,
        content: Any,
        config: Optional[GeneratorConfig] = None,
        path: Optional[str] = None,
) -> Shape:
    """
    Resolve the Shape of 'content' for a node classified as 'kind'.

    Files: None and empty text are EMPTY, str/bytes are TEXT (encoded to
    bytes), readable objects are STREAM. Directories: None is EMPTY, a Node
    is SINGLE_CHILD, a mapping or list of Nodes is COLLECTION.

    Args:
        kind: Classification of the owning node.
        content: Raw content value.
        config: Active generator policy (defaults to GeneratorConfig()).
        path: Resolved path, used to enrich error messages.

    Returns:
        Shape: The resolved interpretation.

    Raises:
        ShapeError: If the value does not fit the node kind or policy.
    """
    cfg = config or GeneratorConfig()
    if kind is NodeKind.FILE:
        return _classify_file(content, cfg, path)
    return _classify_directory(content, cfg, path)


def iter_nodes(content: Any, path: Optional[str] = None) -> Tuple[Node, ...]:
    """
    Normalize a directory collection into a tuple of Nodes.

    Mapping items become Node(name, value) in insertion order; sequences
    must contain Nodes only.

    Raises:
        ShapeError: On non-string mapping keys or non-Node list items.
    """
    if isinstance(content, Mapping):
        nodes = []
        for name, value in content.items():
            if not isinstance(name, str):
                raise ShapeError(_where(f"entry name must be a string, got {type(name).__name__}", path), path)
            try:
                nodes.append(Node(name, value))
            except ShapeError as e:
                raise ShapeError(_where(e.message, path), path) from e
        return tuple(nodes)

    nodes = []
    for i, item in enumerate(content):
        if not isinstance(item, Node):
            raise ShapeError(_where(f"collection item {i} is a {type(item).__name__}, not a node", path), path)
        nodes.append(item)
    return tuple(nodes)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _classify_file(content: Any, cfg: GeneratorConfig, path: Optional[str]) -> Shape:
    if content is None:
        return _EMPTY

    if isinstance(content, str):
        if not content:
            return _EMPTY
        try:
            payload = content.encode(cfg.encoding)
        except UnicodeEncodeError as e:
            raise ShapeError(_where(f"file content cannot be encoded as {cfg.encoding} ({e.reason})", path), path) from e
        return Shape(kind=ShapeKind.TEXT, payload=payload)

    if isinstance(content, (bytes, bytearray, memoryview)):
        data = bytes(content)
        if not data:
            return _EMPTY
        return Shape(kind=ShapeKind.TEXT, payload=data)

    if is_readable(content):
        if not cfg.allow_streams:
            raise ShapeError(_where("byte-stream file content is disabled", path), path)
        return Shape(kind=ShapeKind.STREAM, payload=content)

    raise ShapeError(_where(f"{FILE_SHAPE_MESSAGE} (got {type(content).__name__})", path), path)


def _classify_directory(content: Any, cfg: GeneratorConfig, path: Optional[str]) -> Shape:
    if content is None:
        return _EMPTY

    if isinstance(content, Node):
        if not cfg.allow_single_child:
            raise ShapeError(_where("single-node directory content is disabled", path), path)
        return Shape(kind=ShapeKind.SINGLE_CHILD, children=(content,))

    if isinstance(content, (Mapping, list, tuple)):
        return Shape(kind=ShapeKind.COLLECTION, children=iter_nodes(content, path))

    raise ShapeError(_where(f"{DIRECTORY_SHAPE_MESSAGE} (got {type(content).__name__})", path), path)


def _where(message: str, path: Optional[str]) -> str:
    return f"{message}: {path}" if path else message
