from __future__ import annotations

"""
Tree Description Data Models.

Provides the node type callers use to describe a directory tree, the
recursive content aliases accepted by the generator, and the resolved
Shape produced by the content classifier.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from fixtree.domain.errors import ShapeError

SEPARATOR = "/"

# -----------------------------------------------------------------------------
# CLASSIFICATIONS
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    """Directory/file classification derived from a node name."""
    DIRECTORY = "directory"
    FILE = "file"


class ShapeKind(str, Enum):
    """Resolved interpretation of a content value."""
    EMPTY = "empty"
    TEXT = "text"
    STREAM = "stream"
    SINGLE_CHILD = "single_child"
    COLLECTION = "collection"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Node:
    """
    A named entry of a tree description.

    A name ending with '/' denotes a directory, any other name a regular
    file. The content is interpreted according to that classification:

    - files accept None, str/bytes, or a readable byte stream;
    - directories accept None, a single Node, a mapping of names to
      contents, or a list of Nodes.

    Attributes:
        name: Path of the entry relative to its parent directory.
        content: Polymorphic payload of the entry.
    """
    name: str
    content: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise ShapeError(f"node name must be a string, got {type(self.name).__name__}")
        if not self.name:
            raise ShapeError("node name cannot be empty")

    @property
    def kind(self) -> NodeKind:
        return NodeKind.DIRECTORY if self.name.endswith(SEPARATOR) else NodeKind.FILE

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY


@dataclass(frozen=True)
class Shape:
    """
    Classifier verdict for a single content value.

    Attributes:
        kind: Which interpretation applies.
        payload: Encoded bytes for TEXT, the source object for STREAM.
        children: Nodes to descend into for SINGLE_CHILD and COLLECTION.
    """
    kind: ShapeKind
    payload: Any = None
    children: Tuple[Node, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return self.kind is ShapeKind.EMPTY


Text = Union[str, bytes, bytearray, memoryview]
Content = Any
Collection = Union[Mapping[str, Content], Sequence[Node]]
Description = Optional[Union[Collection, Node]]

# Planned (dry-run) tree: directory names map to nested dicts, files to their size
PlannedTree = Dict[str, Union["PlannedTree", Optional[int]]]
