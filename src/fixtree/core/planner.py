from __future__ import annotations

"""
Dry-Run Planner.

Mirrors the materializer's decisions without touching the disk, so a
description can be validated and previewed before anything is written.
Also builds the same nested model from an existing directory for
rendering after a real run.
"""

import copy
import logging
import os
import posixpath
from typing import Any, Dict, Optional, Tuple

from fixtree.core.classifier import classify_content
from fixtree.core.naming import classify_name
from fixtree.domain.config import GeneratorConfig
from fixtree.domain.errors import DirectoryCreationError, FileCreationError
from fixtree.domain.tree_models import SEPARATOR, Node, NodeKind, PlannedTree, ShapeKind

logger = logging.getLogger(__name__)

Parts = Tuple[str, ...]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def plan_tree(
        description: Any,
        config: Optional[GeneratorConfig] = None,
        existing: Optional[PlannedTree] = None,
) -> Tuple[PlannedTree, Dict[str, int]]:
    """
    Validate a description and compute the tree it would produce.

    Streams are never read; their size is reported as None. Two files
    resolving to the same path, a file and a directory sharing a path, or
    a file whose parent directory is missing are reported the way the
    materializer would report them.

    Args:
        description: Root directory content.
        config: Active generator policy.
        existing: Model of what the root already holds (see scan_directory).

    Returns:
        Tuple[PlannedTree, Dict[str, int]]: Nested model (directories map
        to dicts, files to their byte size) and planned counters.

    Raises:
        FixtreeError: The first problem found.
    """
    cfg = config or GeneratorConfig()
    tree: PlannedTree = copy.deepcopy(existing) if existing else {}
    counters = {"directories": 0, "files": 0, "bytes_written": 0}

    shape = classify_content(NodeKind.DIRECTORY, description, cfg, ".")
    for child in shape.children:
        _plan_node(tree, (), child, cfg, counters)

    logger.debug(f"Planned {counters['directories']} directories and {counters['files']} files")
    return tree, counters


def scan_directory(root: str) -> PlannedTree:
    """Build the nested model of an existing directory (file sizes as values)."""
    tree: PlannedTree = {}
    with os.scandir(root) as it:
        entries = sorted(it, key=lambda e: e.name)
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            tree[entry.name] = scan_directory(entry.path)
        else:
            tree[entry.name] = entry.stat(follow_symlinks=False).st_size
    return tree

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _plan_node(
        tree: PlannedTree,
        parent: Parts,
        node: Node,
        cfg: GeneratorConfig,
        counters: Dict[str, int],
) -> None:
    parts = _resolve(parent, node.name)
    display = SEPARATOR.join(parts) or "."

    if classify_name(node.name) is NodeKind.DIRECTORY:
        counters["directories"] += _ensure_dir(tree, parts, display)
        shape = classify_content(NodeKind.DIRECTORY, node.content, cfg, display)
        for child in shape.children:
            _plan_node(tree, parts, child, cfg, counters)
        return

    if not parts:
        raise FileCreationError(f"cannot create file {display}: path is the root directory", display)

    level = _find_dir(tree, parts[:-1], display)
    leaf = parts[-1]
    if leaf in level:
        raise FileCreationError(f"cannot create file {display}: path already planned", display)

    shape = classify_content(NodeKind.FILE, node.content, cfg, display)
    size: Optional[int] = 0
    if shape.kind is ShapeKind.TEXT:
        size = len(shape.payload)
    elif shape.kind is ShapeKind.STREAM:
        size = None

    level[leaf] = size
    counters["files"] += 1
    counters["bytes_written"] += size or 0


def _resolve(parent: Parts, name: str) -> Parts:
    """Lexically join 'name' below 'parent' into normalized segments."""
    relative = name.lstrip(SEPARATOR)
    joined = posixpath.normpath(posixpath.join(".", *parent, relative))
    if joined == ".":
        return ()
    return tuple(joined.split(SEPARATOR))


def _ensure_dir(tree: PlannedTree, parts: Parts, display: str) -> int:
    """Plan every missing directory along 'parts' and return how many were new."""
    level = tree
    created = 0
    for part in parts:
        if part not in level:
            level[part] = {}
            created += 1
        nxt = level[part]
        if not isinstance(nxt, dict):
            raise DirectoryCreationError(
                f"cannot create directory {display}: a file is planned at that path", display
            )
        level = nxt
    return created


def _find_dir(tree: PlannedTree, parts: Parts, display: str) -> PlannedTree:
    level = tree
    for part in parts:
        nxt = level.get(part)
        if not isinstance(nxt, dict):
            raise FileCreationError(
                f"cannot create file {display}: parent directory does not exist", display
            )
        level = nxt
    return level
