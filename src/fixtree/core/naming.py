from __future__ import annotations

"""
Path Naming Convention.

A node is a directory if and only if its name ends with '/'. Names are
always resolved relative to their parent directory.
"""

import os

from fixtree.domain.tree_models import SEPARATOR, NodeKind


def classify_name(name: str) -> NodeKind:
    """Return DIRECTORY for names ending with '/', FILE otherwise."""
    if name.endswith(SEPARATOR):
        return NodeKind.DIRECTORY
    return NodeKind.FILE


def join_path(parent: str, name: str) -> str:
    """
    Resolve 'name' below 'parent' and clean the result.

    Leading separators never make the name absolute, so a bare '/' resolves
    to the parent itself.

    Args:
        parent: Directory the entry lives in.
        name: Entry name, possibly containing nested segments.

    Returns:
        str: Cleaned joined path.
    """
    relative = name.lstrip(SEPARATOR)
    if not relative:
        return os.path.normpath(parent)
    return os.path.normpath(os.path.join(parent, relative))
