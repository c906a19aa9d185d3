from __future__ import annotations

"""
Verification Utilities.

Read-back helpers for test suites: they stat and read a generated tree and
compare it with the description it came from. They consume the output of
the generator and are not used by it.
"""

import os
from typing import Any, Dict, Optional, Union

from fixtree.core.classifier import iter_nodes
from fixtree.core.naming import classify_name, join_path
from fixtree.domain.tree_models import Node, NodeKind
from fixtree.infra.fs import is_readable

Snapshot = Dict[str, Union["Snapshot", bytes]]


def does_dir_exist(path: str) -> bool:
    return os.path.isdir(path)


def does_file_exist(path: str) -> bool:
    return os.path.isfile(path)


def count_files(path: str) -> int:
    """Number of non-directory entries directly inside 'path'."""
    with os.scandir(path) as it:
        return sum(1 for entry in it if not entry.is_dir(follow_symlinks=False))


def count_directories(path: str) -> int:
    """Number of subdirectories directly inside 'path'."""
    with os.scandir(path) as it:
        return sum(1 for entry in it if entry.is_dir(follow_symlinks=False))


def read_bytes(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def snapshot_tree(root: str) -> Snapshot:
    """
    Capture a directory as a nested dict.

    Subdirectories map to nested dicts and files to their raw bytes.
    """
    snapshot: Snapshot = {}
    with os.scandir(root) as it:
        entries = sorted(it, key=lambda e: e.name)
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            snapshot[entry.name] = snapshot_tree(entry.path)
        else:
            snapshot[entry.name] = read_bytes(entry.path)
    return snapshot


def assert_tree(root: str, description: Any, encoding: str = "utf-8") -> None:
    """
    Assert that the tree at 'root' matches 'description'.

    Directories with absent content must be empty; file contents are
    compared byte for byte. Stream contents cannot be replayed and are only
    checked for existence.

    Raises:
        AssertionError: On the first mismatch.
    """
    _check(does_dir_exist(root), f"{root} directory should have been generated")
    for node in _children(description):
        _assert_node(root, node, encoding)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _check(condition: bool, message: str) -> None:
    """Raise AssertionError with 'message' unless 'condition' holds, even under -O."""
    if not condition:
        raise AssertionError(message)


def _children(content: Any) -> tuple:
    if content is None:
        return ()
    if isinstance(content, Node):
        return (content,)
    return iter_nodes(content)


def _assert_node(parent: str, node: Node, encoding: str) -> None:
    path = join_path(parent, node.name)

    if classify_name(node.name) is NodeKind.DIRECTORY:
        _check(does_dir_exist(path), f"{path} directory should have been generated")
        if node.content is None:
            _check(count_files(path) == 0 and count_directories(path) == 0, f"{path} directory should be empty")
            return
        for child in _children(node.content):
            _assert_node(path, child, encoding)
        return

    _check(does_file_exist(path), f"{path} file should have been generated")
    expected = _expected_bytes(node.content, encoding)
    if expected is None:
        return
    actual = read_bytes(path)
    _check(actual == expected, f"{path}:\n expected: {expected!r}\n      got: {actual!r}")


def _expected_bytes(content: Any, encoding: str) -> Optional[bytes]:
    if content is None:
        return b""
    if isinstance(content, str):
        return content.encode(encoding)
    if isinstance(content, (bytes, bytearray, memoryview)):
        return bytes(content)
    if is_readable(content):
        return None
    raise AssertionError(f"file content should be textual, got {type(content).__name__}")
