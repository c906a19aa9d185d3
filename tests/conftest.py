from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared description fixtures used across unit and integration tests.
"""

import os
import shutil
import sys
from typing import Any, Dict, Iterator, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from fixtree.domain.tree_models import Node  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mapping_description() -> Dict[str, Any]:
    """
    Return a nested mapping description covering every content shape
    except streams (which cannot be reused across assertions).
    """
    return {
        "README.md": "# This is the title",
        "json/": {
            "test1.json": '{"key1":"value1","key2":"value2"}',
            "test2.json": b'{"key3":"value3","key4":"value4"}',
        },
        "vendor/": None,
        "src/": {
            "one.cc": "int main() {}",
            "two.cc": "#include <iostream>",
            "empty.txt": None,
        },
        "test/": {".gitkeep": ""},
    }


@pytest.fixture
def node_description() -> List[Node]:
    """Return the same tree as a list of Nodes, using a single-child directory."""
    return [
        Node("README.md", "# This is the title"),
        Node("json/", [
            Node("test1.json", '{"key1":"value1","key2":"value2"}'),
            Node("test2.json", '{"key3":"value3","key4":"value4"}'),
        ]),
        Node("vendor/", None),
        Node("src/", [
            Node("one.cc", "int main() {}"),
            Node("two.cc", "#include <iostream>"),
            Node("empty.txt", None),
        ]),
        Node("test/", Node(".gitkeep", None)),
    ]


@pytest.fixture
def generated_roots() -> Iterator[List[str]]:
    """Collect temporary roots created by generate() and remove them afterwards."""
    roots: List[str] = []
    yield roots
    for root in roots:
        shutil.rmtree(root, ignore_errors=True)
