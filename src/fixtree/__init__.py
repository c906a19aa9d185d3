from __future__ import annotations

"""
fixtree: materialize in-memory file tree descriptions on disk.

    >>> root = generate({"a/": {"b.txt": "hi", "c/": None}})
"""

from fixtree.core.generator import (
    generate,
    generate_clean,
    generate_clean_from_root,
    generate_from_root,
    generate_strict,
    generate_strict_from_root,
    run_generation,
)
from fixtree.core.planner import plan_tree
from fixtree.domain.config import DESTRUCTIVE, STRICT, GeneratorConfig, ProvisionMode
from fixtree.domain.errors import (
    DescriptionLoadError,
    DirectoryCreationError,
    FileCreationError,
    FixtreeError,
    RootProvisioningError,
    ShapeError,
    WriteError,
)
from fixtree.domain.result_models import GenerationResult
from fixtree.domain.tree_models import Node, NodeKind, ShapeKind

__version__ = "0.1.0"

__all__ = [
    "generate",
    "generate_from_root",
    "generate_strict",
    "generate_strict_from_root",
    "generate_clean",
    "generate_clean_from_root",
    "run_generation",
    "plan_tree",
    "GeneratorConfig",
    "ProvisionMode",
    "STRICT",
    "DESTRUCTIVE",
    "GenerationResult",
    "Node",
    "NodeKind",
    "ShapeKind",
    "FixtreeError",
    "RootProvisioningError",
    "DirectoryCreationError",
    "FileCreationError",
    "ShapeError",
    "WriteError",
    "DescriptionLoadError",
]
