from __future__ import annotations

"""
Tree Generation Entry Points.

Public operations combining the root provisioner and the materializer:

1. generate / generate_from_root take an explicit GeneratorConfig.
2. generate_strict* and generate_clean* pin the STRICT or DESTRUCTIVE
   provisioning policy.
3. run_generation reports the outcome as a GenerationResult value instead
   of raising, for the interface layer.
"""

import logging
import os
from typing import Any, List, Optional

from fixtree.core.materializer import Materializer
from fixtree.core.planner import plan_tree, scan_directory
from fixtree.core.provisioner import PathLike, prepare_root, provision_root
from fixtree.core.renderer import render_tree
from fixtree.domain.config import DESTRUCTIVE, STRICT, GeneratorConfig
from fixtree.domain.errors import FixtreeError, RootProvisioningError
from fixtree.domain.result_models import (
    GenerationResult,
    create_error_result,
    create_success_result,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate(description: Any, config: Optional[GeneratorConfig] = None) -> str:
    """
    Populate a fresh temporary directory with 'description'.

    Args:
        description: Root directory content (mapping, list of Nodes, Node or None).
        config: Generator policy, STRICT when omitted.

    Returns:
        str: Path of the generated root directory.

    Raises:
        FixtreeError: The first error encountered. When the temporary root
            was already allocated, its path is available as 'root_path'.
    """
    cfg = config or STRICT
    root = provision_root(None, cfg.temp_prefix)
    try:
        _materialize_into(root, description, cfg)
    except FixtreeError as e:
        e.root_path = root
        raise
    return root


def generate_from_root(
        root_path: PathLike,
        description: Any,
        config: Optional[GeneratorConfig] = None,
) -> None:
    """
    Populate 'root_path' with 'description'.

    The root is provisioned according to the policy (created when missing,
    cleared first under DESTRUCTIVE) and then materialized.

    Raises:
        RootProvisioningError: If 'root_path' is empty or cannot be prepared.
        FixtreeError: The first materialization error.
    """
    if root_path is None:
        raise RootProvisioningError("root directory cannot be empty")
    root = provision_root(root_path)
    try:
        _materialize_into(root, description, config or STRICT)
    except FixtreeError as e:
        e.root_path = root
        raise


def generate_strict(description: Any) -> str:
    """generate() with the STRICT policy."""
    return generate(description, STRICT)


def generate_strict_from_root(root_path: PathLike, description: Any) -> None:
    """generate_from_root() with the STRICT policy."""
    generate_from_root(root_path, description, STRICT)


def generate_clean(description: Any) -> str:
    """generate() with the DESTRUCTIVE policy."""
    return generate(description, DESTRUCTIVE)


def generate_clean_from_root(root_path: PathLike, description: Any) -> None:
    """generate_from_root() with the DESTRUCTIVE policy: the root is wiped first."""
    generate_from_root(root_path, description, DESTRUCTIVE)


def run_generation(
        description: Any,
        config: Optional[GeneratorConfig] = None,
        *,
        root_path: Optional[PathLike] = None,
        dry_run: bool = False,
        render: bool = False,
) -> GenerationResult:
    """
    Execute a generation run and report it as a value.

    Args:
        description: Root directory content.
        config: Generator policy, STRICT when omitted.
        root_path: Explicit root, or None for a temporary one.
        dry_run: Only validate and plan the tree; nothing is written.
        render: Include the rendered tree in the result.

    Returns:
        GenerationResult: Status, counters and optional tree lines.
    """
    cfg = config or STRICT
    mode = cfg.mode.value
    logger.info(f"Generation started (mode={mode}, dry_run={dry_run})")

    if dry_run:
        label = os.fspath(root_path) if root_path else ""
        existing = None
        if label and not cfg.destructive and os.path.isdir(label):
            existing = scan_directory(label)
        try:
            tree, counters = plan_tree(description, cfg, existing)
        except FixtreeError as e:
            logger.error(f"Dry run failed: {e.message}")
            return create_error_result(e, mode, label, dry_run=True)
        planned_lines = render_tree(tree, label or ".") if render else []
        return create_success_result(label, mode, counters, planned_lines, dry_run=True)

    materializer = Materializer(cfg)
    root = ""
    try:
        root = provision_root(root_path, cfg.temp_prefix)
        prepare_root(root, cfg)
        materializer.materialize(root, description)
    except FixtreeError as e:
        logger.error(f"Generation failed: {e.message}")
        return create_error_result(e, mode, root, materializer.counters)

    lines: List[str] = []
    if render:
        lines = render_tree(scan_directory(root), root, show_sizes=True)

    logger.info(
        f"Generated {materializer.counters['directories']} directories and "
        f"{materializer.counters['files']} files in {root}"
    )
    return create_success_result(root, mode, materializer.counters, lines)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _materialize_into(root: str, description: Any, cfg: GeneratorConfig) -> Materializer:
    prepare_root(root, cfg)
    materializer = Materializer(cfg)
    materializer.materialize(root, description)
    logger.debug(f"Materialized into {root}: {materializer.counters}")
    return materializer
