from __future__ import annotations

"""
Generation Result Data Models.

Defines the result object and factory functions used to report the outcome
of a generation run to the interface layer (CLI) as a value instead of an
exception.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from fixtree.domain.errors import FixtreeError

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of a complete generation run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        error_kind: Class name of the raised FixtreeError.
        error_path: Path the failure relates to, when known.
        root_path: Root directory that was (or would be) populated.
        mode: Provisioning policy used.
        dry_run: Whether the run only planned the tree.
        directories: Number of directories created (or planned).
        files: Number of files created (or planned).
        bytes_written: Total bytes written to files.
        tree_lines: Rendered tree, when requested.
        summary: Additional execution metadata.
    """
    ok: bool
    error: str
    root_path: str
    mode: str

    error_kind: str = ""
    error_path: str = ""
    dry_run: bool = False

    directories: int = 0
    files: int = 0
    bytes_written: int = 0

    tree_lines: List[str] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: FixtreeError,
        mode: str,
        root_path: str = "",
        counters: Optional[Dict[str, int]] = None,
        dry_run: bool = False,
) -> GenerationResult:
    """
    Create a failed generation result from the raised error.

    Args:
        error: The first error encountered.
        mode: Provisioning policy in use.
        root_path: Root directory, possibly partially populated.
        counters: Entries created before the failure.
        dry_run: Whether the run was a simulation.

    Returns:
        GenerationResult: An immutable error result object.
    """
    counters = counters or {}
    return GenerationResult(
        ok=False,
        error=error.message,
        error_kind=error.kind,
        error_path=error.path or "",
        root_path=root_path or error.root_path or "",
        mode=mode,
        dry_run=dry_run,
        directories=counters.get("directories", 0),
        files=counters.get("files", 0),
        bytes_written=counters.get("bytes_written", 0),
    )


def create_success_result(
        root_path: str,
        mode: str,
        counters: Dict[str, int],
        tree_lines: Optional[List[str]] = None,
        dry_run: bool = False,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> GenerationResult:
    """
    Create a successful generation result.

    Args:
        root_path: Populated root directory.
        mode: Provisioning policy in use.
        counters: Directory/file/byte counters of the run.
        tree_lines: Rendered tree lines, if any.
        dry_run: Whether the run was a simulation.
        summary_extra: Extra metadata for the summary payload.

    Returns:
        GenerationResult: An immutable success result object.
    """
    return GenerationResult(
        ok=True,
        error="",
        root_path=root_path,
        mode=mode,
        dry_run=dry_run,
        directories=counters.get("directories", 0),
        files=counters.get("files", 0),
        bytes_written=counters.get("bytes_written", 0),
        tree_lines=tree_lines or [],
        summary=summary_extra or {},
    )
