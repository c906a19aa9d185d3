from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

from fixtree.domain.config import ProvisionMode

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the fixtree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="fixtree",
        description="Materialize a JSON file-tree description on disk.",
    )

    p.add_argument(
        "description",
        help="JSON description file, or '-' to read standard input.",
    )

    # --- Root Management ---
    p.add_argument(
        "-r", "--root",
        dest="root_path",
        default=None,
        help="Directory to populate. A temporary directory is allocated when omitted.",
    )
    p.add_argument(
        "--clean",
        action="store_true",
        help="Delete the root directory before generating (destructive mode).",
    )
    p.add_argument(
        "--prefix",
        dest="temp_prefix",
        default=None,
        help="Name prefix of the allocated temporary root.",
    )

    # --- Content Policy ---
    p.add_argument(
        "--no-streams",
        action="store_true",
        help="Reject byte-stream file content.",
    )
    p.add_argument(
        "--encoding",
        default=None,
        help="Encoding used for textual file content (default: utf-8).",
    )
    p.add_argument(
        "--dir-mode",
        default=None,
        help="Octal permission bits of created directories (default: 700).",
    )
    p.add_argument(
        "--file-mode",
        default=None,
        help="Octal permission bits of created files (default: 600).",
    )

    # --- Execution & Reporting ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate and preview the tree without writing anything.",
    )
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Print the resulting tree.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result as JSON.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this (rotating) file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["root_path"] = args.root_path
    overrides["temp_prefix"] = args.temp_prefix
    overrides["encoding"] = args.encoding
    overrides["dir_mode"] = args.dir_mode
    overrides["file_mode"] = args.file_mode

    if args.clean:
        overrides["mode"] = ProvisionMode.DESTRUCTIVE.value
    if args.no_streams:
        overrides["allow_streams"] = False
    if args.print_tree:
        overrides["print_tree"] = True

    return overrides
