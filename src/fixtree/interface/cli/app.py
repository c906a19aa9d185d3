from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
and validation, description loading, generation and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from fixtree.core.generator import run_generation
from fixtree.core.loader import load_description
from fixtree.core.validator import validate_config
from fixtree.domain.config import GeneratorConfig, get_default_config
from fixtree.domain.errors import DescriptionLoadError
from fixtree.domain.result_models import GenerationResult
from fixtree.infra.fs import normalize_path
from fixtree.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from fixtree.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_BAD_INPUT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    configure_logging(LoggingConfig.for_cli(args.debug, args.log_file))

    try:
        return _run(args)
    finally:
        shutdown_logging()


def _run(args: Any) -> int:
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(get_default_config(), overrides)

    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    try:
        description = load_description(args.description, clean_conf["encoding"])
    except DescriptionLoadError as e:
        logger.error(e.message)
        print(f"ERROR: {e.message}", file=sys.stderr)
        return EXIT_BAD_INPUT

    root_path = None
    if clean_conf["root_path"]:
        root_path = normalize_path(clean_conf["root_path"], ".")

    try:
        result = run_generation(
            description,
            GeneratorConfig.from_dict(clean_conf),
            root_path=root_path,
            dry_run=bool(args.dry_run),
            render=clean_conf["print_tree"],
        )
    except KeyboardInterrupt:
        logger.warning("Generation interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return EXIT_OK if result.ok else EXIT_FAILED

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge known, non-None override values into the base configuration."""
    out = dict(base)
    for k in base:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: GenerationResult) -> None:
    """Print the execution result for a terminal user."""
    if not result.ok:
        print(f"ERROR ({result.error_kind}): {result.error}", file=sys.stderr)
        if result.root_path:
            print(f"Partially populated root: {result.root_path}", file=sys.stderr)
        return

    if result.dry_run:
        print("Dry run: nothing was written.")
    else:
        print(result.root_path)

    for line in result.tree_lines:
        print(line)

    verb = "Planned" if result.dry_run else "Created"
    print(
        f"{verb} {result.directories} directories, {result.files} files "
        f"({result.bytes_written} bytes).",
        file=sys.stderr,
    )

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
