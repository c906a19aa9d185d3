from __future__ import annotations

"""
Filesystem Materializer.

Walks a tree description depth-first and realizes it below a parent
directory: directories are created idempotently, files exclusively, and
the first failure aborts the walk. Nothing created before a failure is
rolled back.
"""

import logging
from typing import Any, Dict, Optional

from fixtree.core.classifier import classify_content
from fixtree.core.naming import classify_name, join_path
from fixtree.domain.config import GeneratorConfig
from fixtree.domain.errors import (
    DirectoryCreationError,
    FileCreationError,
    ShapeError,
    WriteError,
)
from fixtree.domain.tree_models import Node, NodeKind, Shape, ShapeKind
from fixtree.infra.fs import copy_stream, make_dirs, open_exclusive

logger = logging.getLogger(__name__)


class Materializer:
    """
    Recursive tree writer bound to one generator policy.

    The instance only keeps counters of what it created; the walk itself
    shares no state between recursive calls beyond the filesystem.

    Attributes:
        config: Active generator policy.
        counters: Directories, files and bytes written so far.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or GeneratorConfig()
        self.counters: Dict[str, int] = {"directories": 0, "files": 0, "bytes_written": 0}

    # -------------------------------------------------------------------------
    # PUBLIC API
    # -------------------------------------------------------------------------

    def materialize(self, parent_path: str, description: Any) -> None:
        """
        Realize 'description' inside the existing directory 'parent_path'.

        The description is interpreted as directory content: None, a Node,
        a mapping of names to contents, or a list of Nodes.

        Raises:
            FixtreeError: The first error encountered.
        """
        shape = classify_content(NodeKind.DIRECTORY, description, self.config, parent_path)
        self._descend(parent_path, shape)

    def materialize_node(self, parent_path: str, node: Node) -> None:
        """Realize a single node below 'parent_path'."""
        full_path = join_path(parent_path, node.name)
        if classify_name(node.name) is NodeKind.DIRECTORY:
            self._create_directory(full_path, node.content)
        else:
            self._create_file(full_path, node.content)

    # -------------------------------------------------------------------------
    # DIRECTORIES
    # -------------------------------------------------------------------------

    def _create_directory(self, dir_path: str, content: Any) -> None:
        try:
            created = make_dirs(dir_path, self.config.dir_mode)
        except OSError as e:
            logger.error(f"Cannot create directory {dir_path}: {e}")
            raise DirectoryCreationError(f"cannot create directory {dir_path}: {e}", dir_path) from e

        # Pre-existing and merged directories are not counted
        self.counters["directories"] += created
        logger.debug(f"Directory ready: {dir_path} ({created} created)")

        shape = classify_content(NodeKind.DIRECTORY, content, self.config, dir_path)
        self._descend(dir_path, shape)

    def _descend(self, dir_path: str, shape: Shape) -> None:
        # Fail-fast: the first failing child aborts its remaining siblings
        for child in shape.children:
            self.materialize_node(dir_path, child)

    # -------------------------------------------------------------------------
    # FILES
    # -------------------------------------------------------------------------

    def _create_file(self, file_path: str, content: Any) -> None:
        try:
            handle = open_exclusive(file_path, self.config.file_mode)
        except OSError as e:
            logger.error(f"Cannot create file {file_path}: {e}")
            raise FileCreationError(f"cannot create file {file_path}: {e}", file_path) from e

        self.counters["files"] += 1

        try:
            with handle:
                shape = classify_content(NodeKind.FILE, content, self.config, file_path)
                written = self._write(handle, file_path, shape)
        except OSError as e:
            # Buffered bytes are flushed on close
            logger.error(f"Cannot close file {file_path}: {e}")
            raise WriteError(f"cannot write file {file_path}: {e}", file_path) from e

        self.counters["bytes_written"] += written
        logger.debug(f"File written: {file_path} ({written} bytes)")

    def _write(self, handle: Any, file_path: str, shape: Shape) -> int:
        try:
            if shape.kind is ShapeKind.TEXT:
                handle.write(shape.payload)
                return len(shape.payload)
            if shape.kind is ShapeKind.STREAM:
                return copy_stream(shape.payload, handle, self.config.encoding)
        except UnicodeEncodeError as e:
            raise ShapeError(
                f"file content of {file_path} cannot be encoded as {self.config.encoding}: {e}", file_path
            ) from e
        except (OSError, ValueError) as e:
            logger.error(f"Cannot write file {file_path}: {e}")
            raise WriteError(f"cannot write file {file_path}: {e}", file_path) from e
        except TypeError as e:
            raise ShapeError(f"file content of {file_path} is not valid: {e}", file_path) from e
        return 0
