from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin wrappers over 'os', 'shutil' and 'tempfile' providing the primitives
the generator relies on: idempotent recursive directory creation, exclusive
file creation, chunked byte copies, recursive removal and temporary
directory allocation. Every function raises the underlying OSError; the
core layer translates them into domain errors.
"""

import os
import shutil
import tempfile
from typing import Any, BinaryIO, Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

COPY_CHUNK_SIZE = 64 * 1024
_EXCLUSIVE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_EXCL | getattr(os, "O_BINARY", 0)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# CREATION API
# -----------------------------------------------------------------------------

def make_dirs(path: str, mode: int = 0o700) -> int:
    """
    Recursively create a directory, succeeding if it already exists.

    Unlike os.makedirs, 'mode' is applied to every missing ancestor and
    not only to the leaf. A non-directory entry anywhere on the way still
    raises.

    Returns:
        int: Number of directories actually created (0 if all existed).

    Raises:
        OSError: If the hierarchy cannot be created.
    """
    head, tail = os.path.split(path)
    if not tail:
        head, tail = os.path.split(head)

    created = 0
    if head and tail and not os.path.lexists(head):
        created += make_dirs(head, mode)

    try:
        os.mkdir(path, mode)
    except FileExistsError:
        if not os.path.isdir(path):
            raise
        return created
    return created + 1


def open_exclusive(path: str, mode: int = 0o600) -> BinaryIO:
    """
    Create and open a new file for binary writing.

    Fails if anything (file, directory, dangling symlink) already exists
    at 'path'.

    Raises:
        FileExistsError: If the path is already taken.
        OSError: For any other creation failure.
    """
    fd = os.open(path, _EXCLUSIVE_FLAGS, mode)
    try:
        return os.fdopen(fd, "wb")
    except Exception:
        os.close(fd)
        raise


def make_temp_dir(prefix: str) -> str:
    """Allocate a fresh, uniquely named directory under the system temp location."""
    return tempfile.mkdtemp(prefix=prefix)

# -----------------------------------------------------------------------------
# CONTENT API
# -----------------------------------------------------------------------------

def is_readable(obj: Any) -> bool:
    """Return True if 'obj' behaves like a readable stream."""
    return callable(getattr(obj, "read", None))


def copy_stream(
        source: Any,
        target: BinaryIO,
        encoding: str = "utf-8",
        chunk_size: int = COPY_CHUNK_SIZE,
) -> int:
    """
    Copy a readable source into a binary target until exhaustion.

    Text chunks (from text-mode sources such as io.StringIO) are encoded
    with 'encoding' on the fly.

    Args:
        source: Object exposing read(size).
        target: Open binary file object.
        encoding: Codec for str chunks.
        chunk_size: Maximum bytes requested per read.

    Returns:
        int: Number of bytes written.

    Raises:
        OSError: On read or write failure.
        TypeError: If the source yields something other than str/bytes.
    """
    written = 0
    while True:
        chunk = source.read(chunk_size)
        if not chunk:
            break
        if isinstance(chunk, str):
            chunk = chunk.encode(encoding)
        elif not isinstance(chunk, (bytes, bytearray, memoryview)):
            raise TypeError(f"stream yielded {type(chunk).__name__} instead of bytes or str")
        target.write(chunk)
        written += len(chunk)
    return written

# -----------------------------------------------------------------------------
# REMOVAL API
# -----------------------------------------------------------------------------

def remove_tree(path: str) -> None:
    """
    Recursively delete whatever exists at 'path'.

    Directories are removed with their content, regular files and
    symlinks are unlinked, and a missing path is a no-op.

    Raises:
        OSError: If the removal fails.
    """
    if os.path.islink(path) or os.path.isfile(path):
        os.remove(path)
    elif os.path.isdir(path):
        shutil.rmtree(path)
    elif os.path.lexists(path):
        os.remove(path)
