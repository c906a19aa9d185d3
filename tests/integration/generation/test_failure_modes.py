from __future__ import annotations

"""
Integration tests for OS-level failure handling.

Simulates filesystem failures with mocks and checks that each one surfaces
as the matching domain error, that nothing is rolled back, and that file
handles are always released.
"""

from pathlib import Path
from typing import Any, List
from unittest.mock import patch

import pytest

from fixtree import (
    DirectoryCreationError,
    RootProvisioningError,
    ShapeError,
    WriteError,
    generate,
    generate_clean_from_root,
    generate_from_root,
)
from fixtree.infra import fs


class ExplodingStream:
    """Readable that fails after yielding a first chunk."""

    def __init__(self) -> None:
        self.calls = 0

    def read(self, size: int = -1) -> bytes:
        self.calls += 1
        if self.calls == 1:
            return b"partial"
        raise OSError("device unplugged")


class WeirdStream:
    def read(self, size: int = -1) -> Any:
        return 42


# -----------------------------------------------------------------------------
# ROOT PROVISIONING
# -----------------------------------------------------------------------------

def test_temp_allocation_failure() -> None:
    with patch("fixtree.core.provisioner.make_temp_dir", side_effect=OSError("no space")):
        with pytest.raises(RootProvisioningError, match="cannot generate root directory"):
            generate({"f": "x"})


def test_destructive_removal_failure_aborts_before_creation(tmp_path: Path) -> None:
    root = tmp_path / "root"
    root.mkdir()
    (root / "old.txt").write_text("old")

    with patch("fixtree.core.provisioner.remove_tree", side_effect=PermissionError("denied")):
        with pytest.raises(RootProvisioningError, match="cannot delete pre-existing root"):
            generate_clean_from_root(root, {"new.txt": "new"})

    assert (root / "old.txt").exists()
    assert not (root / "new.txt").exists()


def test_root_creation_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("file")

    with pytest.raises(RootProvisioningError, match="cannot create root directory"):
        generate_from_root(blocker / "root", {})

# -----------------------------------------------------------------------------
# DIRECTORIES
# -----------------------------------------------------------------------------

def test_directory_permission_failure(tmp_path: Path) -> None:
    real_make_dirs = fs.make_dirs

    def fake_make_dirs(path: str, mode: int = 0o700) -> int:
        if path.endswith("locked"):
            raise PermissionError("permission denied")
        return real_make_dirs(path, mode)

    with patch("fixtree.core.materializer.make_dirs", side_effect=fake_make_dirs):
        with pytest.raises(DirectoryCreationError) as exc:
            generate_from_root(tmp_path, {"ok/": None, "locked/": {"f": "x"}, "after/": None})

    assert isinstance(exc.value.__cause__, PermissionError)
    assert (tmp_path / "ok").is_dir()
    assert not (tmp_path / "after").exists()

# -----------------------------------------------------------------------------
# FILE WRITES
# -----------------------------------------------------------------------------

def test_stream_failure_keeps_partial_file_and_closes_handle(tmp_path: Path) -> None:
    handles: List[Any] = []

    def tracking_open(path: str, mode: int = 0o600):
        handle = fs.open_exclusive(path, mode)
        handles.append(handle)
        return handle

    with patch("fixtree.core.materializer.open_exclusive", side_effect=tracking_open):
        with pytest.raises(WriteError) as exc:
            generate_from_root(tmp_path, {"a.bin": ExplodingStream()})

    assert exc.value.path == str(tmp_path / "a.bin")
    assert (tmp_path / "a.bin").read_bytes() == b"partial"
    assert len(handles) == 1
    assert handles[0].closed


def test_handle_closed_on_shape_error(tmp_path: Path) -> None:
    handles: List[Any] = []

    def tracking_open(path: str, mode: int = 0o600):
        handle = fs.open_exclusive(path, mode)
        handles.append(handle)
        return handle

    with patch("fixtree.core.materializer.open_exclusive", side_effect=tracking_open):
        with pytest.raises(ShapeError):
            generate_from_root(tmp_path, {"f.txt": ["not", "file", "content"]})

    assert handles[0].closed


def test_stream_yielding_non_bytes_is_a_shape_error(tmp_path: Path) -> None:
    with pytest.raises(ShapeError, match="is not valid"):
        generate_from_root(tmp_path, {"odd": WeirdStream()})
    assert (tmp_path / "odd").read_bytes() == b""
