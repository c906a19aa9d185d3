from __future__ import annotations

"""
Integration tests for the result-returning engine (run_generation).
"""

import io
import shutil
from pathlib import Path

from fixtree import DESTRUCTIVE, GeneratorConfig, Node, run_generation


def test_run_generation_success(tmp_path: Path) -> None:
    result = run_generation({"a/": {"b.txt": "hi", "c/": None}}, root_path=tmp_path, render=True)

    assert result.ok is True
    assert result.root_path == str(tmp_path)
    assert result.mode == "strict"
    assert (result.directories, result.files, result.bytes_written) == (2, 1, 2)
    assert result.tree_lines == [
        str(tmp_path),
        "└── a/",
        "    ├── b.txt (2 B)",
        "    └── c/",
    ]


def test_run_generation_temp_root() -> None:
    result = run_generation({"f": "x"})
    try:
        assert result.ok is True
        assert Path(result.root_path, "f").read_text() == "x"
    finally:
        shutil.rmtree(result.root_path, ignore_errors=True)


def test_run_generation_reports_errors_as_values(tmp_path: Path) -> None:
    result = run_generation([Node("one", "1"), Node("one", "2")], root_path=tmp_path)

    assert result.ok is False
    assert result.error_kind == "FileCreationError"
    assert result.error_path == str(tmp_path / "one")
    assert result.root_path == str(tmp_path)
    assert result.files == 1


def test_run_generation_empty_root_is_an_error() -> None:
    result = run_generation({}, root_path="")
    assert result.ok is False
    assert result.error_kind == "RootProvisioningError"


def test_dry_run_writes_nothing(tmp_path: Path) -> None:
    target = tmp_path / "target"
    result = run_generation({"d/": {"f": "abc"}}, root_path=target, dry_run=True, render=True)

    assert result.ok is True
    assert result.dry_run is True
    assert not target.exists()
    assert result.files == 1
    assert result.tree_lines == [str(target), "└── d/", "    └── f"]


def test_dry_run_sees_existing_files_in_strict_mode(tmp_path: Path) -> None:
    (tmp_path / "taken.txt").write_text("x")

    strict = run_generation({"taken.txt": "y"}, root_path=tmp_path, dry_run=True)
    clean = run_generation({"taken.txt": "y"}, DESTRUCTIVE, root_path=tmp_path, dry_run=True)

    assert strict.ok is False
    assert strict.error_kind == "FileCreationError"
    assert clean.ok is True
    assert (tmp_path / "taken.txt").read_text() == "x"


def test_dry_run_reports_shape_errors() -> None:
    result = run_generation({"d/": 1}, dry_run=True)
    assert result.ok is False
    assert result.error_kind == "ShapeError"


def test_directory_counter_ignores_existing_and_merged_directories(tmp_path: Path) -> None:
    (tmp_path / "old").mkdir()
    desc = [Node("old/", None), Node("x/y/", None), Node("x/", None), Node("/", None)]

    result = run_generation(desc, root_path=tmp_path)
    planned = run_generation(desc, root_path=tmp_path / "fresh", dry_run=True)

    assert result.ok is True
    assert result.directories == 2
    assert planned.directories == 3


def test_unencodable_text_is_reported_not_raised(tmp_path: Path) -> None:
    ascii_only = GeneratorConfig(encoding="ascii")

    real = run_generation({"f.txt": "café"}, ascii_only, root_path=tmp_path)
    dry = run_generation({"f.txt": "café"}, ascii_only, root_path=tmp_path / "dry", dry_run=True)
    stream = run_generation({"g.txt": io.StringIO("café")}, ascii_only, root_path=tmp_path)

    for result in (real, dry, stream):
        assert result.ok is False
        assert result.error_kind == "ShapeError"
