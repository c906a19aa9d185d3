from __future__ import annotations

"""
Unit tests for the JSON Description Loader.
"""

import io
import json
from pathlib import Path
from unittest.mock import patch

import pytest

from fixtree.core.loader import description_from_json, load_description
from fixtree.domain.errors import DescriptionLoadError
from fixtree.domain.tree_models import Node


def test_objects_become_mappings() -> None:
    data = {"a/": {"b.txt": "hi", "c/": None}}
    assert description_from_json(data) == data


def test_arrays_become_nodes() -> None:
    desc = description_from_json([{"name": "d/", "content": [{"name": "f", "content": "x"}]}])
    assert desc == [Node("d/", [Node("f", "x")])]


def test_array_items_need_a_name() -> None:
    with pytest.raises(DescriptionLoadError, match="array item 0"):
        description_from_json([{"content": "x"}])


def test_array_items_reject_unknown_keys() -> None:
    with pytest.raises(DescriptionLoadError, match="unknown keys: mode"):
        description_from_json([{"name": "f", "mode": 644}])


def test_array_items_reject_empty_names() -> None:
    with pytest.raises(DescriptionLoadError, match="cannot be empty"):
        description_from_json([{"name": ""}])


def test_load_description_from_file(tmp_path: Path) -> None:
    path = tmp_path / "tree.json"
    path.write_text(json.dumps({"x.txt": "1"}), encoding="utf-8")
    assert load_description(str(path)) == {"x.txt": "1"}


def test_load_description_from_stdin() -> None:
    with patch("sys.stdin", io.StringIO('{"y/": null}')):
        assert load_description("-") == {"y/": None}


def test_load_description_missing_file(tmp_path: Path) -> None:
    with pytest.raises(DescriptionLoadError, match="cannot read description"):
        load_description(str(tmp_path / "missing.json"))


def test_load_description_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(DescriptionLoadError, match="invalid JSON"):
        load_description(str(path))
