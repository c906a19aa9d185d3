from __future__ import annotations

"""
Unit tests for the Configuration Validator and GeneratorConfig.

Verifies:
1. Default value injection.
2. Type coercion (strings to bools / permission bits).
3. Strict mode validation.
4. Conversion into the immutable GeneratorConfig.
"""

import pytest

from fixtree.core.validator import validate_config
from fixtree.domain.config import (
    DESTRUCTIVE,
    STRICT,
    GeneratorConfig,
    ProvisionMode,
    get_default_config,
)


def test_validate_none_returns_defaults() -> None:
    cfg, warnings = validate_config(None)

    assert cfg == get_default_config()
    assert len(warnings) == 1


def test_validate_empty_dict_returns_defaults() -> None:
    cfg, warnings = validate_config({})

    assert cfg["mode"] == "strict"
    assert cfg["dir_mode"] == 0o700
    assert cfg["file_mode"] == 0o600
    assert warnings == []


def test_validate_converts_strings_to_bools() -> None:
    cfg, warnings = validate_config({"allow_streams": "no", "print_tree": "yes"})

    assert cfg["allow_streams"] is False
    assert cfg["print_tree"] is True
    assert len(warnings) == 2


def test_validate_parses_octal_mode_strings() -> None:
    cfg, _ = validate_config({"dir_mode": "755", "file_mode": "0o644"})

    assert cfg["dir_mode"] == 0o755
    assert cfg["file_mode"] == 0o644


def test_validate_rejects_unknown_mode_with_fallback() -> None:
    cfg, warnings = validate_config({"mode": "yolo"})

    assert cfg["mode"] == "strict"
    assert any("Invalid mode" in w for w in warnings)


def test_validate_normalizes_mode_case() -> None:
    cfg, warnings = validate_config({"mode": " Destructive "})
    assert cfg["mode"] == "destructive"
    assert warnings == []


def test_validate_unknown_encoding_falls_back() -> None:
    cfg, warnings = validate_config({"encoding": "klingon-8"})
    assert cfg["encoding"] == "utf-8"
    assert warnings


def test_strict_mode_raises() -> None:
    with pytest.raises(TypeError):
        validate_config({"allow_streams": "maybe"}, strict=True)
    with pytest.raises(ValueError):
        validate_config({"mode": "yolo"}, strict=True)
    with pytest.raises(ValueError):
        validate_config({"dir_mode": 0o17777}, strict=True)


def test_generator_config_from_dict() -> None:
    cfg, _ = validate_config({"mode": "destructive", "allow_streams": False, "file_mode": 0o640})
    gen = GeneratorConfig.from_dict(cfg)

    assert gen.mode is ProvisionMode.DESTRUCTIVE
    assert gen.destructive is True
    assert gen.allow_streams is False
    assert gen.file_mode == 0o640


def test_presets_and_round_trip() -> None:
    assert STRICT.destructive is False
    assert DESTRUCTIVE.destructive is True
    assert GeneratorConfig.from_dict(DESTRUCTIVE.to_dict()) == DESTRUCTIVE


def test_presets_differ_only_in_provisioning_mode() -> None:
    strict, destructive = STRICT.to_dict(), DESTRUCTIVE.to_dict()

    assert {k for k in strict if strict[k] != destructive[k]} == {"mode"}
    assert STRICT.allow_streams and STRICT.allow_single_child
