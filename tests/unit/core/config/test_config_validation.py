from __future__ import annotations

"""
Unit tests for configuration defaults, loading and validation.

Verifies:
1. Default value injection.
2. Type coercion of CLI/JSON inputs.
3. Strict mode validation.
4. JSON config file layering.
"""

import json
from pathlib import Path

import pytest

from shelltree.core.validator import validate_config
from shelltree.domain.config import get_default_config, load_config


def test_validate_none_returns_defaults() -> None:
    cfg, warnings = validate_config(None)

    assert cfg == get_default_config()
    assert len(warnings) == 1


def test_validate_empty_dict_returns_defaults() -> None:
    cfg, warnings = validate_config({})

    assert cfg["size_threshold"] == 100_000
    assert cfg["device_capacity"] == 70_000_000
    assert cfg["required_free_space"] == 30_000_000
    assert cfg["render_tree"] is False
    assert warnings == []


def test_validate_coerces_strings() -> None:
    cfg, warnings = validate_config({
        "size_threshold": " 500 ",
        "device_capacity": "1_000",
        "render_tree": "yes",
    })

    assert cfg["size_threshold"] == 500
    assert cfg["device_capacity"] == 1000
    assert cfg["render_tree"] is True
    assert len(warnings) == 3


def test_validate_rejects_negative_and_garbage_with_fallback() -> None:
    cfg, warnings = validate_config({"size_threshold": -1, "device_capacity": "lots"})

    assert cfg["size_threshold"] == 100_000
    assert cfg["device_capacity"] == 70_000_000
    assert len(warnings) == 2


def test_validate_bool_is_not_an_int() -> None:
    cfg, warnings = validate_config({"size_threshold": True})
    assert cfg["size_threshold"] == 100_000
    assert warnings


def test_validate_ignores_unknown_keys() -> None:
    cfg, warnings = validate_config({"colour": "blue"})
    assert "colour" not in cfg
    assert any("colour" in w for w in warnings)


def test_strict_mode_raises() -> None:
    with pytest.raises(TypeError):
        validate_config("not a dict", strict=True)
    with pytest.raises(TypeError):
        validate_config({"size_threshold": "10"}, strict=True)
    with pytest.raises(ValueError):
        validate_config({"required_free_space": -5}, strict=True)


def test_load_config_without_path_returns_defaults() -> None:
    assert load_config(None) == get_default_config()


def test_load_config_layers_json_over_defaults(tmp_path: Path) -> None:
    path = tmp_path / "shelltree.json"
    path.write_text(json.dumps({"size_threshold": 42, "unknown": 1}), encoding="utf-8")

    cfg = load_config(str(path))

    assert cfg["size_threshold"] == 42
    assert cfg["device_capacity"] == 70_000_000
    assert "unknown" not in cfg


def test_load_config_handles_missing_and_invalid_files(tmp_path: Path) -> None:
    assert load_config(str(tmp_path / "missing.json")) == get_default_config()

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert load_config(str(broken)) == get_default_config()

    listing = tmp_path / "list.json"
    listing.write_text("[1, 2]", encoding="utf-8")
    assert load_config(str(listing)) == get_default_config()
