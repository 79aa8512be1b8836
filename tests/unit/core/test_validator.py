from __future__ import annotations

"""
Unit tests for the Configuration Validation Service.
"""

import pytest

from filecount.core.validator import validate_config


# -----------------------------------------------------------------------------
# 1. Base Structure & Defaults
# -----------------------------------------------------------------------------

def test_validate_none_returns_defaults():
    """Passing None should return the default configuration."""
    cfg, warnings = validate_config(None)

    assert cfg["recursive"] is True
    assert cfg["include_hidden"] is False
    assert cfg["max_path_length"] is None
    assert len(warnings) == 1


def test_validate_empty_dict_returns_defaults():
    cfg, warnings = validate_config({})

    assert cfg["quiet"] is False
    assert cfg["skip_long_paths"] is False
    assert warnings == []


def test_validate_accepts_complete_config(mock_config_dict):
    cfg, warnings = validate_config(mock_config_dict)

    assert cfg == mock_config_dict
    assert warnings == []


def test_validate_drops_unknown_keys():
    cfg, _ = validate_config({"recursive": False, "color": "blue"})

    assert "color" not in cfg
    assert cfg["recursive"] is False


# -----------------------------------------------------------------------------
# 2. Type Correction (Non-Strict Mode)
# -----------------------------------------------------------------------------

def test_validate_converts_strings_and_numbers_to_bools():
    raw = {
        "recursive": "no",
        "include_hidden": "Yes",
        "quiet": 1,
        "skip_long_paths": "off",
    }
    cfg, warnings = validate_config(raw, strict=False)

    assert cfg["recursive"] is False
    assert cfg["include_hidden"] is True
    assert cfg["quiet"] is True
    assert cfg["skip_long_paths"] is False
    assert len(warnings) == 4


def test_validate_invalid_bool_falls_back():
    cfg, warnings = validate_config({"recursive": ["yes"]})

    assert cfg["recursive"] is True
    assert "expected bool" in warnings[0]


def test_validate_max_path_length():
    cfg, warnings = validate_config({"max_path_length": "512"})
    assert cfg["max_path_length"] == 512
    assert len(warnings) == 1

    cfg, warnings = validate_config({"max_path_length": 0})
    assert cfg["max_path_length"] is None
    assert "positive int" in warnings[0]

    cfg, _ = validate_config({"max_path_length": True})
    assert cfg["max_path_length"] is None


# -----------------------------------------------------------------------------
# 3. Strict Mode
# -----------------------------------------------------------------------------

def test_strict_mode_raises_on_bad_types():
    with pytest.raises(TypeError):
        validate_config("not a dict", strict=True)
    with pytest.raises(TypeError):
        validate_config({"quiet": "yes"}, strict=True)
    with pytest.raises(TypeError):
        validate_config({"max_path_length": "100"}, strict=True)
