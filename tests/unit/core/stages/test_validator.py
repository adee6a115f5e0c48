from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies:
1. Default value injection.
2. Type coercion and range clamping.
3. Strict mode validation.
"""

import pytest

from dirtwins.core.pipeline.stages.validator import validate_config


def test_validate_none_returns_defaults() -> None:
    cfg, warnings = validate_config(None)

    assert cfg["name_threshold"] == 50.0
    assert cfg["content_threshold"] == 50.0
    assert cfg["min_child_count"] == 1
    assert len(warnings) > 0


def test_validate_empty_dict_returns_defaults() -> None:
    cfg, warnings = validate_config({})

    assert cfg["input_path"] == "input.txt"
    assert cfg["output_format"] == "text"
    assert warnings == []


def test_validate_accepts_complete_config(mock_config_dict) -> None:
    cfg, warnings = validate_config(mock_config_dict)

    assert cfg == mock_config_dict
    assert warnings == []


def test_validate_converts_numeric_strings() -> None:
    cfg, warnings = validate_config({
        "name_threshold": "75%",
        "content_threshold": " 40 ",
        "min_child_count": "3",
        "skip_comments": "yes",
    })

    assert cfg["name_threshold"] == 75.0
    assert cfg["content_threshold"] == 40.0
    assert cfg["min_child_count"] == 3
    assert cfg["skip_comments"] is True
    assert len(warnings) == 4


def test_validate_clamps_out_of_range() -> None:
    cfg, warnings = validate_config({
        "name_threshold": 150,
        "content_threshold": -5,
        "min_child_count": -2,
        "ingest_workers": 0,
    })

    assert cfg["name_threshold"] == 100.0
    assert cfg["content_threshold"] == 0.0
    assert cfg["min_child_count"] == 0
    assert cfg["ingest_workers"] == 1
    assert len(warnings) == 4


def test_validate_unknown_output_format_falls_back() -> None:
    cfg, warnings = validate_config({"output_format": "XML"})

    assert cfg["output_format"] == "text"
    assert any("output_format" in w for w in warnings)


def test_validate_output_format_is_case_insensitive() -> None:
    cfg, _ = validate_config({"output_format": "JSON"})
    assert cfg["output_format"] == "json"


def test_validate_garbage_uses_fallback() -> None:
    cfg, warnings = validate_config({"name_threshold": "high", "min_child_count": [1]})

    assert cfg["name_threshold"] == 50.0
    assert cfg["min_child_count"] == 1
    assert len(warnings) == 2


def test_validate_strict_mode_raises() -> None:
    with pytest.raises(TypeError):
        validate_config("not a dict", strict=True)
    with pytest.raises(TypeError):
        validate_config({"name_threshold": "75"}, strict=True)
    with pytest.raises(ValueError):
        validate_config({"content_threshold": 101.0}, strict=True)
    with pytest.raises(ValueError):
        validate_config({"output_format": "xml"}, strict=True)


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), "nan", "-inf"])
def test_validate_non_finite_threshold_falls_back(bad) -> None:
    cfg, warnings = validate_config({"name_threshold": bad, "content_threshold": 30.0})

    assert cfg["name_threshold"] == 50.0
    assert cfg["content_threshold"] == 30.0
    assert any("non-finite" in w for w in warnings)


def test_validate_non_finite_threshold_strict_raises() -> None:
    with pytest.raises(ValueError):
        validate_config({"content_threshold": float("nan")}, strict=True)
