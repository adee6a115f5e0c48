from __future__ import annotations

"""
Unit tests for the Config Domain.

Verifies:
1. Default configuration generation.
2. Resilience against corrupted config files.
3. Persistence (Save/Load) without touching real user data.
"""

import json
from unittest.mock import patch

import pytest

from dirtwins.domain.config import (
    CURRENT_CONFIG_VERSION,
    get_default_config,
    load_app_state,
    load_config,
    save_config,
)


@pytest.fixture
def config_path(tmp_path):
    """Redirect CONFIG_FILE into a temporary directory."""
    path = tmp_path / "DirTwins" / "config.json"
    with patch("dirtwins.domain.config.CONFIG_FILE", str(path)):
        yield path


def test_load_fresh_state_returns_defaults(config_path) -> None:
    assert not config_path.exists()

    state = load_app_state()

    assert state["version"] == CURRENT_CONFIG_VERSION
    assert state["last_session"] == get_default_config()


def test_load_corrupted_file_returns_defaults(config_path) -> None:
    config_path.parent.mkdir(parents=True)
    config_path.write_text("{ not json", encoding="utf-8")

    assert load_config() == get_default_config()


def test_load_non_dict_returns_defaults(config_path) -> None:
    config_path.parent.mkdir(parents=True)
    config_path.write_text("[1, 2, 3]", encoding="utf-8")

    assert load_config() == get_default_config()


def test_save_and_load_round_trip(config_path) -> None:
    conf = get_default_config()
    conf["name_threshold"] = 80.0
    conf["min_child_count"] = 4

    save_config(conf)

    on_disk = json.loads(config_path.read_text(encoding="utf-8"))
    assert on_disk["version"] == CURRENT_CONFIG_VERSION
    assert load_config()["name_threshold"] == 80.0
    assert load_config()["min_child_count"] == 4


def test_flat_explicit_config_file(tmp_path) -> None:
    """A hand-written file with only session keys is merged over defaults."""
    explicit = tmp_path / "custom.json"
    explicit.write_text(json.dumps({"content_threshold": 90}), encoding="utf-8")

    conf = load_config(str(explicit))

    assert conf["content_threshold"] == 90
    assert conf["name_threshold"] == get_default_config()["name_threshold"]
