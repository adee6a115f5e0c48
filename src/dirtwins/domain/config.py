from __future__ import annotations

"""
Configuration Domain Management.

Defaults for an analysis run and their persistence as JSON in the user
data directory. Values here are untrusted until they pass through the
validator stage.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from dirtwins.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")
CURRENT_CONFIG_VERSION = "1.0.0"
OUTPUT_FORMATS = ("text", "json")


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Input
        "input_path": "input.txt",
        "skip_comments": False,

        # Gates
        "name_threshold": 50.0,
        "content_threshold": 50.0,
        "min_child_count": 1,

        # Concurrency
        "ingest_workers": 8,
        "analysis_workers": 1,

        # Output
        "output_format": "text",
        "output_path": "",
    }


def get_default_app_state() -> Dict[str, Any]:
    """Generate the complete persisted state structure."""
    return {
        "version": CURRENT_CONFIG_VERSION,
        "last_session": get_default_config(),
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load persisted state from disk.

    A flat file holding only session keys is accepted and wrapped into the
    state structure, so hand-written config files need no envelope.

    Args:
        config_file: Explicit file to read. Defaults to CONFIG_FILE.

    Returns:
        Dict[str, Any]: The loaded state or a default structure on failure.
    """
    path = config_file or CONFIG_FILE
    state = get_default_app_state()

    if not os.path.exists(path):
        logger.debug(f"Config file not found at {path}. Returning defaults.")
        return state

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config from {path}: {e}. Using defaults.")
        return state

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file {path}. Using defaults.")
        return state

    if "last_session" in data and isinstance(data["last_session"], dict):
        state["last_session"].update(data["last_session"])
    else:
        state["last_session"].update(data)

    return state


def save_app_state(state: Dict[str, Any], config_file: Optional[str] = None) -> None:
    """Persist state to disk, stamping the current schema version."""
    path = config_file or CONFIG_FILE
    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        state["version"] = CURRENT_CONFIG_VERSION
        with open(path, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """Retrieve the active configuration (last session merged over defaults)."""
    state = load_app_state(config_file)
    defaults = get_default_config()
    defaults.update(state.get("last_session", {}))
    return defaults


def save_config(config: Dict[str, Any], config_file: Optional[str] = None) -> None:
    """Save the provided config as the last session."""
    state = load_app_state(config_file)
    state["last_session"] = dict(config)
    save_app_state(state, config_file)
