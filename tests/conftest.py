from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures: sample path lists and a configuration dictionary.
"""

import os
import sys
from typing import Any, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sibling_paths() -> List[str]:
    """Two sibling directories 'a/b' and 'a/c' with identical children."""
    return ["a/b/x", "a/b/y", "a/c/x", "a/c/y"]


@pytest.fixture
def backup_paths() -> List[str]:
    """Two mirrored backups whose names differ by one character."""
    return [
        "backup_2023/photos/a.jpg",
        "backup_2023/photos/b.jpg",
        "backup_2024/photos/a.jpg",
        "backup_2024/photos/b.jpg",
    ]


@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """A complete, valid configuration dictionary."""
    return {
        "input_path": "/tmp/paths.txt",
        "skip_comments": False,
        "name_threshold": 0.0,
        "content_threshold": 50.0,
        "min_child_count": 1,
        "ingest_workers": 4,
        "analysis_workers": 1,
        "output_format": "text",
        "output_path": "",
    }
