from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the per-user application directory and normalizes user supplied
paths. Keeps 'os' specific branching out of the domain and core layers.
"""

import os
from typing import List, Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "DirTwins"
UNIX_APP_DIR_NAME = ".dirtwins"
STDIN_MARKER = "-"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/DirTwins
    - Linux/Mac: ~/.dirtwins

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        # Read-only home: callers still get a usable path for lookups
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). The stdin marker '-' is returned untouched.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path, or '-' for stdin.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    if p == STDIN_MARKER:
        return p
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def write_lines(save_path: str, lines: List[str]) -> None:
    """Persist text lines to disk, creating the parent directory if needed."""
    out_dir = os.path.dirname(os.path.abspath(save_path))
    os.makedirs(out_dir, exist_ok=True)
    with open(save_path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
