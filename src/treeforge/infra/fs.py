from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path resolution and text loading utilities. Acts
as an abstraction over the 'os' module to ensure uniform behavior across
Windows and Unix-like systems.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "TreeForge"
UNIX_APP_DIR_NAME = ".treeforge"
UTF8_BOM = "\ufeff"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/TreeForge
    - Linux/Mac: ~/.treeforge

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    # Windows specific resolution
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    # Idempotent directory creation; a read-only home only disables persistence
    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# TEXT LOADING API
# -----------------------------------------------------------------------------

def read_text_file(path: str) -> str:
    """
    Read a UTF-8 text file, dropping a leading byte order mark.

    Editors on Windows often save diagrams with a BOM, which would
    otherwise become part of the root entry name.

    Args:
        path: File to read.

    Returns:
        str: File content.

    Raises:
        OSError: If the file cannot be opened or read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    return strip_bom(content)


def strip_bom(text: str) -> str:
    """Remove a leading UTF-8 byte order mark if present."""
    if text.startswith(UTF8_BOM):
        return text[len(UTF8_BOM):]
    return text
