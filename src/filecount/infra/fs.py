from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path manipulation and platform limits used by the
traversal engine. Acts as an abstraction over the 'os' and 'sys' modules to
ensure uniform behavior across Windows and Unix-like systems.
"""

import os
import sys
from typing import Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "filecount"
UNIX_APP_DIR_NAME = ".filecount"

# Conservative per-platform maxima used when pathconf() is unavailable
WINDOWS_PATH_MAX = 260
DARWIN_PATH_MAX = 1024
POSIX_PATH_MAX = 4096

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/filecount
    - Linux/Mac: ~/.filecount

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

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
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# PLATFORM LIMITS
# -----------------------------------------------------------------------------

def get_max_path_length(path: Optional[str] = None) -> int:
    """
    Determine the maximum path length accepted by the host platform.

    Queries pathconf(PC_PATH_MAX) where the OS exposes it, falling back to
    the documented limit for the running platform.

    Args:
        path: Optional filesystem location to query (defaults to root).

    Returns:
        int: Maximum number of characters in a constructed path.
    """
    if os.name == "nt":
        return WINDOWS_PATH_MAX

    if hasattr(os, "pathconf"):
        try:
            value = os.pathconf(path or os.sep, "PC_PATH_MAX")
            if value > 0:
                return int(value)
        except (OSError, ValueError):
            pass

    if sys.platform == "darwin":
        return DARWIN_PATH_MAX
    return POSIX_PATH_MAX
