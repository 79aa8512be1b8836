from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates path normalization, cross-platform data directory resolution and
platform path-length limits across different OS environments.
"""

import os
from pathlib import Path
from unittest.mock import patch

from filecount.infra.fs import (
    DARWIN_PATH_MAX,
    POSIX_PATH_MAX,
    WINDOWS_PATH_MAX,
    get_max_path_length,
    get_user_data_dir,
    normalize_path,
)

# -----------------------------------------------------------------------------
# PATH RESOLUTION TESTS
# -----------------------------------------------------------------------------

def test_get_user_data_dir_windows() -> None:
    """TC-01: Verify resolution of %LOCALAPPDATA% on Windows systems."""
    mock_appdata = "C:/Users/Test/AppData/Local"
    with patch("os.name", "nt"):
        with patch.dict(os.environ, {"LOCALAPPDATA": mock_appdata}):
            with patch("os.makedirs"):
                path = get_user_data_dir()
                assert "filecount" in path
                assert path.lower().startswith(os.path.abspath(mock_appdata).lower())


def test_get_user_data_dir_unix() -> None:
    """TC-01: Verify resolution of ~/.filecount on Unix-like systems."""
    mock_home = "/home/testuser"
    with patch("os.name", "posix"):
        with patch("os.path.expanduser", return_value=mock_home):
            with patch("os.makedirs"):
                path = get_user_data_dir()
                normalized_path = path.replace("\\", "/")
                assert normalized_path.endswith("/home/testuser/.filecount")


def test_normalize_path_expansion() -> None:
    """TC-02: Verify expansion of environment variables and fallback."""
    with patch.dict(os.environ, {"TEST_VAR": "my_folder"}):
        path = normalize_path("$TEST_VAR/sub", fallback=".")
        assert path.lower().endswith(os.path.join("my_folder", "sub").lower())

    assert normalize_path("   ", fallback=".") == os.path.abspath(".")


# -----------------------------------------------------------------------------
# PLATFORM LIMIT TESTS
# -----------------------------------------------------------------------------

def test_max_path_length_windows() -> None:
    with patch("os.name", "nt"):
        assert get_max_path_length() == WINDOWS_PATH_MAX


def test_max_path_length_uses_pathconf(tmp_path: Path) -> None:
    with patch("os.name", "posix"), patch("os.pathconf", return_value=2048, create=True):
        assert get_max_path_length(str(tmp_path)) == 2048


def test_max_path_length_platform_fallback() -> None:
    with patch("os.name", "posix"), patch("os.pathconf", side_effect=OSError, create=True):
        with patch("sys.platform", "darwin"):
            assert get_max_path_length() == DARWIN_PATH_MAX
        with patch("sys.platform", "linux"):
            assert get_max_path_length() == POSIX_PATH_MAX
