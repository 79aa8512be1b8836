from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for sample directory trees and configuration dictionaries.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from filecount.infra.logging import reset_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Build the reference tree used across the counting tests.

    Layout:
        root/
            a.txt
            b.txt
            .secret
            sub/
                c.txt
    """
    root = tmp_path / "root"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_text("a")
    (root / "b.txt").write_text("b")
    (root / ".secret").write_text("s")
    (root / "sub" / "c.txt").write_text("c")
    return root


@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """Return a valid, complete configuration dictionary."""
    return {
        "recursive": True,
        "include_hidden": False,
        "quiet": False,
        "skip_long_paths": False,
        "max_path_length": None,
    }


@pytest.fixture
def user_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect the persisted configuration into a temporary directory."""
    data_dir = tmp_path / "user_data"
    data_dir.mkdir()
    monkeypatch.setattr(
        "filecount.domain.config.get_user_data_dir", lambda: str(data_dir)
    )
    return data_dir


@pytest.fixture
def clean_logging():
    """Detach filecount logging handlers before and after a test."""
    reset_logging()
    root = logging.getLogger()
    previous_level = root.level
    yield
    reset_logging()
    root.setLevel(previous_level)
