from __future__ import annotations

"""
Unit tests for the Traversal Domain Models.
"""

from unittest.mock import patch

import pytest

from filecount.domain.models import (
    CountResult,
    IssueKind,
    TraversalConfig,
    TraversalIssue,
)


def test_count_result_unpacks_as_pair():
    files, dirs = CountResult(files=7, directories=2)

    assert (files, dirs) == (7, 2)


def test_count_result_ok_reflects_issues():
    issue = TraversalIssue(IssueKind.OPEN_FAILURE, "/nope", "/nope: No such file or directory")

    assert CountResult(1, 1).ok is True
    assert CountResult(1, 1, [issue]).ok is False


def test_count_result_to_dict():
    issue = TraversalIssue(IssueKind.PATH_TOO_LONG, "/a/b", "path too long (4) /a/b")
    payload = CountResult(3, 1, [issue]).to_dict()

    assert payload == {
        "files": 3,
        "directories": 1,
        "issues": [{"kind": "path_too_long", "path": "/a/b", "message": "path too long (4) /a/b"}],
    }


def test_traversal_config_is_frozen():
    cfg = TraversalConfig()

    with pytest.raises(AttributeError):
        cfg.recursive = False  # type: ignore[misc]


def test_traversal_config_from_dict(mock_config_dict):
    mock_config_dict.update({"recursive": False, "include_hidden": True, "max_path_length": 300})

    cfg = TraversalConfig.from_dict(mock_config_dict)

    assert cfg == TraversalConfig(
        recursive=False, include_hidden=True, quiet=False, max_path_length=300
    )


def test_resolved_max_path_length_defers_to_platform():
    with patch("filecount.domain.models.get_max_path_length", return_value=1234):
        assert TraversalConfig().resolved_max_path_length() == 1234
    assert TraversalConfig(max_path_length=99).resolved_max_path_length() == 99
