from __future__ import annotations

"""
filecount: fast recursive file and directory counting.

    >>> from filecount import count_directory
    >>> files, dirs = count_directory("/tmp", recursive=True)
"""

from filecount.core.counter import DirectoryCounter, count, count_directory
from filecount.domain.models import (
    CountResult,
    Counts,
    IssueKind,
    TraversalConfig,
    TraversalIssue,
)

__version__ = "0.2.0"

__all__ = [
    "CountResult",
    "Counts",
    "DirectoryCounter",
    "IssueKind",
    "TraversalConfig",
    "TraversalIssue",
    "count",
    "count_directory",
    "__version__",
]
