from __future__ import annotations

"""
Traversal Domain Data Models.

Defines the value objects exchanged between the traversal engine and its
callers: the flags driving one traversal, the running counters, and the
immutable result carrying both the totals and any absorbed failures.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from filecount.infra.fs import get_max_path_length

# -----------------------------------------------------------------------------
# CONFIGURATION MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TraversalConfig:
    """
    Immutable flags for a single traversal.

    Attributes:
        recursive: Descend into subdirectories.
        include_hidden: Do not skip hidden entries.
        quiet: Suppress diagnostics for absorbed errors.
        max_path_length: Longest subpath accepted before the directory is
            abandoned. Resolved from the platform when None.
        skip_long_paths: Skip only the offending entry on an over-long
            subpath instead of abandoning the remaining siblings.
    """
    recursive: bool = True
    include_hidden: bool = False
    quiet: bool = False
    max_path_length: Optional[int] = None
    skip_long_paths: bool = False

    def resolved_max_path_length(self) -> int:
        """Return the effective path-length limit."""
        if self.max_path_length is None:
            return get_max_path_length()
        return self.max_path_length

    @classmethod
    def from_dict(cls, cfg: Mapping[str, Any]) -> "TraversalConfig":
        """Build a config from a validated configuration dictionary."""
        return cls(
            recursive=bool(cfg.get("recursive", True)),
            include_hidden=bool(cfg.get("include_hidden", False)),
            quiet=bool(cfg.get("quiet", False)),
            max_path_length=cfg.get("max_path_length"),
            skip_long_paths=bool(cfg.get("skip_long_paths", False)),
        )

# -----------------------------------------------------------------------------
# ACCUMULATOR
# -----------------------------------------------------------------------------

@dataclass
class Counts:
    """Running totals shared by every level of one traversal."""
    files: int = 0
    directories: int = 0

# -----------------------------------------------------------------------------
# ERROR TAXONOMY
# -----------------------------------------------------------------------------

class IssueKind(str, Enum):
    """Categories of filesystem failures absorbed during traversal."""
    OPEN_FAILURE = "open_failure"
    PATH_TOO_LONG = "path_too_long"
    METADATA_FAILURE = "metadata_failure"


@dataclass(frozen=True)
class TraversalIssue:
    """
    One failure absorbed by the traversal.

    Attributes:
        kind: Failure category.
        path: Offending path (directory or constructed subpath).
        message: Human-readable description, as written to the diagnostics.
    """
    kind: IssueKind
    path: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"kind": self.kind.value, "path": self.path, "message": self.message}

# -----------------------------------------------------------------------------
# RESULT MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CountResult:
    """
    Outcome of a complete traversal.

    Unpacks as (files, directories) so callers that only need the numbers
    can ignore the issue list.

    Attributes:
        files: Non-directory entries counted.
        directories: Subdirectory entries counted.
        issues: Failures absorbed while counting, in encounter order.
    """
    files: int
    directories: int
    issues: List[TraversalIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    def as_tuple(self) -> Tuple[int, int]:
        return self.files, self.directories

    def __iter__(self) -> Iterator[int]:
        return iter(self.as_tuple())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files": self.files,
            "directories": self.directories,
            "issues": [issue.to_dict() for issue in self.issues],
        }
