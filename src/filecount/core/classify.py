from __future__ import annotations

"""
Directory Entry Classification Strategies.

Decides whether a directory entry is a subdirectory and whether it is hidden.
Two interchangeable strategies exist: one trusts the type hint cached on the
entry by the directory stream (d_type), the other always issues an explicit
lstat(). The traversal engine talks to a single EntryClassifier and never
branches on the platform itself.
"""

import os
import stat
from abc import ABC, abstractmethod
from typing import Callable, Optional

HiddenCheck = Callable[[os.DirEntry, str], bool]

# -----------------------------------------------------------------------------
# HIDDEN ENTRY DETECTION
# -----------------------------------------------------------------------------

def has_dot_prefix(entry: os.DirEntry, subpath: str) -> bool:
    """POSIX convention: names starting with '.' are hidden."""
    return entry.name.startswith(".")


def has_hidden_attribute(entry: os.DirEntry, subpath: str) -> bool:
    """Windows convention: the FILE_ATTRIBUTE_HIDDEN bit is set."""
    attributes = getattr(entry.stat(follow_symlinks=False), "st_file_attributes", 0)
    return bool(attributes & stat.FILE_ATTRIBUTE_HIDDEN)


def default_hidden_check() -> HiddenCheck:
    """Return the hidden-entry rule for the running platform."""
    if os.name == "nt":
        return has_hidden_attribute
    return has_dot_prefix

# -----------------------------------------------------------------------------
# CLASSIFIER STRATEGIES
# -----------------------------------------------------------------------------

class EntryClassifier(ABC):
    """
    Abstract base class for entry classification.

    Implementations may raise OSError when the underlying metadata query
    fails; the caller decides how to recover.
    """

    def __init__(self, hidden_check: Optional[HiddenCheck] = None) -> None:
        self._hidden_check = hidden_check or default_hidden_check()

    @abstractmethod
    def is_dir(self, entry: os.DirEntry, subpath: str) -> bool:
        """
        Report whether the entry is a directory, without following symlinks.

        Args:
            entry: Entry yielded by os.scandir().
            subpath: Full path of the entry.

        Returns:
            bool: True for directories.
        """

    def is_hidden(self, entry: os.DirEntry, subpath: str) -> bool:
        return self._hidden_check(entry, subpath)


class TypeHintClassifier(EntryClassifier):
    """Uses the d_type cached by the directory stream when available."""

    def is_dir(self, entry: os.DirEntry, subpath: str) -> bool:
        # os.DirEntry falls back to lstat() itself when d_type is DT_UNKNOWN
        return entry.is_dir(follow_symlinks=False)


class LstatClassifier(EntryClassifier):
    """Issues an explicit lstat() for every entry."""

    def is_dir(self, entry: os.DirEntry, subpath: str) -> bool:
        return stat.S_ISDIR(os.lstat(subpath).st_mode)


def select_classifier(
        prefer_type_hint: bool = True,
        hidden_check: Optional[HiddenCheck] = None,
) -> EntryClassifier:
    """
    Resolve the classification strategy once for a traversal.

    Args:
        prefer_type_hint: Use the inline type hint rather than lstat().
        hidden_check: Override for the platform hidden-entry rule.

    Returns:
        EntryClassifier: The selected strategy instance.
    """
    if prefer_type_hint:
        return TypeHintClassifier(hidden_check)
    return LstatClassifier(hidden_check)
