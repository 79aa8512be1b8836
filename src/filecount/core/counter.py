from __future__ import annotations

"""
Directory Counting Engine.

Walks a directory tree depth-first and tallies files and subdirectories.
Filesystem failures never abort the whole call: the affected subtree (or
the rest of the affected directory) is dropped, a diagnostic is logged
unless the traversal is quiet, and the failure is recorded on the result.
"""

import logging
import os
from typing import List, Optional, Tuple, Union

from filecount.core.classify import EntryClassifier, select_classifier
from filecount.domain.models import (
    CountResult,
    Counts,
    IssueKind,
    TraversalConfig,
    TraversalIssue,
)

logger = logging.getLogger(__name__)

PathArg = Union[str, "os.PathLike[str]", bytes]

# Entries the directory stream may yield that are not real subdirectories
_SELF_AND_PARENT = (".", "..")


class DirectoryCounter:
    """
    Counts the entries beneath a root directory.

    One instance can be reused for any number of roots; each count() call
    starts from zero.

    Args:
        config: Flags driving the traversal.
        classifier: Entry classification strategy. Resolved with
            select_classifier() when omitted.
    """

    def __init__(
            self,
            config: Optional[TraversalConfig] = None,
            classifier: Optional[EntryClassifier] = None,
    ) -> None:
        self.config = config or TraversalConfig()
        self.classifier = classifier or select_classifier()
        self._max_path_length = self.config.resolved_max_path_length()

    # -------------------------------------------------------------------------
    # PUBLIC API
    # -------------------------------------------------------------------------

    def count(self, path: PathArg) -> CountResult:
        """
        Count files and subdirectories beneath path.

        Args:
            path: Directory to start from, relative or absolute.

        Returns:
            CountResult: Totals plus every failure absorbed on the way.
        """
        counts = Counts()
        issues: List[TraversalIssue] = []
        self.count_into(path, counts, issues)
        return CountResult(files=counts.files, directories=counts.directories, issues=issues)

    def count_into(self, path: PathArg, counts: Counts, issues: List[TraversalIssue]) -> None:
        """
        Accumulate the counts for path into an existing accumulator.

        Args:
            path: Directory to start from.
            counts: Accumulator updated in place.
            issues: List that absorbed failures are appended to.
        """
        root = os.fsdecode(os.fspath(path))
        logger.debug(f"Counting entries under: {root}")

        pending: List[str] = [root]
        while pending:
            subdirs = self._scan_directory(pending.pop(), counts, issues)
            # Reversed so the first subdirectory found is visited next
            pending.extend(reversed(subdirs))

        logger.debug(
            f"Finished {root}: {counts.files} files, {counts.directories} directories, "
            f"{len(issues)} issues"
        )

    # -------------------------------------------------------------------------
    # TRAVERSAL
    # -------------------------------------------------------------------------

    def _scan_directory(self, path: str, counts: Counts, issues: List[TraversalIssue]) -> List[str]:
        """
        Count the immediate children of one directory.

        Returns the subdirectories to descend into next (empty when the
        traversal is not recursive). Subdirectories found before an abort
        are still returned.
        """
        cfg = self.config
        subdirs: List[str] = []

        try:
            stream = os.scandir(path)
        except OSError as e:
            self._report(issues, IssueKind.OPEN_FAILURE, path, f"{path}: {e.strerror or e}")
            return subdirs

        try:
            with stream:
                for entry in stream:
                    subpath = os.path.join(path, entry.name)

                    # PATH_MAX is a byte limit
                    length = len(os.fsencode(subpath))
                    if length > self._max_path_length:
                        self._report(
                            issues, IssueKind.PATH_TOO_LONG, subpath,
                            f"path too long ({length}) {subpath}",
                        )
                        if cfg.skip_long_paths:
                            continue
                        return subdirs

                    try:
                        if not cfg.include_hidden and self.classifier.is_hidden(entry, subpath):
                            continue
                        is_dir = self.classifier.is_dir(entry, subpath)
                    except OSError as e:
                        self._report(
                            issues, IssueKind.METADATA_FAILURE, subpath,
                            f"{subpath}: {e.strerror or e}",
                        )
                        return subdirs

                    if is_dir:
                        if entry.name in _SELF_AND_PARENT:
                            continue
                        counts.directories += 1
                        if cfg.recursive:
                            subdirs.append(subpath)
                    else:
                        counts.files += 1
        except OSError as e:
            # readdir() failed part-way through the stream
            self._report(issues, IssueKind.OPEN_FAILURE, path, f"{path}: {e.strerror or e}")

        return subdirs

    def _report(
            self,
            issues: List[TraversalIssue],
            kind: IssueKind,
            path: str,
            message: str,
    ) -> None:
        """Record an absorbed failure and log it unless quiet."""
        issues.append(TraversalIssue(kind=kind, path=path, message=message))
        if not self.config.quiet:
            logger.warning(message)


# -----------------------------------------------------------------------------
# FUNCTIONAL FACADE
# -----------------------------------------------------------------------------

def count(
        path: PathArg,
        recursive: bool = True,
        include_hidden: bool = False,
        quiet: bool = False,
) -> CountResult:
    """
    Count files and directories beneath path, keeping absorbed failures.

    Args:
        path: Directory to start from.
        recursive: Descend into subdirectories.
        include_hidden: Count hidden entries too.
        quiet: Suppress diagnostics on traversal errors.

    Returns:
        CountResult: Totals and absorbed failures.
    """
    config = TraversalConfig(recursive=recursive, include_hidden=include_hidden, quiet=quiet)
    return DirectoryCounter(config).count(path)


def count_directory(
        path: PathArg,
        recursive: bool = True,
        include_hidden: bool = False,
        quiet: bool = False,
) -> Tuple[int, int]:
    """
    Return (file_count, directory_count) for the tree rooted at path.

    Never raises for filesystem failures; an unreadable root yields (0, 0).
    """
    return count(path, recursive, include_hidden, quiet).as_tuple()
