"""File and directory size calculation.

Directory sizes are computed by an iterative walk over a work list of
frontier entries instead of recursion, so stack usage does not grow with
tree depth. Every entry and path is charged to the caller's allocator and
released on every exit path; a fatal event mid-walk is reported once on
stderr and the partial sum is returned.
"""

from __future__ import annotations

import logging
import os
from collections import deque

from fskit.allocator import OwnedPath, release, strdup
from fskit.diagnostics import (
    ALLOCATION_FAILED,
    DUPLICATE_FAILED,
    JOIN_FAILED,
    NOT_A_DIRECTORY,
    NOT_A_FILE,
    OPEN_FAILED,
    report,
)
from fskit.paths import join_path
from fskit.platform import ScandirLister, error_code
from fskit.predicates import is_directory, is_file, is_symlink
from fskit.protocols import Allocator, DirectoryLister
from fskit.types import FRONTIER_ENTRY_SIZE, FrontierEntry, SizeReport

logger = logging.getLogger(__name__)

__all__ = [
    "TraversalError",
    "calculate_directory_size",
    "calculate_directory_size_with_recursion",
    "get_file_size",
    "measure_directory",
]

# Pseudo-entries some directory iterators synthesize
_PSEUDO_ENTRIES = frozenset({".", ".."})


class TraversalError(Exception):
    """Fatal event that aborts a directory walk."""

    pass


def get_file_size(file_path: str | None) -> int:
    """Get the size of a regular file in bytes.

    Args:
        file_path: Path to the file.

    Returns:
        The size, or 0 if the path is not a regular file (reported on
        stderr) or the file vanished before it could be measured.
    """
    if not is_file(file_path):
        report(NOT_A_FILE.format(path=file_path))
        return 0
    try:
        return os.stat(file_path).st_size
    except OSError:
        return 0


class _DirectoryWalk:
    """One bounded-depth walk over a directory tree.

    Frontier entries move pending -> open -> drained -> freed; freed is
    reached on both the success and the failure path.
    """

    def __init__(
        self,
        max_depth: int,
        allocator: Allocator,
        lister: DirectoryLister,
        follow_symlinks: bool,
    ) -> None:
        self.max_depth = max_depth
        self.allocator = allocator
        self.lister = lister
        self.follow_symlinks = follow_symlinks
        self.frontier: deque[FrontierEntry] = deque()
        self.total = 0

    def run(self, directory_path: str) -> str | None:
        """Walk the tree rooted at ``directory_path``.

        Returns:
            None on completion, otherwise the diagnostic of the fatal event.
            ``self.total`` holds the (possibly partial) sum either way.
        """
        try:
            root = self._new_entry(None, 1)
            root.path = strdup(directory_path, self.allocator)
            if root.path is None:
                raise TraversalError(DUPLICATE_FAILED)

            while self.frontier:
                entry = self.frontier.pop()
                try:
                    self._scan(entry)
                finally:
                    self._release_entry(entry)
        except TraversalError as e:
            message = str(e)
            report(message)
            self._release_frontier()
            return message
        return None

    def _admissible(self, depth: int) -> bool:
        """Check if a subdirectory found at ``depth`` may be descended into."""
        return self.max_depth == 0 or depth + 1 <= self.max_depth

    def _new_entry(self, path: OwnedPath | None, depth: int) -> FrontierEntry:
        """Allocate an entry and push it onto the frontier.

        Ownership of ``path`` moves to the entry; on failure it is released.
        """
        block = self.allocator.allocate(FRONTIER_ENTRY_SIZE)
        if block is None:
            release(path, self.allocator)
            raise TraversalError(ALLOCATION_FAILED)
        entry = FrontierEntry(path=path, depth=depth, block=block)
        self.frontier.append(entry)
        return entry

    def _scan(self, entry: FrontierEntry) -> None:
        logger.debug("Scanning %s (depth %d)", entry.path, entry.depth)
        try:
            with self.lister.open(entry.path) as names:
                for name in names:
                    if name not in _PSEUDO_ENTRIES:
                        self._visit(entry, name)
        except OSError as e:
            raise TraversalError(
                OPEN_FAILED.format(path=entry.path, code=error_code(e))
            ) from e

    def _visit(self, parent: FrontierEntry, name: str) -> None:
        child = join_path(parent.path, name, self.allocator)
        if child is None:
            raise TraversalError(JOIN_FAILED)

        if not is_directory(child):
            self.total += get_file_size(child)
            release(child, self.allocator)
            return

        if not self._admissible(parent.depth):
            logger.debug("Skipping %s: beyond depth %d", child, self.max_depth)
            release(child, self.allocator)
        elif not self.follow_symlinks and is_symlink(child):
            logger.debug("Skipping symlinked directory %s", child)
            release(child, self.allocator)
        else:
            self._new_entry(child, parent.depth + 1)

    def _release_entry(self, entry: FrontierEntry) -> None:
        release(entry.path, self.allocator)
        entry.path = None
        if entry.block is not None:
            block, entry.block = entry.block, None
            self.allocator.deallocate(block)

    def _release_frontier(self) -> None:
        while self.frontier:
            self._release_entry(self.frontier.popleft())


def _walk(
    directory_path: str | None,
    max_depth: int,
    allocator: Allocator,
    follow_symlinks: bool,
    lister: DirectoryLister | None,
) -> tuple[int, str | None]:
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")

    if not is_directory(directory_path):
        message = NOT_A_DIRECTORY.format(path=directory_path)
        report(message)
        return 0, message

    walk = _DirectoryWalk(
        max_depth=max_depth,
        allocator=allocator,
        lister=lister or ScandirLister(),
        follow_symlinks=follow_symlinks,
    )
    error = walk.run(directory_path)
    return walk.total, error


def calculate_directory_size_with_recursion(
    directory_path: str | None,
    max_depth: int,
    allocator: Allocator,
    follow_symlinks: bool = True,
    lister: DirectoryLister | None = None,
) -> int:
    """Sum the sizes of regular files below a directory, up to a depth cap.

    A subdirectory found at depth ``d`` (the root is depth 1) is descended
    into iff ``max_depth == 0`` or ``d + 1 <= max_depth``. Subdirectories
    beyond the cap contribute nothing. Entries that are neither directories
    nor regular files contribute 0 and are reported on stderr.

    With the default ``follow_symlinks=True`` links are followed, so a link
    pointing back up the tree makes the walk loop. ``follow_symlinks=False``
    never descends into a linked directory.

    Args:
        directory_path: Root of the walk.
        max_depth: Depth cap, 0 for unbounded.
        allocator: Allocator charged for frontier entries and paths.
        follow_symlinks: Descend into symbolic links to directories.
        lister: Directory enumeration backend (os.scandir by default).

    Returns:
        Total size in bytes; 0 if ``directory_path`` is not a directory; the
        partial sum if the walk aborted on an open or allocation failure.

    Raises:
        ValueError: If ``max_depth`` is negative.
    """
    total, _ = _walk(directory_path, max_depth, allocator, follow_symlinks, lister)
    return total


def calculate_directory_size(directory_path: str | None, allocator: Allocator) -> int:
    """Sum the sizes of the regular files directly inside a directory."""
    return calculate_directory_size_with_recursion(directory_path, 1, allocator)


def measure_directory(
    directory_path: str,
    max_depth: int,
    allocator: Allocator,
    follow_symlinks: bool = True,
    lister: DirectoryLister | None = None,
) -> SizeReport:
    """Measure a directory and report whether the walk completed.

    Same walk as calculate_directory_size_with_recursion, for callers that
    must tell a full sum from a partial one.

    Returns:
        SizeReport carrying the total and, if the walk did not complete, the
        diagnostic of the fatal event.
    """
    total, error = _walk(directory_path, max_depth, allocator, follow_symlinks, lister)
    return SizeReport(
        path=directory_path,
        total=total,
        max_depth=max_depth,
        complete=error is None,
        error=error,
    )
