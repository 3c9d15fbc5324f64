"""Path string utilities.

Pure functions over path strings. Every result is a new OwnedPath charged
to the supplied allocator; None signals bad input or allocation failure.
"""

from __future__ import annotations

from fskit.allocator import OwnedPath, strdup
from fskit.platform import PATH_DELIMITER, get_home_dir
from fskit.protocols import Allocator

__all__ = ["expand_user", "join_path", "to_native_path"]


def join_path(
    left_hand_path: str | None,
    right_hand_path: str | None,
    allocator: Allocator,
) -> OwnedPath | None:
    """Join two paths with the platform delimiter.

    No normalization is performed: ``join_path("a/", "b", alloc)`` yields
    ``"a//b"`` on POSIX.

    Args:
        left_hand_path: Leading component.
        right_hand_path: Trailing component.
        allocator: Allocator charged for the result.

    Returns:
        ``left + PATH_DELIMITER + right``, or None if either argument is None
        or allocation failed.
    """
    if left_hand_path is None or right_hand_path is None:
        return None
    return strdup(f"{left_hand_path}{PATH_DELIMITER}{right_hand_path}", allocator)


def to_native_path(path: str | None, allocator: Allocator) -> OwnedPath | None:
    """Return a copy of ``path`` with every ``/`` replaced by the native delimiter."""
    if path is None:
        return None
    return strdup(path.replace("/", PATH_DELIMITER), allocator)


def expand_user(path: str | None, allocator: Allocator) -> OwnedPath | None:
    """Expand a leading ``~`` to the home directory.

    Only the current user's home is substituted: ``~foo`` becomes
    ``home + "foo"``.

    Args:
        path: Path to expand.
        allocator: Allocator charged for the result.

    Returns:
        The expanded path, a plain copy when ``path`` has no leading ``~``,
        or None if ``path`` is None, the home directory is unknown, or
        allocation failed.
    """
    if path is None:
        return None
    if not path.startswith("~"):
        return strdup(path, allocator)

    homedir = get_home_dir()
    if homedir is None:
        return None
    return strdup(homedir + path[1:], allocator)
