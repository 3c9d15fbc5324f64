"""Stat-backed path predicates.

Every predicate answers False when the underlying stat call fails for any
reason. Predicates never allocate and never emit diagnostics.
"""

from __future__ import annotations

import os
import stat

from fskit.platform import IS_WINDOWS

__all__ = [
    "exists",
    "is_directory",
    "is_file",
    "is_readable",
    "is_readable_and_writable",
    "is_symlink",
    "is_writable",
]

# stat.S_IREAD / S_IWRITE are the Windows spellings of the owner bits
_READ_BIT = stat.S_IREAD if IS_WINDOWS else stat.S_IRUSR
_WRITE_BIT = stat.S_IWRITE if IS_WINDOWS else stat.S_IWUSR


def _mode(path: str | None, follow_symlinks: bool = True) -> int | None:
    if path is None:
        return None
    try:
        return os.stat(path, follow_symlinks=follow_symlinks).st_mode
    except (OSError, ValueError):
        # ValueError: embedded NUL byte
        return None


def exists(path: str | None) -> bool:
    """Check if stat succeeds on a path."""
    return _mode(path) is not None


def is_directory(path: str | None) -> bool:
    """Check if a path is a directory."""
    mode = _mode(path)
    return mode is not None and stat.S_ISDIR(mode)


def is_file(path: str | None) -> bool:
    """Check if a path is a regular file."""
    mode = _mode(path)
    return mode is not None and stat.S_ISREG(mode)


def is_symlink(path: str | None) -> bool:
    """Check if a path is itself a symbolic link (not followed)."""
    mode = _mode(path, follow_symlinks=False)
    return mode is not None and stat.S_ISLNK(mode)


def is_readable(path: str | None) -> bool:
    """Check if the owner-read bit is set."""
    mode = _mode(path)
    return mode is not None and bool(mode & _READ_BIT)


def is_writable(path: str | None) -> bool:
    """Check if the owner-write bit is set."""
    mode = _mode(path)
    return mode is not None and bool(mode & _WRITE_BIT)


def is_readable_and_writable(path: str | None) -> bool:
    """Check if both owner-read and owner-write bits are set.

    On Windows every writable file is readable, so this reduces to the
    write bit there.
    """
    mode = _mode(path)
    return mode is not None and bool(mode & _READ_BIT) and bool(mode & _WRITE_BIT)
