"""Platform abstraction for POSIX and Windows hosts.

Hides the differences between the host primitives: the path delimiter,
the working-directory query, the home-directory variable and directory
enumeration (readdir on POSIX, FindFirstFile/FindNextFile on Windows).
"""

from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from typing import Iterator

logger = logging.getLogger(__name__)

IS_WINDOWS = sys.platform == "win32"

PATH_DELIMITER = "\\" if IS_WINDOWS else "/"

# Environment variable holding the current user's home directory
HOME_ENV_VAR = "USERPROFILE" if IS_WINDOWS else "HOME"

__all__ = [
    "HOME_ENV_VAR",
    "IS_WINDOWS",
    "PATH_DELIMITER",
    "ScandirLister",
    "error_code",
    "get_cwd",
    "get_home_dir",
]


def get_cwd(max_length: int | None) -> str | None:
    """Get the current working directory.

    Args:
        max_length: Capacity in bytes available for the result, terminator
            included.

    Returns:
        The working directory, or None if ``max_length`` is missing or not
        positive, the host call fails, or the result does not fit.
    """
    if max_length is None or max_length <= 0:
        return None
    try:
        cwd = os.getcwd()
    except OSError as e:
        logger.debug("getcwd failed: %s", e)
        return None
    if len(os.fsencode(cwd)) + 1 > max_length:
        return None
    return cwd


def get_home_dir() -> str | None:
    """Return the home directory from the environment, None if unset or empty."""
    home = os.environ.get(HOME_ENV_VAR, "")
    return home or None


def error_code(exc: OSError) -> int | None:
    """Return the host error code carried by an OSError.

    GetLastError() on Windows, errno elsewhere.
    """
    if IS_WINDOWS and getattr(exc, "winerror", None) is not None:
        return exc.winerror
    return exc.errno


class ScandirLister:
    """Directory lister built on os.scandir.

    os.scandir drives opendir/readdir on POSIX and appends the ``*`` wildcard
    for FindFirstFileW on Windows, so callers always pass the bare directory.
    Satisfies the DirectoryLister protocol structurally.
    """

    @contextmanager
    def open(self, path: str) -> Iterator[Iterator[str]]:
        """Open ``path`` and yield an iterator over its entry names."""
        with os.scandir(path) as entries:
            yield (entry.name for entry in entries)
