"""Human-readable diagnostics written to standard error."""

from __future__ import annotations

import logging

from rich.console import Console

logger = logging.getLogger(__name__)

NOT_A_DIRECTORY = "Path is not a directory: {path}"
NOT_A_FILE = "Path is not a file: {path}"
DUPLICATE_FAILED = "Failed to duplicate directory path !"
ALLOCATION_FAILED = "Failed to allocate memory !"
JOIN_FAILED = "rcutils_join_path return NULL !"
OPEN_FAILED = "Can't open directory {path}. Error code: {code}"

_stderr = Console(stderr=True)


def report(message: str) -> None:
    """Write a one-line diagnostic to stderr.

    Args:
        message: Message text without the trailing newline.
    """
    logger.debug("diagnostic: %s", message)
    # Rendering through rich would strip control characters from paths
    stream = _stderr.file
    stream.write(message + "\n")
    stream.flush()
