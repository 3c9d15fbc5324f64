"""Single-level directory creation."""

from __future__ import annotations

import logging
import os

from fskit.platform import IS_WINDOWS
from fskit.predicates import is_directory

logger = logging.getLogger(__name__)

DIRECTORY_MODE = 0o775


def mkdir(abs_path: str | None) -> bool:
    """Create a single directory.

    Parents are not created. An existing directory counts as success. The
    already-exists check races with concurrent removal of the target; this
    is accepted for best-effort local directory creation.

    Args:
        abs_path: Absolute path of the directory to create. Absoluteness is
            only enforced on POSIX.

    Returns:
        True if the directory was created or already exists as a directory.
    """
    if not abs_path:
        return False
    if not IS_WINDOWS and not abs_path.startswith("/"):
        return False

    try:
        # mode is ignored on Windows
        os.mkdir(abs_path, DIRECTORY_MODE)
    except FileExistsError:
        return is_directory(abs_path)
    except (OSError, ValueError) as e:
        logger.debug("mkdir %s failed: %s", abs_path, e)
        return False
    return True
