"""Protocol definitions for the injected collaborators.

This module defines abstract interfaces (Protocols) for the services the
filesystem utilities consume rather than own:
- Allocator: accounts for every owned string and traversal entry
- DirectoryLister: enumerates the names inside a single directory

All concrete implementations satisfy these protocols structurally (duck typing),
so test doubles can be injected without inheritance.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any, Iterator, Protocol, runtime_checkable


@runtime_checkable
class Allocator(Protocol):
    """Protocol for caller-supplied memory accounting.

    Every path returned by the library and every traversal entry is backed
    by a block obtained from the allocator and handed back through
    ``deallocate`` exactly once.
    """

    def allocate(self, size: int) -> Any | None:
        """Allocate a block.

        Args:
            size: Number of bytes requested.

        Returns:
            An opaque block, or None if the allocation failed.
        """
        ...

    def deallocate(self, block: Any) -> None:
        """Release a block previously returned by ``allocate``.

        Args:
            block: The block to release.
        """
        ...


@runtime_checkable
class DirectoryLister(Protocol):
    """Protocol for single-level directory enumeration.

    Implementations hide the host primitive (readdir or FindFirstFile).
    """

    def open(self, path: str) -> AbstractContextManager[Iterator[str]]:
        """Open a directory for enumeration.

        Args:
            path: Directory to enumerate (never a wildcard pattern).

        Returns:
            Context manager yielding an iterator of entry names. The
            iterator is closed when the context exits.

        Raises:
            OSError: If the directory cannot be opened.
        """
        ...
