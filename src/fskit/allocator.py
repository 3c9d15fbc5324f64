"""Allocator-backed owned strings.

Paths returned by fskit are OwnedPath instances: ordinary strings that
remember the allocator block charged for them. The caller releases them
with release() through the same allocator.
"""

from __future__ import annotations

import os
from typing import Any

from fskit.protocols import Allocator

__all__ = ["HeapAllocator", "OwnedPath", "encoded_size", "release", "strdup"]


class HeapAllocator:
    """Allocator backed by the Python heap.

    Satisfies the Allocator protocol structurally. Blocks are zeroed
    bytearrays; deallocation simply drops the reference.
    """

    def allocate(self, size: int) -> bytearray | None:
        """Allocate a zeroed block of ``size`` bytes."""
        if size < 0:
            return None
        return bytearray(size)

    def deallocate(self, block: Any) -> None:
        """Release a block."""
        del block


class OwnedPath(str):
    """A path string owned by the caller.

    Attributes:
        block: Allocator block backing this string, None once released.
    """

    block: Any

    def __new__(cls, value: str, block: Any) -> OwnedPath:
        obj = super().__new__(cls, value)
        obj.block = block
        return obj

    @property
    def released(self) -> bool:
        """True once the backing block has been handed back."""
        return self.block is None


def encoded_size(text: str) -> int:
    """Return the number of bytes a string occupies, terminator included."""
    return len(os.fsencode(text)) + 1


def strdup(text: str | None, allocator: Allocator) -> OwnedPath | None:
    """Copy a string into allocator-owned storage.

    Args:
        text: String to copy.
        allocator: Allocator charged for the copy.

    Returns:
        The owned copy, or None if ``text`` is None or allocation failed.
    """
    if text is None:
        return None
    block = allocator.allocate(encoded_size(text))
    if block is None:
        return None
    return OwnedPath(text, block)


def release(path: OwnedPath | None, allocator: Allocator) -> None:
    """Hand an owned path's block back to its allocator.

    Releasing None or an already released path is a no-op.
    """
    if path is None or path.block is None:
        return
    block, path.block = path.block, None
    allocator.deallocate(block)
