"""Shared data types for fskit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fskit.allocator import OwnedPath

__all__ = ["FRONTIER_ENTRY_SIZE", "FrontierEntry", "SizeReport"]

# Bytes charged to the allocator for one frontier entry, path excluded
FRONTIER_ENTRY_SIZE = 24


@dataclass
class FrontierEntry:
    """A directory waiting to be enumerated.

    Attributes:
        path: Owned directory path, None once released.
        depth: Depth below the root; the root entry has depth 1.
        block: Allocator block charged for the entry itself.
    """

    path: OwnedPath | None
    depth: int
    block: Any = None


@dataclass
class SizeReport:
    """Result of a strict directory measurement.

    Attributes:
        path: The directory that was measured.
        total: Bytes counted, a partial sum when the walk was aborted.
        max_depth: Depth cap that was applied (0 is unbounded).
        complete: True if the whole admitted tree was enumerated.
        error: Diagnostic of the fatal event (None on success).
    """

    path: str
    total: int
    max_depth: int
    complete: bool
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.complete and self.error is not None:
            raise ValueError("complete=True but error is set")
        if not self.complete and self.error is None:
            raise ValueError("complete=False requires error message")
        if self.total < 0:
            raise ValueError("total cannot be negative")
