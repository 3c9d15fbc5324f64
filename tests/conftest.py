"""Shared test fixtures."""

from __future__ import annotations

import errno
import os
from contextlib import nullcontext
from pathlib import Path
from typing import Any

import pytest

from fskit.platform import ScandirLister


# ============================================================================
# Allocator Doubles
# ============================================================================


class TrackingAllocator:
    """Allocator that records live blocks and can be told to fail.

    Attributes:
        fail_after: Number of successful allocations before every further
            request returns None (None never fails).
    """

    def __init__(self, fail_after: int | None = None) -> None:
        self.fail_after = fail_after
        self.allocations = 0
        self.deallocations = 0
        self._live: dict[int, bytearray] = {}

    def allocate(self, size: int) -> bytearray | None:
        if self.fail_after is not None and self.allocations >= self.fail_after:
            return None
        self.allocations += 1
        block = bytearray(size)
        self._live[id(block)] = block
        return block

    def deallocate(self, block: Any) -> None:
        # KeyError here means a double free or a foreign block
        del self._live[id(block)]
        self.deallocations += 1

    @property
    def live_bytes(self) -> int:
        return sum(len(block) for block in self._live.values())

    @property
    def live_blocks(self) -> int:
        return len(self._live)


@pytest.fixture
def allocator() -> TrackingAllocator:
    """Create an allocator that never fails."""
    return TrackingAllocator()


@pytest.fixture
def failing_allocator_factory():
    """Create allocators that fail after a given number of allocations."""
    return TrackingAllocator


# ============================================================================
# Directory Lister Doubles
# ============================================================================


class DenyingLister:
    """Lister that refuses to open directories with a given name."""

    def __init__(self, deny: str) -> None:
        self.deny = deny
        self.opened: list[str] = []
        self._inner = ScandirLister()

    def open(self, path: str):
        if os.path.basename(path) == self.deny:
            raise PermissionError(errno.EACCES, "Permission denied", path)
        self.opened.append(path)
        return self._inner.open(path)


class PseudoEntryLister:
    """Lister that reports '.' and '..' like readdir does."""

    def open(self, path: str):
        return nullcontext(iter([".", "..", *sorted(os.listdir(path))]))


@pytest.fixture
def denying_lister_factory():
    """Create listers that refuse to open a named directory."""
    return DenyingLister


@pytest.fixture
def pseudo_entry_lister() -> PseudoEntryLister:
    """Create a lister that yields pseudo-entries."""
    return PseudoEntryLister()


# ============================================================================
# Directory Tree Fixtures
# ============================================================================


def write_bytes(path: Path, size: int) -> Path:
    """Create a file of exactly ``size`` bytes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def make_file():
    """Create files of an exact size."""
    return write_bytes


@pytest.fixture
def layered_tree(tmp_path: Path) -> Path:
    """Create a tree with files at three depths.

    Layout::

        root/a              10 bytes   (depth 1)
        root/sub/b          20 bytes   (depth 2)
        root/sub/deeper/c   40 bytes   (depth 3)
        root/empty/                    (depth 2, no files)
    """
    root = tmp_path / "root"
    write_bytes(root / "a", 10)
    write_bytes(root / "sub" / "b", 20)
    write_bytes(root / "sub" / "deeper" / "c", 40)
    (root / "empty").mkdir()
    return root


@pytest.fixture
def home_dir(monkeypatch: pytest.MonkeyPatch) -> str:
    """Point the home-directory variable at a fixed value."""
    from fskit.platform import HOME_ENV_VAR

    monkeypatch.setenv(HOME_ENV_VAR, "/home/alice")
    return "/home/alice"
