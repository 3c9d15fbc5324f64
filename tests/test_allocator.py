"""Tests for allocator-backed owned strings."""

from __future__ import annotations

from fskit.allocator import HeapAllocator, OwnedPath, encoded_size, release, strdup
from fskit.protocols import Allocator


class TestHeapAllocator:
    """Tests for HeapAllocator implementation."""

    def test_satisfies_protocol(self) -> None:
        """Test HeapAllocator is structurally an Allocator."""
        assert isinstance(HeapAllocator(), Allocator)

    def test_allocate_returns_zeroed_block(self) -> None:
        """Test allocate returns a block of the requested size."""
        block = HeapAllocator().allocate(8)

        assert block == bytearray(8)

    def test_allocate_negative_size_fails(self) -> None:
        """Test a negative request is refused."""
        assert HeapAllocator().allocate(-1) is None


class TestStrdup:
    """Tests for strdup."""

    def test_copy_is_owned(self, allocator) -> None:
        """Test strdup returns an OwnedPath equal to the input."""
        copy = strdup("/tmp/x", allocator)

        assert isinstance(copy, OwnedPath)
        assert copy == "/tmp/x"
        assert not copy.released

    def test_charges_encoded_length_plus_terminator(self, allocator) -> None:
        """Test the allocator is charged bytes, not characters."""
        strdup("café", allocator)

        assert allocator.live_bytes == encoded_size("café")
        assert allocator.live_bytes == len("café".encode()) + 1

    def test_none_input(self, allocator) -> None:
        """Test None input returns None without allocating."""
        assert strdup(None, allocator) is None
        assert allocator.allocations == 0

    def test_allocation_failure(self, failing_allocator_factory) -> None:
        """Test allocation failure returns None."""
        assert strdup("abc", failing_allocator_factory(fail_after=0)) is None


class TestRelease:
    """Tests for release."""

    def test_release_returns_block(self, allocator) -> None:
        """Test releasing hands the block back."""
        copy = strdup("abc", allocator)

        release(copy, allocator)

        assert copy.released
        assert allocator.live_blocks == 0

    def test_release_is_idempotent(self, allocator) -> None:
        """Test a second release does not double free."""
        copy = strdup("abc", allocator)

        release(copy, allocator)
        release(copy, allocator)

        assert allocator.deallocations == 1

    def test_release_none(self, allocator) -> None:
        """Test releasing None is a no-op."""
        release(None, allocator)

        assert allocator.deallocations == 0

    def test_released_path_keeps_value(self, allocator) -> None:
        """Test the string value survives release."""
        copy = strdup("abc", allocator)
        release(copy, allocator)

        assert copy == "abc"
