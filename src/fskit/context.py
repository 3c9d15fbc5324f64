"""Application context for dependency injection.

This module separates object creation from object use, enabling testability
and reducing coupling in CLI commands.

Dependencies are typed using Protocols rather than concrete implementations,
so test doubles (a tracking allocator, a failing lister) can be substituted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from fskit.config import FsKitConfig, load_config
from fskit.protocols import Allocator, DirectoryLister


def _default_allocator() -> Allocator:
    """Create the default allocator implementation."""
    from fskit.allocator import HeapAllocator
    return HeapAllocator()


def _default_lister() -> DirectoryLister:
    """Create the default directory lister implementation."""
    from fskit.platform import ScandirLister
    return ScandirLister()


@dataclass
class AppContext:
    """Container for the collaborators used by CLI commands."""

    config: FsKitConfig = field(default_factory=FsKitConfig)
    allocator: Allocator = field(default_factory=_default_allocator)
    lister: DirectoryLister = field(default_factory=_default_lister)
    config_path: Path | None = None


def create_context(config_path: Path | None = None) -> AppContext:
    """Factory for application dependencies.

    Use this in production code. For tests, construct AppContext directly
    with test doubles.

    Args:
        config_path: Override configuration file (for testing).

    Returns:
        Configured AppContext.

    Raises:
        ConfigError: If the configuration file is invalid.
    """
    from fskit.config import default_config_path

    path = config_path or default_config_path()
    return AppContext(
        config=load_config(path),
        allocator=_default_allocator(),
        lister=_default_lister(),
        config_path=path,
    )
