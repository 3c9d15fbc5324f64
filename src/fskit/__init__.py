"""Cross-platform filesystem utilities."""

__version__ = "0.1.0"

from fskit.allocator import HeapAllocator, OwnedPath, release
from fskit.directory import mkdir
from fskit.paths import expand_user, join_path, to_native_path
from fskit.platform import PATH_DELIMITER, get_cwd
from fskit.predicates import (
    exists,
    is_directory,
    is_file,
    is_readable,
    is_readable_and_writable,
    is_writable,
)
from fskit.protocols import Allocator, DirectoryLister
from fskit.size import (
    calculate_directory_size,
    calculate_directory_size_with_recursion,
    get_file_size,
    measure_directory,
)
from fskit.types import SizeReport

__all__ = [
    "__version__",
    "PATH_DELIMITER",
    "Allocator",
    "DirectoryLister",
    "HeapAllocator",
    "OwnedPath",
    "SizeReport",
    "calculate_directory_size",
    "calculate_directory_size_with_recursion",
    "exists",
    "expand_user",
    "get_cwd",
    "get_file_size",
    "is_directory",
    "is_file",
    "is_readable",
    "is_readable_and_writable",
    "is_writable",
    "join_path",
    "measure_directory",
    "mkdir",
    "release",
    "to_native_path",
]
