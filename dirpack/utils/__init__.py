"""Utility modules for common operations."""

from dirpack.utils.paths import ensure_parent_dir, relative_entry_name, tar_root_prefix
from dirpack.utils.walk import PathEntry, iter_directory, walk_directory

__all__ = [
    "ensure_parent_dir",
    "relative_entry_name",
    "tar_root_prefix",
    "PathEntry",
    "iter_directory",
    "walk_directory",
]
