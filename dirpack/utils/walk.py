"""Directory traversal for archive packaging."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from dirpack.utils.paths import relative_entry_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PathEntry:
    """A file or directory discovered beneath a walk root."""

    path: Path
    is_dir: bool
    relative_name: str


def _list_children(directory: Path) -> list[Path]:
    """List ``directory`` in name order, treating unreadable directories as empty."""
    try:
        return sorted(directory.iterdir(), key=lambda child: child.name)
    except PermissionError as exc:
        logger.warning("Cannot list %s, treating as empty: %s", directory, exc)
        return []


def iter_directory(root: Path, *, follow_symlinks: bool = False) -> Iterator[PathEntry]:
    """Yield every file and directory under ``root`` in depth-first pre-order.

    A directory is yielded before any of its children, and siblings are
    visited in name order. A missing root, or one that is not a directory,
    yields nothing.

    Symbolic links are skipped unless ``follow_symlinks`` is set. When
    following, a directory whose resolved path was already visited is yielded
    but not descended into, which breaks link cycles.
    """
    root_path = Path(root).absolute()
    if not root_path.is_dir():
        return

    visited: set[Path] = {root_path.resolve()}
    stack = list(reversed(_list_children(root_path)))

    while stack:
        path = stack.pop()

        if path.is_symlink():
            if not follow_symlinks:
                logger.debug("Skipping symlink %s", path)
                continue
            if not path.exists():
                logger.debug("Skipping broken symlink %s", path)
                continue

        is_dir = path.is_dir()
        yield PathEntry(path=path, is_dir=is_dir, relative_name=relative_entry_name(root_path, path))

        if not is_dir:
            continue

        if follow_symlinks:
            real = path.resolve()
            if real in visited:
                logger.warning("Not descending into already visited directory %s", path)
                continue
            visited.add(real)

        stack.extend(reversed(_list_children(path)))


def walk_directory(root: Path, *, follow_symlinks: bool = False) -> list[Path]:
    """Return absolute paths of every file and directory under ``root``.

    The list is fully materialized and in the same pre-order as
    :func:`iter_directory`.
    """
    return [entry.path for entry in iter_directory(root, follow_symlinks=follow_symlinks)]
