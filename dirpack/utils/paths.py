"""Path utilities for archive entry naming and destination handling."""

from __future__ import annotations

from pathlib import Path

TAR_GZ_SUFFIX = ".tar.gz"


def ensure_parent_dir(path: Path) -> Path:
    """Ensure the parent directory of ``path`` exists, creating if necessary."""
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def relative_entry_name(root: Path, path: Path) -> str:
    """Return ``path`` relative to ``root`` with forward-slash separators.

    Raises:
        ValueError: If ``path`` does not live under ``root``.
    """
    return path.relative_to(root).as_posix()


def tar_root_prefix(destination: Path) -> str:
    """Derive the top-level directory name for a tar.gz archive.

    ``build/app-1.0.tar.gz`` yields ``app-1.0``. Names without the suffix are
    used whole.
    """
    name = Path(destination).name
    if name.endswith(TAR_GZ_SUFFIX) and len(name) > len(TAR_GZ_SUFFIX):
        return name[: -len(TAR_GZ_SUFFIX)]
    return name


def format_from_suffix(destination: Path) -> str | None:
    """Infer the archive format from a destination file name."""
    name = Path(destination).name.lower()
    if name.endswith(TAR_GZ_SUFFIX) or name.endswith(".tgz"):
        return "tar.gz"
    if name.endswith(".zip"):
        return "zip"
    return None


def archive_suffix(archive_format: str) -> str:
    """Return the file suffix written for ``archive_format``."""
    if archive_format == "zip":
        return ".zip"
    if archive_format == "tar.gz":
        return TAR_GZ_SUFFIX
    raise ValueError(f"Unsupported archive format: {archive_format}")
