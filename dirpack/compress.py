"""Stateless entry points for packaging a directory into an archive.

Both functions build a fresh archiver per call, so concurrent calls are safe
as long as they target different destination files.
"""

from __future__ import annotations

from pathlib import Path

from dirpack.app.adapters import TarGzArchiver, ZipArchiver


def zip_dir(directory_path: str | Path, zip_file_path: str | Path) -> None:
    """Compress ``directory_path`` into a ZIP file at ``zip_file_path``.

    Directory entries are written before file entries. When the directory is
    missing or empty no file is created.

    Raises:
        OSError: If the archive cannot be written or a source file cannot be read.
    """
    ZipArchiver().archive(Path(directory_path), Path(zip_file_path))


def tar_gz(directory_path: str | Path, tar_gz_file_path: str | Path) -> None:
    """Compress ``directory_path`` into a ``.tar.gz`` file at ``tar_gz_file_path``.

    Every entry is placed under a top-level directory named after the archive
    file, e.g. ``dist/app-1.0.tar.gz`` unpacks into ``app-1.0/``.

    Raises:
        OSError: If the archive cannot be written or a source file cannot be read.
    """
    TarGzArchiver().archive(Path(directory_path), Path(tar_gz_file_path))
