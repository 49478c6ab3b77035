"""ZIP archiving adapter."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO
from zipfile import ZIP_DEFLATED, ZipFile, ZipInfo

from dirpack.app.ports import ArchivePort, ArchiveReport
from dirpack.utils.paths import ensure_parent_dir, relative_entry_name
from dirpack.utils.walk import walk_directory

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 8192


def order_directories_first(paths: list[Path]) -> list[Path]:
    """Move every directory ahead of every file, keeping walk order within each group."""
    dirs: list[Path] = []
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            dirs.append(path)
        else:
            files.append(path)
    return dirs + files


class ZipArchiver(ArchivePort):
    """Write a directory tree into a zip64-capable ZIP archive."""

    format = "zip"

    def __init__(
        self,
        *,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        follow_symlinks: bool = False,
    ) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._buffer_size = buffer_size
        self._follow_symlinks = follow_symlinks

    def archive(self, source_dir: Path, destination: Path) -> ArchiveReport:
        """Archive ``source_dir`` into ``destination``.

        Nothing is written when the walk finds no entries. Any ``OSError``
        propagates and leaves the partial destination on disk.
        """
        source = Path(source_dir).absolute()
        dest_path = Path(destination).absolute()

        paths = walk_directory(source, follow_symlinks=self._follow_symlinks)
        real_dest = dest_path.resolve()
        paths = [path for path in paths if path.resolve() != real_dest]
        report = ArchiveReport(
            format="zip",
            source=str(source),
            destination=str(dest_path),
            created=False,
        )
        if not paths:
            logger.info("Nothing to archive under %s, skipping %s", source, dest_path)
            return report

        ensure_parent_dir(dest_path)
        with ZipFile(dest_path, "w", compression=ZIP_DEFLATED, allowZip64=True) as archive:
            for path in order_directories_first(paths):
                name = relative_entry_name(source, path)
                zinfo = ZipInfo.from_file(path, name, strict_timestamps=False)
                if zinfo.is_dir():
                    zinfo.compress_size = 0
                    zinfo.CRC = 0
                    archive.mkdir(zinfo)
                    report.directory_count += 1
                    logger.debug("Added directory entry %s", zinfo.filename)
                    continue

                if not path.is_file():
                    logger.warning("Skipping special file %s", path)
                    continue

                zinfo.compress_type = ZIP_DEFLATED
                with path.open("rb") as source_file:
                    report.total_bytes += self._write_entry(archive, zinfo, source_file)
                report.file_count += 1
                logger.debug("Added file entry %s", zinfo.filename)

        report.created = True
        logger.info(
            "Wrote %s with %d directories and %d files",
            dest_path,
            report.directory_count,
            report.file_count,
        )
        return report

    def _write_entry(self, archive: ZipFile, zinfo: ZipInfo, source_file: BinaryIO) -> int:
        # zip64 headers are chosen per entry from zinfo.file_size.
        written = 0
        with archive.open(zinfo, "w") as entry:
            while True:
                chunk = source_file.read(self._buffer_size)
                if not chunk:
                    break
                entry.write(chunk)
                written += len(chunk)
        return written
