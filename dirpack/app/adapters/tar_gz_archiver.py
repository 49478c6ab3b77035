"""Gzip-compressed tar archiving adapter."""

from __future__ import annotations

import gzip
import logging
import tarfile
from pathlib import Path

from dirpack.app.ports import ArchivePort, ArchiveReport
from dirpack.utils.paths import ensure_parent_dir, tar_root_prefix
from dirpack.utils.walk import iter_directory

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 8192


class TarGzArchiver(ArchivePort):
    """Stream a directory tree into a ``.tar.gz`` archive.

    Entries are written as the walk discovers them, parent directories
    first, all under a single top-level directory named after the
    destination file.
    """

    format = "tar.gz"

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

        A missing or empty source still yields a valid archive with no
        entries. Any ``OSError`` propagates and leaves the partial
        destination on disk.
        """
        source = Path(source_dir).absolute()
        dest_path = Path(destination).absolute()
        prefix = tar_root_prefix(dest_path)
        real_dest = dest_path.resolve()
        report = ArchiveReport(
            format="tar.gz",
            source=str(source),
            destination=str(dest_path),
            created=False,
        )

        ensure_parent_dir(dest_path)
        # Closing order is tar, gzip, file so the tar footer lands inside the gzip stream.
        with (
            dest_path.open("wb") as raw,
            gzip.GzipFile(fileobj=raw, mode="wb") as compressed,
            tarfile.open(
                fileobj=compressed,
                mode="w",
                format=tarfile.PAX_FORMAT,
                dereference=self._follow_symlinks,
                copybufsize=self._buffer_size,
            ) as tar,
        ):
            for entry in iter_directory(source, follow_symlinks=self._follow_symlinks):
                if entry.path.resolve() == real_dest:
                    continue
                if not entry.is_dir and not entry.path.is_file():
                    logger.warning("Skipping special file %s", entry.path)
                    continue

                info = tar.gettarinfo(str(entry.path), arcname=f"{prefix}/{entry.relative_name}")
                if entry.is_dir:
                    tar.addfile(info)
                    report.directory_count += 1
                else:
                    with entry.path.open("rb") as source_file:
                        tar.addfile(info, source_file)
                    report.file_count += 1
                    report.total_bytes += info.size
                logger.debug("Added tar entry %s", info.name)

        report.created = True
        logger.info(
            "Wrote %s with %d directories and %d files under %s/",
            dest_path,
            report.directory_count,
            report.file_count,
            prefix,
        )
        return report
