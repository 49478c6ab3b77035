"""Application bootstrap wiring ports, adapters, and services."""

from __future__ import annotations

from dataclasses import dataclass

from dirpack.app import ArchiveService
from dirpack.app.adapters import TarGzArchiver, ZipArchiver
from dirpack.app.ports import ArchivePort
from dirpack.config import Settings, get_settings


@dataclass(slots=True)
class ApplicationContainer:
    """Aggregates wired services and adapters for the CLI layer."""

    settings: Settings
    zip_archiver: ArchivePort
    tar_gz_archiver: ArchivePort
    archive_service: ArchiveService


def bootstrap_application(settings: Settings | None = None) -> ApplicationContainer:
    """Instantiate adapters and services for CLI consumption."""

    active_settings = settings or get_settings()

    zip_archiver = ZipArchiver(
        buffer_size=active_settings.copy_buffer_size,
        follow_symlinks=active_settings.follow_symlinks,
    )
    tar_gz_archiver = TarGzArchiver(
        buffer_size=active_settings.copy_buffer_size,
        follow_symlinks=active_settings.follow_symlinks,
    )
    archive_service = ArchiveService(
        archivers={
            zip_archiver.format: zip_archiver,
            tar_gz_archiver.format: tar_gz_archiver,
        },
        settings=active_settings,
    )

    return ApplicationContainer(
        settings=active_settings,
        zip_archiver=zip_archiver,
        tar_gz_archiver=tar_gz_archiver,
        archive_service=archive_service,
    )
