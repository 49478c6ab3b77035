"""Application layer for dirpack.

Services orchestrate archiving through port interfaces; the filesystem and
archive formats are handled by adapters.
"""

__all__ = [
    "ArchiveService",
]

from dirpack.app.archive_service import ArchiveService
