"""Port interfaces for the dirpack application layer.

Services depend on these protocols, never on concrete archivers.
"""

__all__ = [
    "ArchivePort",
    "ArchiveReport",
]

from dirpack.app.ports.archive import ArchivePort, ArchiveReport
