"""Archive service selecting and driving the archiver adapters."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from dirpack.app.ports import ArchivePort, ArchiveReport
from dirpack.config import Settings
from dirpack.goals import DockerGoal
from dirpack.utils.paths import archive_suffix, format_from_suffix

logger = logging.getLogger(__name__)

# Saved images ship as a local tarball; pushed images only need the deployable bundle.
GOAL_FORMATS: dict[DockerGoal, str] = {
    DockerGoal.SAVE: "tar.gz",
    DockerGoal.PUSH: "zip",
}


class ArchiveService:
    """Orchestrates directory archiving.

    Format precedence: explicit format > goal > destination suffix >
    ``Settings.default_format``.
    """

    def __init__(self, archivers: Mapping[str, ArchivePort], settings: Settings) -> None:
        """Initialize archive service.

        Args:
            archivers: Archiver ports keyed by format ("zip", "tar.gz")
            settings: Active settings used for defaults
        """
        self.archivers = dict(archivers)
        self.settings = settings

    def resolve_goal(self, goal: DockerGoal | str | None) -> DockerGoal | None:
        """Normalize ``goal`` to a :class:`DockerGoal`, rejecting unknown codes."""
        if goal is None or isinstance(goal, DockerGoal):
            return goal

        resolved = DockerGoal.of(goal)
        if resolved is None:
            choices = ", ".join(member.code for member in DockerGoal)
            raise ValueError(f"Unknown goal '{goal}' (expected one of: {choices})")
        return resolved

    def resolve_format(
        self,
        destination: Path | None = None,
        *,
        format: str | None = None,
        goal: DockerGoal | str | None = None,
    ) -> str:
        """Decide which archive format a request should produce."""
        if format is not None:
            archive_format = format.lower()
        else:
            resolved_goal = self.resolve_goal(goal)
            suffix_format = format_from_suffix(destination) if destination is not None else None
            if resolved_goal is not None:
                archive_format = GOAL_FORMATS[resolved_goal]
            elif suffix_format is not None:
                archive_format = suffix_format
            else:
                archive_format = self.settings.default_format

        if archive_format not in self.archivers:
            supported = ", ".join(sorted(self.archivers))
            raise ValueError(f"Unsupported archive format '{archive_format}' (supported: {supported})")
        return archive_format

    def default_destination(self, source_dir: Path, archive_format: str) -> Path:
        """Return ``<output_dir>/<source name><suffix>``."""
        name = Path(source_dir).absolute().name or "archive"
        return self.settings.get_output_dir() / f"{name}{archive_suffix(archive_format)}"

    def archive(
        self,
        source_dir: Path,
        destination: Path | None = None,
        *,
        format: str | None = None,
        goal: DockerGoal | str | None = None,
    ) -> ArchiveReport:
        """Archive ``source_dir`` and return a report of what was written.

        Raises:
            ValueError: If the format or goal cannot be resolved
            OSError: If reading the source or writing the archive fails
        """
        archive_format = self.resolve_format(destination, format=format, goal=goal)
        dest_path = destination or self.default_destination(source_dir, archive_format)
        archiver = self.archivers[archive_format]

        logger.info("Archiving %s to %s as %s", source_dir, dest_path, archive_format)
        try:
            report = archiver.archive(Path(source_dir), Path(dest_path))
        except OSError as exc:
            logger.error("Failed to archive %s to %s: %s", source_dir, dest_path, exc, exc_info=True)
            raise

        if not report.created:
            logger.warning("No entries found under %s; %s was not written", source_dir, dest_path)
        return report
