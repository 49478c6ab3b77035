"""Ports for directory archiving."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Protocol

from pydantic import BaseModel, Field


class ArchiveReport(BaseModel):
    """Summary of a single archival call."""

    format: Literal["zip", "tar.gz"] = Field(..., description="Archive container format")
    source: str = Field(..., description="Absolute path of the archived directory")
    destination: str = Field(..., description="Absolute path of the archive file")
    created: bool = Field(..., description="Whether an archive file was written")
    directory_count: int = Field(0, ge=0, description="Directory entries written")
    file_count: int = Field(0, ge=0, description="File entries written")
    total_bytes: int = Field(0, ge=0, description="Uncompressed file bytes written")

    @property
    def entry_count(self) -> int:
        """Total number of directory and file entries written."""
        return self.directory_count + self.file_count


class ArchivePort(Protocol):
    """Port interface for writing a directory tree into an archive file."""

    format: Literal["zip", "tar.gz"]

    def archive(self, source_dir: Path, destination: Path) -> ArchiveReport:
        """Archive everything under ``source_dir`` into ``destination``."""
        ...
