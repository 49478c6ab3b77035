"""Concrete adapters wiring application ports to built-in implementations."""

from __future__ import annotations

from .tar_gz_archiver import TarGzArchiver
from .zip_archiver import ZipArchiver

__all__ = [
    "TarGzArchiver",
    "ZipArchiver",
]
