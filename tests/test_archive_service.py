"""Tests for ArchiveService format resolution and delegation."""

from __future__ import annotations

import logging
import tarfile
from pathlib import Path
from zipfile import ZipFile

import pytest

from dirpack.bootstrap import bootstrap_application
from dirpack.config import Settings
from dirpack.goals import DockerGoal


def _service(temp_dir: Path, **overrides):
    settings = Settings(output_dir=temp_dir / "archives", **overrides)
    return bootstrap_application(settings=settings).archive_service


def test_goal_save_produces_tar_gz_in_output_dir(nested_tree: Path, temp_dir: Path) -> None:
    service = _service(temp_dir)

    report = service.archive(nested_tree, goal="save")

    expected = (temp_dir / "archives" / "proj.tar.gz").resolve()
    assert report.format == "tar.gz"
    assert Path(report.destination) == expected
    assert tarfile.is_tarfile(expected)


def test_goal_push_produces_zip(nested_tree: Path, temp_dir: Path) -> None:
    service = _service(temp_dir)

    report = service.archive(nested_tree, goal=DockerGoal.PUSH)

    assert report.format == "zip"
    with ZipFile(report.destination) as archive:
        assert "a.txt" in archive.namelist()


def test_goal_code_lookup_is_case_insensitive(temp_dir: Path) -> None:
    service = _service(temp_dir)

    assert service.resolve_format(goal="SAVE") == "tar.gz"
    assert service.resolve_format(goal="Push") == "zip"


def test_unknown_goal_is_rejected(nested_tree: Path, temp_dir: Path) -> None:
    service = _service(temp_dir)

    with pytest.raises(ValueError, match="Unknown goal 'deploy'"):
        service.archive(nested_tree, goal="deploy")


def test_explicit_format_overrides_goal(temp_dir: Path) -> None:
    service = _service(temp_dir)

    assert service.resolve_format(format="zip", goal="save") == "zip"


def test_destination_suffix_decides_format(temp_dir: Path) -> None:
    service = _service(temp_dir)

    assert service.resolve_format(temp_dir / "bundle.tgz") == "tar.gz"
    assert service.resolve_format(temp_dir / "bundle.TAR.GZ") == "tar.gz"
    assert service.resolve_format(temp_dir / "bundle.zip") == "zip"


def test_settings_default_format_is_fallback(temp_dir: Path) -> None:
    assert _service(temp_dir).resolve_format(temp_dir / "bundle") == "zip"
    assert _service(temp_dir, default_format="tar.gz").resolve_format() == "tar.gz"


def test_unsupported_format_is_rejected(temp_dir: Path) -> None:
    service = _service(temp_dir)

    with pytest.raises(ValueError, match="Unsupported archive format 'rar'"):
        service.resolve_format(format="rar")


def test_explicit_destination_is_used(nested_tree: Path, temp_dir: Path) -> None:
    service = _service(temp_dir)
    destination = temp_dir / "custom" / "bundle.zip"

    report = service.archive(nested_tree, destination)

    assert report.created
    assert destination.exists()
    assert not (temp_dir / "archives" / "proj.zip").exists()


def test_empty_source_reports_not_created(temp_dir: Path, caplog) -> None:
    service = _service(temp_dir)
    source = temp_dir / "empty"
    source.mkdir()

    with caplog.at_level(logging.WARNING, logger="dirpack"):
        report = service.archive(source, format="zip")

    assert not report.created
    assert "No entries found" in caplog.text


def test_io_failure_is_logged_and_propagated(nested_tree: Path, temp_dir: Path, caplog) -> None:
    service = _service(temp_dir)
    destination = temp_dir / "occupied.zip"
    destination.mkdir()

    with caplog.at_level(logging.ERROR, logger="dirpack"):
        with pytest.raises(OSError):
            service.archive(nested_tree, destination)

    assert "Failed to archive" in caplog.text


def test_bootstrap_applies_settings_to_archivers(nested_tree: Path, temp_dir: Path) -> None:
    settings = Settings(output_dir=temp_dir / "archives", copy_buffer_size=5)
    container = bootstrap_application(settings=settings)

    assert container.settings is settings
    assert container.zip_archiver.format == "zip"
    assert container.tar_gz_archiver.format == "tar.gz"

    report = container.zip_archiver.archive(nested_tree, temp_dir / "small-buffer.zip")
    with ZipFile(report.destination) as archive:
        assert archive.read("sub/deeper/c.bin") == (nested_tree / "sub/deeper/c.bin").read_bytes()
