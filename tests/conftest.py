"""Pytest configuration and fixtures."""

import gc
import shutil
import tempfile
import time
from collections.abc import Generator
from pathlib import Path

import pytest

from dirpack.config import Settings


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    try:
        yield Path(tmpdir)
    finally:
        # Force garbage collection to release any file handles
        gc.collect()
        # Small delay to allow OS to release file locks
        time.sleep(0.1)
        shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def nested_tree(temp_dir: Path) -> Path:
    """Create a ``proj`` directory with nested files and an empty directory.

    proj/
        a.txt            "hello"
        empty/
        sub/
            b.txt        "world"
            deeper/
                c.bin    binary payload
    """
    root = temp_dir / "proj"
    deeper = root / "sub" / "deeper"
    deeper.mkdir(parents=True)
    (root / "empty").mkdir()

    (root / "a.txt").write_text("hello")
    (root / "sub" / "b.txt").write_text("world")
    (deeper / "c.bin").write_bytes(bytes(range(256)) * 40)

    return root


@pytest.fixture
def override_settings(temp_dir: Path) -> Generator[Settings, None, None]:
    """Provide isolated dirpack settings scoped to tests."""

    import dirpack.config as config_module

    original_settings = getattr(config_module, "_settings", None)

    output_dir = temp_dir / "archives"
    settings = config_module.Settings(output_dir=output_dir)

    config_module._settings = settings

    try:
        yield settings
    finally:
        config_module._settings = original_settings
