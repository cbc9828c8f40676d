"""Shared test fixtures and configuration."""

import io
import logging
import shutil
import tempfile
from pathlib import Path
from typing import Generator, Iterable, Iterator

import pytest
import structlog
from rich.console import Console


class InMemoryListing:
    """DirectoryListing over a fixed list of absolute file paths."""

    def __init__(self, files: Iterable[Path | str]):
        self.files = [Path(f) for f in files]

    def is_file(self, path: Path) -> bool:
        return path in self.files

    def is_dir(self, path: Path) -> bool:
        return any(path in f.parents for f in self.files)

    def list_files(self, directory: Path, recursive: bool) -> Iterator[Path]:
        for f in self.files:
            if f.parent == directory or (recursive and directory in f.parents):
                yield f


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers installed by setup_logging between tests."""
    yield
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.WARNING)
    structlog.reset_defaults()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp()).resolve()
    yield temp_path
    shutil.rmtree(temp_path)


@pytest.fixture
def model_dir(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Directory with a few model files, also made the working directory."""
    for name in ("a.cgf", "b.cgf", "c.skin", "model.cgf"):
        (temp_dir / name).write_bytes(b"CryTek\x00\x00")
    monkeypatch.chdir(temp_dir)
    return temp_dir


@pytest.fixture
def console() -> Console:
    """Console that records output in memory."""
    return Console(file=io.StringIO(), width=200, soft_wrap=True)


@pytest.fixture
def memory_listing() -> InMemoryListing:
    """In-memory tree under /data."""
    return InMemoryListing(
        [
            "/data/Objects/ship.cgf",
            "/data/Objects/ship.cga",
            "/data/Objects/ship.mtl",
            "/data/Objects/README",
            "/data/Objects/weapons/gun.cgf",
            "/data/Objects/weapons/gun.skin",
            "/data/Textures/hull.dds",
        ]
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that test individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests that test multiple components"
    )
