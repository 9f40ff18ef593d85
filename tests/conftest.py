"""Shared fixtures for manifest builder tests."""

import os
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def import_dir(tmp_path: Path) -> Path:
    """An import directory with an empty _media folder."""
    (tmp_path / "_media").mkdir()
    return tmp_path


@pytest.fixture
def media_dir(import_dir: Path) -> Path:
    return import_dir / "_media"


@pytest.fixture
def make_file() -> Callable[..., Path]:
    """Factory creating a file of the given size (sparse for large sizes)."""

    def _make_file(directory: Path, name: str | bytes, size: int = 16) -> Path:
        path = Path(os.fsdecode(os.path.join(os.fsencode(directory), os.fsencode(name))))
        with path.open("wb") as f:
            f.truncate(size)
        return path

    return _make_file


@pytest.fixture
def entry_for() -> Callable[[Path], os.DirEntry]:
    """Factory returning the os.DirEntry for a path by scanning its parent."""

    def _entry_for(path: Path) -> os.DirEntry:
        with os.scandir(path.parent) as it:
            for entry in it:
                if entry.name == path.name:
                    return entry
        raise FileNotFoundError(path)

    return _entry_for
