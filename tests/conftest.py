"""
Pytest configuration and shared fixtures.
"""

import errno
import os
import tempfile
from collections.abc import Iterator
from datetime import datetime, timezone
from typing import Optional, Union
from unittest.mock import MagicMock

import pytest
from typing_extensions import override

from minibash.container import DependencyContainer
from minibash.ports.clock.clock_port import ClockPort
from minibash.ports.files.file_system_port import (
    FileSystemPort,
    PathArg,
    PathStat,
    RawDirEntry,
)

FIXED_NOW = datetime(2030, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeEntry(RawDirEntry):
    """In-memory directory entry; a None timestamp makes modified_time() fail."""

    def __init__(self, name: bytes, modified: Optional[datetime]):
        self._name = name
        self._modified = modified

    @property
    @override
    def name(self) -> bytes:
        return self._name

    @override
    def modified_time(self) -> datetime:
        if self._modified is None:
            raise PermissionError(errno.EACCES, "Permission denied")
        return self._modified


class FakeFileSystem(FileSystemPort):
    """In-memory file system for use case tests."""

    def __init__(self):
        self._files: set[str] = set()
        self._dirs: dict[str, list[FakeEntry]] = {}
        self._denied: set[str] = set()

    def add_file(self, path: PathArg) -> None:
        self._files.add(os.fsdecode(path))

    def add_dir(
        self,
        path: PathArg,
        entries: list[tuple[Union[str, bytes], Optional[datetime]]] | None = None,
    ) -> None:
        self._dirs[os.fsdecode(path)] = [
            FakeEntry(os.fsencode(name), modified) for name, modified in entries or []
        ]

    def deny(self, path: PathArg) -> None:
        """Make reading the directory fail with a permission error."""
        self._denied.add(os.fsdecode(path))

    @override
    def stat(self, path: PathArg) -> PathStat:
        key = os.fsdecode(path)
        if key in self._files:
            return PathStat(is_directory=False, is_file=True)
        if key in self._dirs:
            return PathStat(is_directory=True, is_file=False)
        raise FileNotFoundError(errno.ENOENT, "No such file or directory", key)

    @override
    def read_dir(self, path: PathArg) -> Iterator[RawDirEntry]:
        key = os.fsdecode(path)
        if key in self._denied:
            raise PermissionError(errno.EACCES, "Permission denied", key)
        return iter(list(self._dirs[key]))


class FixedClock(ClockPort):
    """Clock that always returns the same instant."""

    def __init__(self, now: datetime = FIXED_NOW):
        self._now = now

    @override
    def now(self) -> datetime:
        return self._now


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing listings.

    Contains a.txt, b.txt, .hidden and an empty subdirectory named subdir.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        for name in ("a.txt", "b.txt", ".hidden"):
            with open(os.path.join(temp_dir, name), "w") as f:
                f.write(f"contents of {name}")

        os.makedirs(os.path.join(temp_dir, "subdir"))

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def fake_file_system():
    """Empty in-memory file system."""
    return FakeFileSystem()


@pytest.fixture
def fixed_clock():
    """Clock frozen at FIXED_NOW."""
    return FixedClock()


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
