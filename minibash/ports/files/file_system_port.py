"""
File system port interface defining the contract for read-only file system queries.
"""

import os
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime
from typing import Union

PathArg = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


@dataclass(frozen=True)
class PathStat:
    """Kind of the entity a path resolves to."""

    is_directory: bool
    is_file: bool


class RawDirEntry(ABC):
    """One child yielded by a directory read."""

    @property
    @abstractmethod
    def name(self) -> bytes:
        """Entry name as raw bytes."""
        pass

    @abstractmethod
    def modified_time(self) -> datetime:
        """
        Get the last modification time of the entry.

        Returns:
            Modification time

        Raises:
            OSError: If the entry metadata cannot be read
        """
        pass


class FileSystemPort(ABC):
    """Port interface for file system queries."""

    @abstractmethod
    def stat(self, path: PathArg) -> PathStat:
        """
        Resolve the metadata of a path.

        Args:
            path: Path to resolve

        Returns:
            PathStat describing the resolved entity

        Raises:
            OSError: If the path cannot be resolved
        """
        pass

    @abstractmethod
    def read_dir(self, path: PathArg) -> Iterator[RawDirEntry]:
        """
        Enumerate the immediate children of a directory.

        The directory is opened before this method returns. Children that
        cannot be read are left out of the iteration instead of failing it.

        Args:
            path: Directory path

        Returns:
            Iterator over the children, in file system order

        Raises:
            OSError: If the directory cannot be opened
        """
        pass
