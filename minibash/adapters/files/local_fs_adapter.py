"""
Local file system adapter implementation for file system queries.
"""

import logging
import os
import stat as stat_mode
from collections.abc import Iterator
from datetime import datetime, timezone

from typing_extensions import override

from minibash.ports.files.file_system_port import (
    FileSystemPort,
    PathArg,
    PathStat,
    RawDirEntry,
)

class LocalDirEntry(RawDirEntry):
    """RawDirEntry backed by an os.DirEntry read with a bytes path."""

    def __init__(self, entry: "os.DirEntry[bytes]"):
        self._entry = entry

    @property
    @override
    def name(self) -> bytes:
        return self._entry.name

    @override
    def modified_time(self) -> datetime:
        st_mtime = self._entry.stat(follow_symlinks=False).st_mtime
        # UTC-aware; naive local times are ambiguous during a DST fall-back
        return datetime.fromtimestamp(st_mtime, tz=timezone.utc)

    def __repr__(self) -> str:
        return f"LocalDirEntry(name={self._entry.name!r})"


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the file system port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def stat(self, path: PathArg) -> PathStat:
        """
        Resolve the metadata of a path, following symlinks.

        Args:
            path: Path to resolve

        Returns:
            PathStat describing the resolved entity

        Raises:
            OSError: If the path cannot be resolved
        """
        mode = os.stat(path).st_mode
        return PathStat(
            is_directory=stat_mode.S_ISDIR(mode),
            is_file=stat_mode.S_ISREG(mode),
        )

    @override
    def read_dir(self, path: PathArg) -> Iterator[RawDirEntry]:
        """
        Enumerate the immediate children of a directory.

        Args:
            path: Directory path

        Returns:
            Iterator over the children, in file system order

        Raises:
            OSError: If the directory cannot be opened
        """
        # bytes path so that names come back undecoded
        scandir_it = os.scandir(os.fsencode(path))
        return self._iter_entries(scandir_it, os.fsdecode(path))

    def _iter_entries(
        self, scandir_it: "Iterator[os.DirEntry[bytes]]", display_path: str
    ) -> Iterator[RawDirEntry]:
        """
        Yield entries from an open scandir iterator, skipping unreadable ones.

        Args:
            scandir_it: Iterator returned by os.scandir
            display_path: Directory path used in log messages
        """
        with scandir_it:  # type: ignore[attr-defined]
            while True:
                try:
                    entry = next(scandir_it)
                except StopIteration:
                    return
                except OSError as e:
                    # Log the error but continue with the other entries.
                    # CPython closes a scandir iterator after a readdir error,
                    # so the next call ends the enumeration.
                    self._logger.warning(
                        f"Skipping unreadable entry in {display_path}: {e}"
                    )
                    continue
                yield LocalDirEntry(entry)
