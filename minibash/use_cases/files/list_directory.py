"""
Use case for listing a directory, the way ``ls`` does.
"""

import logging
import os
import sys
from collections.abc import Iterable
from pathlib import PurePath
from typing import Optional

from minibash.entities.directory_entry import DirectoryEntry, decode_name
from minibash.entities.listing import (
    DirectoryListing,
    ListingOptions,
    ListingResult,
    SingleListing,
)
from minibash.exceptions import (
    InvalidNameError,
    ListError,
    NotFoundError,
    PermissionDeniedError,
)
from minibash.ports.clock.clock_port import ClockPort
from minibash.ports.files.file_system_port import FileSystemPort, PathArg, RawDirEntry


def display_path(path: PathArg) -> str:
    """Printable form of a path; undecodable bytes are backslash-escaped."""
    return os.fsencode(path).decode(sys.getfilesystemencoding(), "backslashreplace")


class ListDirectoryUseCase:
    """Use case for listing the entries of a directory, or naming a single file."""

    def __init__(
        self,
        file_system: FileSystemPort,
        clock: ClockPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: File system queried for metadata and directory contents
            clock: Clock used as the timestamp of entries whose time cannot be read
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._clock = clock
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self, path: PathArg, options: Optional[ListingOptions] = None
    ) -> ListingResult:
        """
        List a path.

        Args:
            path: File or directory to list
            options: Display options; defaults hide dotfiles and sort by name

        Returns:
            SingleListing if path is a regular file, DirectoryListing otherwise

        Raises:
            NotFoundError: If the path cannot be resolved or read
            PermissionDeniedError: If access to the path is refused
            InvalidNameError: If a file's name cannot be represented as text
        """
        options = options or ListingOptions()
        shown = display_path(path)
        try:
            self._logger.info(f"Listing path: {shown}")
            try:
                path_stat = self._file_system.stat(path)
            except OSError as e:
                raise self._translate_os_error(shown, e) from e

            if path_stat.is_file:
                return SingleListing(self._file_name(path, shown))

            try:
                raw_entries = self._file_system.read_dir(path)
            except OSError as e:
                raise self._translate_os_error(shown, e) from e

            entries = self._order(self._filter(raw_entries, options), options)
            names = [self._entry_name(entry, shown) for entry in entries]
            self._logger.info(f"Found {len(names)} entries")
            return DirectoryListing(names)
        except ListError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing path: {e}")
            raise ListError(shown, f"cannot list '{shown}': {e}") from e

    @staticmethod
    def _translate_os_error(shown: str, error: OSError) -> ListError:
        if isinstance(error, PermissionError):
            return PermissionDeniedError(shown, error.strerror)
        return NotFoundError(shown, error.strerror)

    @staticmethod
    def _file_name(path: PathArg, shown: str) -> str:
        name = PurePath(os.fsdecode(path)).name
        if name in ("", ".."):
            raise InvalidNameError(shown)
        decoded = decode_name(os.fsencode(name))
        if decoded is None:
            raise InvalidNameError(shown)
        return decoded

    def _filter(
        self, raw_entries: Iterable[RawDirEntry], options: ListingOptions
    ) -> list[RawDirEntry]:
        kept: list[RawDirEntry] = []
        for raw in raw_entries:
            entry = DirectoryEntry(raw.name)
            if entry.is_dot_entry:
                continue
            if entry.is_hidden and not options.show_hidden:
                continue
            kept.append(raw)
        return kept

    def _order(
        self, raw_entries: list[RawDirEntry], options: ListingOptions
    ) -> list[DirectoryEntry]:
        if not options.sort_by_time:
            entries = [DirectoryEntry(raw.name) for raw in raw_entries]
            return sorted(entries, key=lambda entry: entry.raw_name)

        # One "now" per listing; unreadable timestamps sort as most recent.
        now = self._clock.now()
        entries = []
        for raw in raw_entries:
            try:
                modified = raw.modified_time()
            except OSError as e:
                self._logger.warning(
                    f"Cannot read modification time of {raw.name!r}: {e}"
                )
                modified = now
            entries.append(DirectoryEntry(raw.name, modified))
        # sorted() is stable with reverse=True: ties keep enumeration order
        return sorted(entries, key=lambda entry: entry.last_modified, reverse=True)

    def _entry_name(self, entry: DirectoryEntry, shown: str) -> str:
        name = entry.name
        if name is None:
            error = InvalidNameError(os.path.join(shown, display_path(entry.raw_name)))
            self._logger.warning(f"{error}; listed as an empty name")
            return ""
        return name
