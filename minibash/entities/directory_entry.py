"""
Directory entry domain entity.
"""

import sys
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


def decode_name(raw_name: bytes) -> Optional[str]:
    """
    Decode a raw file name using the file system encoding.

    Args:
        raw_name: File name bytes as returned by the file system

    Returns:
        The decoded name, or None if the bytes are not valid text
    """
    try:
        return raw_name.decode(sys.getfilesystemencoding(), "strict")
    except UnicodeDecodeError:
        return None


@dataclass(frozen=True)
class DirectoryEntry:
    """
    One immediate child of a directory.

    Attributes:
        raw_name: Name bytes exactly as the file system returned them
        last_modified: Modification time, or None when it could not be read
    """

    raw_name: bytes
    last_modified: Optional[datetime] = None

    @property
    def name(self) -> Optional[str]:
        """Decoded name, or None if the name is not valid text."""
        return decode_name(self.raw_name)

    @property
    def is_hidden(self) -> bool:
        return self.raw_name.startswith(b".")

    @property
    def is_dot_entry(self) -> bool:
        """True for the '.' and '..' pseudo-entries."""
        return self.raw_name in (b".", b"..")

    def __str__(self) -> str:
        return self.name if self.name is not None else repr(self.raw_name)
