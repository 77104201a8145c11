"""
Listing options and results.
"""

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class ListingOptions:
    """Display options recognized by the directory lister."""

    # include dotfiles, except '.' and '..'
    show_hidden: bool = False
    # newest first instead of by name
    sort_by_time: bool = False


@dataclass(frozen=True)
class SingleListing:
    """Result for a path that names a regular file."""

    name: str

    @property
    def names(self) -> list[str]:
        return [self.name]


@dataclass(frozen=True)
class DirectoryListing:
    """Result for a path that names a directory, in display order."""

    names: list[str] = field(default_factory=list)


ListingResult = Union[SingleListing, DirectoryListing]
