"""Domain datatypes for classified directory members and running totals."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class EntryType(Enum):
    """Filesystem entry kind, valued by its one-character listing marker."""

    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    FIFO = "fifo"
    SOCKET = "socket"
    OTHER = "other"

    @property
    def marker(self) -> str:
        return TYPE_MARKERS[self]


TYPE_MARKERS: dict[EntryType, str] = {
    EntryType.REGULAR: " ",
    EntryType.DIRECTORY: "d",
    EntryType.SYMLINK: "l",
    EntryType.FIFO: "f",
    EntryType.SOCKET: "s",
    EntryType.OTHER: " ",
}


@dataclass(frozen=True)
class DirectoryMember:
    """One raw directory member as read from an open directory handle."""

    name: str
    path: Path
    is_dir: bool


@dataclass(frozen=True)
class Entry:
    """Classified metadata for one directory member (``lstat`` view)."""

    name: str
    path: Path
    type: EntryType
    size: int
    blocks: int
    owner: str
    group: str

    @property
    def is_dir(self) -> bool:
        return self.type is EntryType.DIRECTORY


@dataclass
class Summary:
    """Running per-type counts plus size/block totals for one traversal scope.

    Every folded entry increments exactly one counter, so ``entries`` always
    equals the number of ``add`` calls (plus anything merged in).
    """

    dirs: int = 0
    files: int = 0
    links: int = 0
    fifos: int = 0
    sockets: int = 0
    others: int = 0
    size: int = 0
    blocks: int = 0

    def add(self, entry: Entry) -> None:
        """Fold one classified entry into the running totals."""
        kind = entry.type
        if kind is EntryType.DIRECTORY:
            self.dirs += 1
        elif kind is EntryType.REGULAR:
            self.files += 1
        elif kind is EntryType.SYMLINK:
            self.links += 1
        elif kind is EntryType.FIFO:
            self.fifos += 1
        elif kind is EntryType.SOCKET:
            self.sockets += 1
        else:
            self.others += 1
        self.size += entry.size
        self.blocks += entry.blocks

    def merge(self, other: Summary) -> None:
        """Add every field of ``other`` into this summary in place."""
        self.dirs += other.dirs
        self.files += other.files
        self.links += other.links
        self.fifos += other.fifos
        self.sockets += other.sockets
        self.others += other.others
        self.size += other.size
        self.blocks += other.blocks

    def __add__(self, other: Summary) -> Summary:
        if not isinstance(other, Summary):
            return NotImplemented
        total = Summary()
        total.merge(self)
        total.merge(other)
        return total

    @property
    def entries(self) -> int:
        return self.dirs + self.files + self.links + self.fifos + self.sockets + self.others


__all__ = [
    "EntryType",
    "TYPE_MARKERS",
    "DirectoryMember",
    "Entry",
    "Summary",
]
