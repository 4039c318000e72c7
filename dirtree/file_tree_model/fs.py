"""Filesystem reading, ordering, and ``lstat`` classification helpers."""

from __future__ import annotations

import grp
import logging
import os
import pwd
import stat
from collections.abc import Iterable, Iterator
from functools import lru_cache
from pathlib import Path

from .types import DirectoryMember, Entry, EntryType

logger = logging.getLogger(__name__)

_PSEUDO_ENTRIES = frozenset({".", ".."})


def iter_directory_members(handle: Iterator[os.DirEntry], directory: Path) -> Iterator[DirectoryMember]:
    """Yield members of an open ``os.scandir`` handle, skipping ``.``/``..``.

    A read error mid-stream is logged and ends the sequence for this
    directory; it never propagates to the caller.
    """
    while True:
        try:
            child = next(handle)
        except StopIteration:
            return
        except OSError as exc:
            logger.error("cannot read directory '%s': %s", directory, exc.strerror or exc)
            return

        if child.name in _PSEUDO_ENTRIES:
            continue
        try:
            is_dir = child.is_dir(follow_symlinks=False)
        except OSError:
            is_dir = False
        yield DirectoryMember(name=child.name, path=directory / child.name, is_dir=is_dir)


def member_sort_key(member: DirectoryMember) -> tuple[bool, bytes]:
    """Directories first, then byte-wise name order."""
    return (not member.is_dir, os.fsencode(member.name))


def sort_members(members: Iterable[DirectoryMember]) -> list[DirectoryMember]:
    """Return all ``members`` materialized and in listing order."""
    return sorted(members, key=member_sort_key)


def classify_mode(mode: int) -> EntryType:
    """Map an ``st_mode`` value to its entry type."""
    if stat.S_ISDIR(mode):
        return EntryType.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryType.REGULAR
    if stat.S_ISLNK(mode):
        return EntryType.SYMLINK
    if stat.S_ISFIFO(mode):
        return EntryType.FIFO
    if stat.S_ISSOCK(mode):
        return EntryType.SOCKET
    return EntryType.OTHER


@lru_cache(maxsize=256)
def user_name(uid: int) -> str:
    """Resolve ``uid`` to a login name, or its decimal id when unknown."""
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


@lru_cache(maxsize=256)
def group_name(gid: int) -> str:
    """Resolve ``gid`` to a group name, or its decimal id when unknown."""
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def read_entry(path: Path) -> Entry:
    """Classify ``path`` without following symlinks.

    Raises ``OSError`` when the metadata query fails (vanished entry, no
    permission on the parent, ...).
    """
    st = os.lstat(path)
    return Entry(
        name=path.name,
        path=path,
        type=classify_mode(st.st_mode),
        size=int(st.st_size),
        blocks=int(getattr(st, "st_blocks", 0)),
        owner=user_name(st.st_uid),
        group=group_name(st.st_gid),
    )


__all__ = [
    "iter_directory_members",
    "member_sort_key",
    "sort_members",
    "classify_mode",
    "user_name",
    "group_name",
    "read_entry",
]
