"""Domain model for directory listings.

This package contains the non-formatting primitives:
- entry/summary datatypes
- directory reading and sibling ordering
- ``lstat`` classification with owner/group resolution
"""

from __future__ import annotations

from .types import TYPE_MARKERS, DirectoryMember, Entry, EntryType, Summary
from .fs import (
    classify_mode,
    group_name,
    iter_directory_members,
    member_sort_key,
    read_entry,
    sort_members,
    user_name,
)

__all__ = [
    "EntryType",
    "TYPE_MARKERS",
    "DirectoryMember",
    "Entry",
    "Summary",
    "iter_directory_members",
    "member_sort_key",
    "sort_members",
    "classify_mode",
    "user_name",
    "group_name",
    "read_entry",
]
