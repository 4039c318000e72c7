"""Depth-limited, pre-order directory traversal with running statistics.

Each visited directory is read completely, sorted, then listed. Entries are
classified with ``lstat`` so symlinks are reported but never followed; only
real directories are descended into. Per-entry failures are logged on the
``dirtree`` logger and skipped so siblings and other roots still run.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from .config import TraversalConfig
from .file_tree_model import Summary, iter_directory_members, read_entry, sort_members
from .pattern import matches
from .report import SEPARATOR_LINE, format_entry_row, format_grand_total, format_root_header, format_summary_row

logger = logging.getLogger(__name__)


def _write_line(out: TextIO, line: str) -> None:
    out.write(line)
    out.write("\n")


def walk_directory(
    directory: Path,
    config: TraversalConfig,
    summary: Summary,
    out: TextIO,
    depth: int = 0,
) -> None:
    """List ``directory`` at nesting ``depth`` and recurse into subdirectories.

    Matched entries are folded into ``summary`` before their subtree is
    visited. Non-matching directories are hidden but still descended.

    The depth budget is checked before the directory is opened, so
    directories past the limit are never opened and report no open errors.
    """
    if depth > config.max_depth:
        return

    try:
        handle = os.scandir(directory)
    except OSError as exc:
        logger.error("cannot open directory '%s': %s", directory, exc.strerror or exc)
        return

    with handle:
        members = sort_members(iter_directory_members(handle, directory))

    prefix = config.indent * (depth + 1)
    for member in members:
        try:
            entry = read_entry(member.path)
        except OSError as exc:
            logger.error("cannot stat '%s': %s", member.path, exc.strerror or exc)
            continue

        if matches(entry.name, config.pattern):
            summary.add(entry)
            _write_line(out, format_entry_row(prefix, entry))

        if entry.is_dir:
            walk_directory(entry.path, config, summary, out, depth + 1)


def traverse_root(root: str, config: TraversalConfig, out: TextIO) -> Summary:
    """Print the framed listing of one root and return its fresh ``Summary``."""
    summary = Summary()
    for line in format_root_header(root):
        _write_line(out, line)
    walk_directory(Path(root), config, summary, out)
    _write_line(out, SEPARATOR_LINE)
    _write_line(out, format_summary_row(summary))
    return summary


def traverse_roots(roots: Sequence[str], config: TraversalConfig, out: TextIO) -> Summary:
    """Traverse every root independently and return their element-wise total.

    With more than one root each listing is followed by a blank line and an
    aggregate block is printed at the end.
    """
    total = Summary()
    several = len(roots) > 1
    for root in roots:
        total.merge(traverse_root(root, config, out))
        if several:
            _write_line(out, "")
    if several:
        for line in format_grand_total(len(roots), total):
            _write_line(out, line)
    return total


__all__ = [
    "walk_directory",
    "traverse_root",
    "traverse_roots",
]
