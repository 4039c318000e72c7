"""Formatting helpers for listing rows, per-root summaries, and grand totals."""

from __future__ import annotations

from .file_tree_model import Entry, Summary

NAME_COLUMN_WIDTH = 54
SUMMARY_COLUMN_WIDTH = 68
ELLIPSIS = "..."

HEADER_LINE = "Name".ljust(60) + "User:Group           Size    Blocks Type"
SEPARATOR_LINE = "-" * 100


def display_text(text: str) -> str:
    """Make ``text`` writable to any UTF-8 stream.

    Undecodable filename bytes arrive as lone surrogates; they are shown as
    ``\\xNN`` escapes instead of failing the write.
    """
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")


def truncate(text: str, width: int) -> str:
    """Clip ``text`` to ``width`` characters, ending in an ellipsis when clipped."""
    if len(text) <= width:
        return text
    return text[: width - len(ELLIPSIS)] + ELLIPSIS


def plural(count: int, singular: str, plural_form: str) -> str:
    return singular if count == 1 else plural_form


def format_entry_row(prefix: str, entry: Entry) -> str:
    """Render one aligned listing row for ``entry`` under indentation ``prefix``."""
    name = truncate(prefix + display_text(entry.name), NAME_COLUMN_WIDTH)
    return (
        f"{name:<{NAME_COLUMN_WIDTH}}  "
        f"{display_text(entry.owner):>8.8}:{display_text(entry.group):<8.8}  "
        f"{entry.size:>10}  {entry.blocks:>8}    {entry.type.marker}"
    )


def summary_sentence(summary: Summary) -> str:
    """Describe per-type counts as prose, clipped to the summary column."""
    sentence = (
        f"{summary.files} {plural(summary.files, 'file', 'files')}, "
        f"{summary.dirs} {plural(summary.dirs, 'directory', 'directories')}, "
        f"{summary.links} {plural(summary.links, 'link', 'links')}, "
        f"{summary.fifos} {plural(summary.fifos, 'pipe', 'pipes')}, "
        f"and {summary.sockets} {plural(summary.sockets, 'socket', 'sockets')}"
    )
    return truncate(sentence, SUMMARY_COLUMN_WIDTH)


def format_summary_row(summary: Summary) -> str:
    """Render the footer row of one root: prose counts then size and blocks."""
    return f"{summary_sentence(summary):<{SUMMARY_COLUMN_WIDTH}}   {summary.size:>14} {summary.blocks:>9}"


def format_root_header(root: str) -> list[str]:
    """Return the column header, separator, and root-path lines."""
    return [HEADER_LINE, SEPARATOR_LINE, display_text(root)]


def format_grand_total(root_count: int, total: Summary) -> list[str]:
    """Render the cross-root aggregate block shown when several roots ran.

    The entry total sums only the five listed types, so the block adds up;
    unclassified entries (device nodes) contribute size and blocks only.
    """
    listed = total.files + total.dirs + total.links + total.fifos + total.sockets
    rows = [
        ("total # of files:", total.files),
        ("total # of directories:", total.dirs),
        ("total # of links:", total.links),
        ("total # of pipes:", total.fifos),
        ("total # of sockets:", total.sockets),
        ("total # of entries:", listed),
        ("total file size:", total.size),
        ("total # of blocks:", total.blocks),
    ]
    lines = [f"Analyzed {root_count} directories:"]
    lines.extend(f"  {label:<25}{value:>16}" for label, value in rows)
    return lines


__all__ = [
    "NAME_COLUMN_WIDTH",
    "SUMMARY_COLUMN_WIDTH",
    "HEADER_LINE",
    "SEPARATOR_LINE",
    "display_text",
    "truncate",
    "plural",
    "format_entry_row",
    "summary_sentence",
    "format_summary_row",
    "format_root_header",
    "format_grand_total",
]
