"""Row, summary, and grand-total formatting tests."""

from __future__ import annotations

import unittest
from pathlib import Path

from dirtree.file_tree_model import Entry, EntryType, Summary
from dirtree.report import (
    HEADER_LINE,
    NAME_COLUMN_WIDTH,
    SEPARATOR_LINE,
    SUMMARY_COLUMN_WIDTH,
    display_text,
    format_entry_row,
    format_grand_total,
    format_root_header,
    format_summary_row,
    summary_sentence,
    truncate,
)


def _entry(name: str, kind: EntryType = EntryType.REGULAR, **overrides) -> Entry:
    fields = dict(name=name, path=Path(name), type=kind, size=1234, blocks=8, owner="alice", group="staff")
    fields.update(overrides)
    return Entry(**fields)


class EntryRowTests(unittest.TestCase):
    def test_row_columns(self) -> None:
        row = format_entry_row("  ", _entry("notes.txt"))

        self.assertEqual(
            row,
            "  notes.txt".ljust(54) + "     alice:staff           1234         8     ",
        )

    def test_directory_marker_and_owner_clipping(self) -> None:
        row = format_entry_row("    ", _entry("src", EntryType.DIRECTORY, owner="averylongusername", group="developers"))

        self.assertTrue(row.endswith("d"))
        self.assertIn("averylon:develope", row)

    def test_long_names_are_truncated_and_keep_alignment(self) -> None:
        short_row = format_entry_row("  ", _entry("short"))
        long_row = format_entry_row("  ", _entry("x" * 80))

        clipped = long_row[:NAME_COLUMN_WIDTH]
        self.assertTrue(clipped.endswith("..."))
        self.assertEqual(clipped, "  " + "x" * (NAME_COLUMN_WIDTH - 5) + "...")
        self.assertEqual(len(short_row), len(long_row))
        self.assertEqual(short_row.index(":"), long_row.index(":"))

    def test_name_exactly_at_width_is_not_truncated(self) -> None:
        name = "y" * (NAME_COLUMN_WIDTH - 2)
        row = format_entry_row("  ", _entry(name))
        self.assertEqual(row[:NAME_COLUMN_WIDTH], "  " + name)

    def test_undecodable_name_bytes_are_escaped(self) -> None:
        row = format_entry_row("  ", _entry("bad\udcff.txt"))

        self.assertTrue(row.startswith("  bad\\xff.txt "))
        row.encode("utf-8")

    def test_display_text_keeps_valid_unicode(self) -> None:
        self.assertEqual(display_text("caf\u00e9.txt"), "caf\u00e9.txt")
        self.assertEqual(display_text("x\udc80y"), "x\\x80y")

    def test_root_header_escapes_undecodable_path(self) -> None:
        self.assertEqual(format_root_header("dir\udcfe")[2], "dir\\xfe")

    def test_truncate(self) -> None:
        self.assertEqual(truncate("abcdef", 6), "abcdef")
        self.assertEqual(truncate("abcdefg", 6), "abc...")


class SummaryFormattingTests(unittest.TestCase):
    def test_sentence_pluralization(self) -> None:
        summary = Summary(dirs=1, files=2, links=0, fifos=1, sockets=3)
        self.assertEqual(
            summary_sentence(summary),
            "2 files, 1 directory, 0 links, 1 pipe, and 3 sockets",
        )

    def test_singular_only_for_exactly_one(self) -> None:
        summary = Summary(dirs=1, files=1, links=1, fifos=1, sockets=1)
        self.assertEqual(
            summary_sentence(summary),
            "1 file, 1 directory, 1 link, 1 pipe, and 1 socket",
        )

    def test_long_sentence_is_truncated(self) -> None:
        summary = Summary(dirs=123456789, files=123456789, links=123456789, fifos=12, sockets=34)
        sentence = summary_sentence(summary)

        self.assertEqual(len(sentence), SUMMARY_COLUMN_WIDTH)
        self.assertTrue(sentence.endswith("..."))

    def test_summary_row_columns(self) -> None:
        row = format_summary_row(Summary(files=2, size=3000, blocks=16))

        sentence = "2 files, 0 directories, 0 links, 0 pipes, and 0 sockets"
        self.assertEqual(row, sentence.ljust(SUMMARY_COLUMN_WIDTH) + "   " + "3000".rjust(14) + " " + "16".rjust(9))

    def test_root_header_frame(self) -> None:
        self.assertEqual(format_root_header("some/dir"), [HEADER_LINE, SEPARATOR_LINE, "some/dir"])
        self.assertEqual(len(HEADER_LINE), 100)
        self.assertEqual(HEADER_LINE.index("User:Group"), 60)
        self.assertEqual(SEPARATOR_LINE, "-" * 100)

    def test_header_aligns_with_row_separator(self) -> None:
        row = format_entry_row("  ", _entry("a"))
        self.assertEqual(HEADER_LINE.index(":"), row.index(":"))


class GrandTotalTests(unittest.TestCase):
    def test_grand_total_block(self) -> None:
        total = Summary(dirs=1, files=3, links=2, fifos=0, sockets=1, size=4096, blocks=24)

        lines = format_grand_total(2, total)

        self.assertEqual(lines[0], "Analyzed 2 directories:")
        self.assertEqual(lines[1], "  total # of files:        " + "3".rjust(16))
        self.assertEqual(lines[2], "  total # of directories:  " + "1".rjust(16))
        self.assertEqual(lines[6], "  total # of entries:      " + "7".rjust(16))
        self.assertEqual(lines[7], "  total file size:         " + "4096".rjust(16))
        self.assertEqual(lines[8], "  total # of blocks:       " + "24".rjust(16))
        self.assertEqual(len(lines), 9)

    def test_entry_total_matches_listed_type_totals(self) -> None:
        total = Summary(dirs=2, files=3, links=1, fifos=1, sockets=0, others=4, size=10, blocks=2)

        lines = format_grand_total(3, total)

        self.assertEqual(lines[6], "  total # of entries:      " + "7".rjust(16))


if __name__ == "__main__":
    unittest.main()
