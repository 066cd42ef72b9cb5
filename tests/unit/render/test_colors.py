"""Color classification precedence and name styling tests."""

from __future__ import annotations

import unittest
from pathlib import Path

from gridls.listing_model import Entry, EntryMetadata, MetadataUnavailable
from gridls.render.colors import (
    COLOR_ARCHIVE,
    COLOR_DEFAULT,
    COLOR_DIRECTORY,
    COLOR_EXECUTABLE,
    COLOR_SPECIAL,
    COLOR_SYMLINK,
    classify,
    colorize,
    colorize_entry,
)
from gridls.ui_theme import DEFAULT_THEME, PLAIN_THEME


def _entry(name: str, file_type: str = "regular", mode: int = 0o644) -> Entry:
    return Entry(
        name=name,
        path=Path(name),
        metadata=EntryMetadata(
            file_type=file_type,
            mode=mode,
            nlink=1,
            uid=0,
            gid=0,
            size=0,
            mtime=0.0,
            blocks=0,
        ),
    )


class ClassifyTests(unittest.TestCase):
    def test_each_category(self) -> None:
        self.assertEqual(classify(_entry("src", "directory", 0o755)), COLOR_DIRECTORY)
        self.assertEqual(classify(_entry("link", "symlink", 0o777)), COLOR_SYMLINK)
        self.assertEqual(classify(_entry("run.sh", mode=0o744)), COLOR_EXECUTABLE)
        self.assertEqual(classify(_entry("backup.tar")), COLOR_ARCHIVE)
        self.assertEqual(classify(_entry("tty0", "char_device", 0o620)), COLOR_SPECIAL)
        self.assertEqual(classify(_entry("notes.txt")), COLOR_DEFAULT)

    def test_any_execute_bit_counts(self) -> None:
        self.assertEqual(classify(_entry("g", mode=0o654)), COLOR_EXECUTABLE)
        self.assertEqual(classify(_entry("o", mode=0o645)), COLOR_EXECUTABLE)

    def test_precedence_first_match_wins(self) -> None:
        self.assertEqual(classify(_entry("dir.tar.gz", "directory", 0o755)), COLOR_DIRECTORY)
        self.assertEqual(classify(_entry("bundle.zip", mode=0o755)), COLOR_EXECUTABLE)
        self.assertEqual(classify(_entry("fifo.gz", "fifo")), COLOR_ARCHIVE)

    def test_archive_match_is_a_substring_match(self) -> None:
        self.assertEqual(classify(_entry("notes.gzip")), COLOR_ARCHIVE)
        self.assertEqual(classify(_entry("a.tar.bak")), COLOR_ARCHIVE)
        self.assertEqual(classify(_entry("tarball")), COLOR_DEFAULT)

    def test_unavailable_metadata_is_default(self) -> None:
        entry = Entry(name="gone", path=Path("gone"), metadata=MetadataUnavailable(error="x"))
        self.assertEqual(classify(entry), COLOR_DEFAULT)


class ColorizeTests(unittest.TestCase):
    def test_color_resets_immediately_after_name(self) -> None:
        self.assertEqual(colorize("src", COLOR_DIRECTORY, DEFAULT_THEME), "\033[0;34msrc\033[0m")

    def test_default_category_and_plain_theme_leave_name_bare(self) -> None:
        self.assertEqual(colorize("notes.txt", COLOR_DEFAULT, DEFAULT_THEME), "notes.txt")
        self.assertEqual(colorize_entry(_entry("src", "directory"), PLAIN_THEME), "src")
        self.assertEqual(colorize_entry(_entry("src", "directory")), "src")


if __name__ == "__main__":
    unittest.main()
