"""Entry color classification and ANSI name styling."""

from __future__ import annotations

import stat

from ..listing_model.types import (
    FILE_TYPE_DIRECTORY,
    FILE_TYPE_SYMLINK,
    SPECIAL_FILE_TYPES,
    Entry,
)
from ..ui_theme import PLAIN_THEME, ListingTheme

COLOR_DIRECTORY = "directory"
COLOR_SYMLINK = "symlink"
COLOR_EXECUTABLE = "executable"
COLOR_ARCHIVE = "archive"
COLOR_SPECIAL = "special"
COLOR_DEFAULT = "default"

COLOR_CATEGORIES = (
    COLOR_DIRECTORY,
    COLOR_SYMLINK,
    COLOR_EXECUTABLE,
    COLOR_ARCHIVE,
    COLOR_SPECIAL,
    COLOR_DEFAULT,
)

# Substring match, so "notes.gzip" and "a.tar.bak" count as archives too.
ARCHIVE_MARKERS = (".tar", ".gz", ".zip")
ANY_EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def classify(entry: Entry) -> str:
    """Return the color category for ``entry``; first matching rule wins."""
    file_type = entry.metadata.file_type
    if file_type == FILE_TYPE_DIRECTORY:
        return COLOR_DIRECTORY
    if file_type == FILE_TYPE_SYMLINK:
        return COLOR_SYMLINK
    if entry.metadata.mode & ANY_EXECUTE_BITS:
        return COLOR_EXECUTABLE
    if any(marker in entry.name for marker in ARCHIVE_MARKERS):
        return COLOR_ARCHIVE
    if file_type in SPECIAL_FILE_TYPES:
        return COLOR_SPECIAL
    return COLOR_DEFAULT


def color_for(category: str, theme: ListingTheme) -> str:
    """Return the theme's ANSI sequence for ``category``."""
    if category not in COLOR_CATEGORIES:
        return theme.default
    return getattr(theme, category)


def colorize(name: str, category: str, theme: ListingTheme | None = None) -> str:
    """Wrap ``name`` in its category color followed by an immediate reset."""
    active_theme = theme or PLAIN_THEME
    color = color_for(category, active_theme)
    if not color:
        return name
    return f"{color}{name}{active_theme.reset}"


def colorize_entry(entry: Entry, theme: ListingTheme | None = None) -> str:
    """Return the display name of ``entry`` styled for its category."""
    return colorize(entry.name, classify(entry), theme)


__all__ = [
    "COLOR_DIRECTORY",
    "COLOR_SYMLINK",
    "COLOR_EXECUTABLE",
    "COLOR_ARCHIVE",
    "COLOR_SPECIAL",
    "COLOR_DEFAULT",
    "COLOR_CATEGORIES",
    "ARCHIVE_MARKERS",
    "classify",
    "color_for",
    "colorize",
    "colorize_entry",
]
