"""ANSI-aware display-width measurement for listing cells.

Column layouts pad names by visible width, so escape sequences must not count
and wide characters must count twice.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return visible column width of ``text`` ignoring escape sequences."""
    return sum(char_display_width(ch) for ch in strip_ansi(text))


def pad_ansi(text: str, width: int) -> str:
    """Left-align styled ``text`` in ``width`` visible columns."""
    missing = width - display_width(text)
    if missing <= 0:
        return text
    return text + " " * missing


__all__ = [
    "ANSI_ESCAPE_RE",
    "strip_ansi",
    "char_display_width",
    "display_width",
    "pad_ansi",
]
