"""Long-format (``-l``) table rendering.

Each row reads ``perms nlink owner group size mtime name[ -> target]``. The
numeric columns are right-aligned and the owner/group columns left-aligned,
each padded to the widest value among the rendered entries. A ``total`` line
with the allocated size in 1024-byte units precedes the rows of a directory.
"""

from __future__ import annotations

import stat
import time
from collections.abc import Sequence
from dataclasses import dataclass

from ..listing_model.metadata import group_name, owner_name
from ..listing_model.types import (
    FILE_TYPE_BLOCK_DEVICE,
    FILE_TYPE_CHAR_DEVICE,
    FILE_TYPE_DIRECTORY,
    FILE_TYPE_FIFO,
    FILE_TYPE_REGULAR,
    FILE_TYPE_SOCKET,
    FILE_TYPE_SYMLINK,
    Entry,
)
from ..ui_theme import ListingTheme
from .colors import colorize_entry

RECENT_WINDOW_SECONDS = 15_552_000
FUTURE_SLACK_SECONDS = 60
UNAVAILABLE_FIELD = "?"
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_TYPE_GLYPHS = {
    FILE_TYPE_REGULAR: "-",
    FILE_TYPE_DIRECTORY: "d",
    FILE_TYPE_SYMLINK: "l",
    FILE_TYPE_CHAR_DEVICE: "c",
    FILE_TYPE_BLOCK_DEVICE: "b",
    FILE_TYPE_FIFO: "p",
    FILE_TYPE_SOCKET: "s",
}

_PERMISSION_TRIPLETS = (
    (stat.S_IRUSR, stat.S_IWUSR, stat.S_IXUSR, stat.S_ISUID, "s"),
    (stat.S_IRGRP, stat.S_IWGRP, stat.S_IXGRP, stat.S_ISGID, "s"),
    (stat.S_IROTH, stat.S_IWOTH, stat.S_IXOTH, stat.S_ISVTX, "t"),
)


def type_glyph(file_type: str) -> str:
    """Return the one-character type marker for ``file_type``."""
    return _TYPE_GLYPHS.get(file_type, "?")


def _execute_slot(mode: int, exec_bit: int, special_bit: int, special_glyph: str) -> str:
    has_exec = bool(mode & exec_bit)
    if mode & special_bit:
        return special_glyph if has_exec else special_glyph.upper()
    return "x" if has_exec else "-"


def permission_string(mode: int, file_type: str) -> str:
    """Return the 10-character ``ls -l`` mode string.

    setuid and setgid replace the owner and group execute slots with ``s``
    (``S`` when the execute bit is clear); sticky does the same with ``t``/``T``
    on the other execute slot.
    """
    chars = [type_glyph(file_type)]
    for read_bit, write_bit, exec_bit, special_bit, special_glyph in _PERMISSION_TRIPLETS:
        chars.append("r" if mode & read_bit else "-")
        chars.append("w" if mode & write_bit else "-")
        chars.append(_execute_slot(mode, exec_bit, special_bit, special_glyph))
    return "".join(chars)


def is_recent(mtime: float, now: float) -> bool:
    """Return whether ``mtime`` falls in the window that shows time of day."""
    age = now - mtime
    return -FUTURE_SLACK_SECONDS <= age <= RECENT_WINDOW_SECONDS


def format_mtime(mtime: float, now: float | None = None) -> str:
    """Format a modification time as ``Mon DD HH:MM`` or ``Mon DD  YYYY``.

    Timestamps older than about six months, or more than a minute in the
    future, show the year instead of the time of day.
    """
    if now is None:
        now = time.time()
    local = time.localtime(mtime)
    month = MONTH_ABBREVIATIONS[local.tm_mon - 1]
    if is_recent(mtime, now):
        return f"{month} {local.tm_mday:02d} {local.tm_hour:02d}:{local.tm_min:02d}"
    return f"{month} {local.tm_mday:02d}  {local.tm_year:4d}"


@dataclass(frozen=True)
class LongRow:
    """Formatted fields of one long-format row, before alignment."""

    permissions: str
    nlink: str
    owner: str
    group: str
    size: str
    mtime: str
    name: str
    link_target: str | None = None


@dataclass(frozen=True)
class LongColumnWidths:
    nlink: int = 0
    owner: int = 0
    group: int = 0
    size: int = 0


def long_row(entry: Entry, now: float, theme: ListingTheme | None = None) -> LongRow:
    """Collect display fields for ``entry``."""
    name = colorize_entry(entry, theme)
    meta = entry.metadata
    if not entry.metadata_available:
        return LongRow(
            permissions=UNAVAILABLE_FIELD * 10,
            nlink=UNAVAILABLE_FIELD,
            owner=UNAVAILABLE_FIELD,
            group=UNAVAILABLE_FIELD,
            size=UNAVAILABLE_FIELD,
            mtime=UNAVAILABLE_FIELD.rjust(12),
            name=name,
        )
    return LongRow(
        permissions=permission_string(meta.mode, meta.file_type),
        nlink=str(meta.nlink),
        owner=owner_name(meta.uid),
        group=group_name(meta.gid),
        size=str(meta.size),
        mtime=format_mtime(meta.mtime, now),
        name=name,
        link_target=entry.link_target,
    )


def column_widths(rows: Sequence[LongRow]) -> LongColumnWidths:
    """Return the widest value of each aligned column over ``rows``."""
    if not rows:
        return LongColumnWidths()
    return LongColumnWidths(
        nlink=max(len(row.nlink) for row in rows),
        owner=max(len(row.owner) for row in rows),
        group=max(len(row.group) for row in rows),
        size=max(len(row.size) for row in rows),
    )


def format_long_row(row: LongRow, widths: LongColumnWidths) -> str:
    """Render ``row`` with column alignment from ``widths``."""
    line = (
        f"{row.permissions} "
        f"{row.nlink:>{widths.nlink}} "
        f"{row.owner:<{widths.owner}} "
        f"{row.group:<{widths.group}} "
        f"{row.size:>{widths.size}} "
        f"{row.mtime} "
        f"{row.name}"
    )
    if row.link_target is not None:
        line += f" -> {row.link_target}"
    return line


def total_line(entries: Sequence[Entry]) -> str:
    """Return the ``total`` header: 512-byte blocks halved to 1024-byte units."""
    return f"total {sum(entry.metadata.blocks for entry in entries) // 2}"


def render_long_listing(
    entries: Sequence[Entry],
    *,
    now: float | None = None,
    theme: ListingTheme | None = None,
    show_total: bool = True,
) -> list[str]:
    """Render sorted ``entries`` as an aligned long-format table."""
    if now is None:
        now = time.time()
    rows = [long_row(entry, now, theme) for entry in entries]
    widths = column_widths(rows)
    lines = [total_line(entries)] if show_total else []
    lines.extend(format_long_row(row, widths) for row in rows)
    return lines


def render_long_entry(entry: Entry, *, now: float | None = None, theme: ListingTheme | None = None) -> str:
    """Render one explicitly named path as a single long-format line."""
    return render_long_listing([entry], now=now, theme=theme, show_total=False)[0]


__all__ = [
    "RECENT_WINDOW_SECONDS",
    "FUTURE_SLACK_SECONDS",
    "LongRow",
    "LongColumnWidths",
    "type_glyph",
    "permission_string",
    "is_recent",
    "format_mtime",
    "long_row",
    "column_widths",
    "format_long_row",
    "total_line",
    "render_long_listing",
    "render_long_entry",
]
