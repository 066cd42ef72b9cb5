"""Name-only layouts: down-then-across grid, across wrap, and one per line.

Widths are measured on plain names; colorized names are padded by visible
width so escape sequences never shift the columns.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from ..ansi import display_width, pad_ansi
from ..listing_model.types import Entry
from ..ui_theme import ListingTheme
from .colors import colorize_entry

COLUMN_GAP = 2


def column_width(names: Sequence[str]) -> int:
    """Return the fixed cell width: the longest name plus the column gap."""
    if not names:
        return COLUMN_GAP
    return max(display_width(name) for name in names) + COLUMN_GAP


def grid_dimensions(count: int, terminal_width: int, col_width: int) -> tuple[int, int]:
    """Return ``(rows, cols)`` for ``count`` cells of ``col_width`` columns."""
    if count <= 0:
        return 0, 0
    cols = max(1, min(count, terminal_width // max(1, col_width)))
    rows = math.ceil(count / cols)
    return rows, cols


def grid_cells(count: int, terminal_width: int, col_width: int) -> list[list[int]]:
    """Map entry indexes onto grid rows, filling each column top to bottom.

    Row ``r`` holds index ``c * rows + r`` for every column ``c`` where that
    index is below ``count``; blank cells are omitted.
    """
    rows, cols = grid_dimensions(count, terminal_width, col_width)
    layout: list[list[int]] = []
    for row in range(rows):
        cells = [col * rows + row for col in range(cols)]
        layout.append([index for index in cells if index < count])
    return layout


def _join_cells(cells: Sequence[str], col_width: int) -> str:
    """Pad every cell but the last to ``col_width``."""
    if not cells:
        return ""
    padded = [pad_ansi(cell, col_width) for cell in cells[:-1]]
    padded.append(cells[-1])
    return "".join(padded)


def render_grid(
    entries: Sequence[Entry],
    terminal_width: int,
    *,
    theme: ListingTheme | None = None,
) -> list[str]:
    """Render sorted ``entries`` down-then-across within ``terminal_width``."""
    if not entries:
        return []
    col_width = column_width([entry.name for entry in entries])
    styled = [colorize_entry(entry, theme) for entry in entries]
    return [
        _join_cells([styled[index] for index in row], col_width)
        for row in grid_cells(len(entries), terminal_width, col_width)
    ]


def render_horizontal(names: Sequence[str], max_len: int, terminal_width: int) -> list[str]:
    """Lay ``names`` out left to right in ``max_len + 2`` wide cells.

    A new line starts whenever the next cell would push the running width
    past ``terminal_width``. A line always holds at least one name.
    """
    col_width = max_len + COLUMN_GAP
    lines: list[str] = []
    current: list[str] = []
    used = 0
    for name in names:
        if current and used + col_width > terminal_width:
            lines.append(_join_cells(current, col_width))
            current = []
            used = 0
        current.append(name)
        used += col_width
    if current:
        lines.append(_join_cells(current, col_width))
    return lines


def render_across(
    entries: Sequence[Entry],
    terminal_width: int,
    *,
    theme: ListingTheme | None = None,
) -> list[str]:
    """Render sorted ``entries`` with the horizontal running-width wrap."""
    if not entries:
        return []
    max_len = max(display_width(entry.name) for entry in entries)
    styled = [colorize_entry(entry, theme) for entry in entries]
    return render_horizontal(styled, max_len, terminal_width)


def render_single_column(entries: Sequence[Entry], *, theme: ListingTheme | None = None) -> list[str]:
    """Render one name per line with no padding."""
    return [colorize_entry(entry, theme) for entry in entries]


__all__ = [
    "COLUMN_GAP",
    "column_width",
    "grid_dimensions",
    "grid_cells",
    "render_grid",
    "render_horizontal",
    "render_across",
    "render_single_column",
]
