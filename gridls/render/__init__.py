"""Listing renderers: long table, name layouts, and color classification."""

from __future__ import annotations

from .colors import classify, colorize, colorize_entry
from .grid import (
    grid_cells,
    grid_dimensions,
    render_across,
    render_grid,
    render_horizontal,
    render_single_column,
)
from .long_format import format_mtime, permission_string, render_long_entry, render_long_listing

__all__ = [
    "classify",
    "colorize",
    "colorize_entry",
    "grid_cells",
    "grid_dimensions",
    "render_grid",
    "render_horizontal",
    "render_across",
    "render_single_column",
    "format_mtime",
    "permission_string",
    "render_long_listing",
    "render_long_entry",
]
