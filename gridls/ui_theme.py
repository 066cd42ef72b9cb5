"""Listing color themes and selection helpers.

Themes are plain ANSI palettes keyed by color category. Color classification
itself lives in ``gridls.render.colors``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ListingTheme:
    """Semantic ANSI palette used by listing renderers."""

    name: str
    reset: str
    directory: str
    symlink: str
    executable: str
    archive: str
    special: str
    default: str


DEFAULT_THEME = ListingTheme(
    name="default",
    reset="\033[0m",
    directory="\033[0;34m",
    symlink="\033[1;35m",
    executable="\033[0;32m",
    archive="\033[0;31m",
    special="\033[7m",
    default="",
)

OCEAN_THEME = ListingTheme(
    name="ocean",
    reset="\033[0m",
    directory="\033[1;38;5;45m",
    symlink="\033[38;5;153m",
    executable="\033[38;5;84m",
    archive="\033[38;5;215m",
    special="\033[7;38;5;110m",
    default="",
)

PLAIN_THEME = ListingTheme(
    name="plain",
    reset="",
    directory="",
    symlink="",
    executable="",
    archive="",
    special="",
    default="",
)

_THEMES: dict[str, ListingTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> ListingTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "ListingTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
