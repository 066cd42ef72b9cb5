"""Persistent JSON config helpers.

Stores listing preferences: hidden-file visibility, default layout, color mode,
and theme. All access is defensive: malformed or missing config falls back
safely to defaults, and command-line flags always win over stored values.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "gridls"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

LAYOUT_CHOICES = ("grid", "across", "long")
COLOR_CHOICES = ("auto", "always", "never")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so a read-only config dir never breaks a
    listing.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _load_choice(key: str, choices: tuple[str, ...], default: str) -> str:
    value = load_config().get(key)
    if isinstance(value, str) and value.strip().lower() in choices:
        return value.strip().lower()
    return default


def load_show_hidden() -> bool:
    """Return persisted hidden-file visibility preference.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    value = load_config().get("show_hidden")
    return bool(value) if isinstance(value, bool) else False


def load_layout() -> str:
    """Return the stored default layout (``grid``, ``across`` or ``long``)."""
    return _load_choice("layout", LAYOUT_CHOICES, "grid")


def load_color_mode() -> str:
    """Return the stored color mode (``auto``, ``always`` or ``never``)."""
    return _load_choice("color", COLOR_CHOICES, "auto")


def load_theme_name() -> str | None:
    """Return the stored theme name, or ``None`` when unset or not a string."""
    value = load_config().get("theme")
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "LAYOUT_CHOICES",
    "COLOR_CHOICES",
    "load_config",
    "save_config",
    "load_show_hidden",
    "load_layout",
    "load_color_mode",
    "load_theme_name",
]
