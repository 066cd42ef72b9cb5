"""Output-device queries: TTY detection and terminal width."""

from __future__ import annotations

import os
import shutil
import sys
from typing import TextIO

DEFAULT_TERMINAL_WIDTH = 80


def stream_is_tty(stream: TextIO | None = None) -> bool:
    """Return whether ``stream`` (default stdout) is attached to a terminal."""
    target = stream if stream is not None else sys.stdout
    try:
        return os.isatty(target.fileno())
    except (AttributeError, OSError, ValueError):
        return False


def detect_terminal_width(stream: TextIO | None = None) -> int | None:
    """Return the column count for ``stream``, or ``None`` off a terminal.

    A terminal that reports no usable size yields ``DEFAULT_TERMINAL_WIDTH``.
    """
    if not stream_is_tty(stream):
        return None
    columns = shutil.get_terminal_size((DEFAULT_TERMINAL_WIDTH, 24)).columns
    return columns if columns > 0 else DEFAULT_TERMINAL_WIDTH


__all__ = ["DEFAULT_TERMINAL_WIDTH", "stream_is_tty", "detect_terminal_width"]
