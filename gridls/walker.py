"""Listing orchestration: roots, layouts, recursion, and exit status.

Each root argument is stat'ed without following links. Non-directories are
printed as a one-entry listing; directories are read, sorted, and rendered in
the configured layout, then (with recursion) their real subdirectories are
listed depth-first in name order. Symlinks to directories are never entered.

Per-path failures are reported on stderr and processing continues; the final
status is non-zero when any path, including one found while recursing, failed.
"""

from __future__ import annotations

import logging
import os
import sys
import time
from dataclasses import dataclass, replace
from typing import TextIO

from .listing_model import (
    DirectoryUnreadable,
    Entry,
    ListingResult,
    read_directory,
    read_path,
    sorted_listing,
)
from .render import (
    colorize_entry,
    render_across,
    render_grid,
    render_long_entry,
    render_long_listing,
    render_single_column,
)
from .terminal import DEFAULT_TERMINAL_WIDTH, detect_terminal_width, stream_is_tty
from .ui_theme import ListingTheme, resolve_theme

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 2


@dataclass(frozen=True)
class ListingConfig:
    """Pre-parsed listing options."""

    long: bool = False
    horizontal: bool = False
    recursive: bool = False
    include_hidden: bool = False
    paths: tuple[str, ...] = ()
    one_per_line: bool = False
    force_columns: bool = False
    color: str = "auto"
    theme: str | None = None
    width: int | None = None


def color_enabled(mode: str, stream: TextIO) -> bool:
    """Resolve ``auto``/``always``/``never`` against the output stream."""
    if mode == "always":
        return True
    if mode == "never":
        return False
    return stream_is_tty(stream)


@dataclass(frozen=True)
class _PendingDirectory:
    path: str
    show_header: bool
    blank_before: bool


class ListingWalker:
    """Run one listing invocation over a set of root paths."""

    def __init__(self, config: ListingConfig, stdout: TextIO, stderr: TextIO) -> None:
        self.config = config
        self.stdout = stdout
        self.stderr = stderr
        self.theme: ListingTheme = resolve_theme(
            config.theme,
            no_color=not color_enabled(config.color, stdout),
        )
        self.terminal_width = self._resolve_terminal_width()
        self.now = time.time()
        self.failed = False

    def _resolve_terminal_width(self) -> int | None:
        if self.config.width is not None:
            return self.config.width
        width = detect_terminal_width(self.stdout)
        if width is None and self.config.force_columns:
            return DEFAULT_TERMINAL_WIDTH
        return width

    def _write(self, line: str = "") -> None:
        self.stdout.write(line + "\n")

    def _report(self, error: DirectoryUnreadable) -> None:
        self.failed = True
        self.stderr.write(error.diagnostic() + "\n")

    def run(self) -> int:
        """List every root and return the process exit status."""
        roots = list(self.config.paths) or ["."]
        show_headers = len(roots) > 1 or self.config.recursive
        previous_was_directory: bool | None = None
        for root in roots:
            try:
                entry = read_path(root)
            except DirectoryUnreadable as exc:
                self._report(exc)
                continue

            if previous_was_directory is not None and (entry.is_dir or previous_was_directory):
                self._write()
            if entry.is_dir:
                self._list_tree(root, show_headers)
            else:
                self._write(self._render_single(entry))
            previous_was_directory = entry.is_dir
        return EXIT_FAILURE if self.failed else EXIT_OK

    def _render_single(self, entry: Entry) -> str:
        if self.config.long:
            return render_long_entry(entry, now=self.now, theme=self.theme)
        return colorize_entry(entry, self.theme)

    def _list_tree(self, root: str, show_header: bool) -> None:
        stack = [_PendingDirectory(root, show_header, blank_before=False)]
        while stack:
            pending = stack.pop()
            if pending.blank_before:
                self._write()
            subdirectories = self._list_directory(pending.path, pending.show_header)
            stack.extend(
                _PendingDirectory(os.fspath(child.path), show_header=True, blank_before=True)
                for child in reversed(subdirectories)
            )

    def _list_directory(self, directory: str, show_header: bool) -> list[Entry]:
        """Render one directory; return its subdirectories when recursing."""
        try:
            listing = sorted_listing(read_directory(directory, self.config.include_hidden))
        except DirectoryUnreadable as exc:
            self._report(exc)
            return []

        if show_header:
            self._write(f"{directory}:")
        for line in self.render_listing(listing):
            self._write(line)

        if not self.config.recursive:
            return []
        subdirectories = [entry for entry in listing.entries if entry.is_dir]
        skipped = sum(1 for entry in listing.entries if entry.is_symlink)
        if skipped:
            logger.debug("not following %d symlink(s) in %s", skipped, directory)
        return subdirectories

    def render_listing(self, listing: ListingResult) -> list[str]:
        """Render a sorted directory listing in the configured layout."""
        entries = listing.entries
        if self.config.long:
            return render_long_listing(entries, now=self.now, theme=self.theme)
        width = self.terminal_width
        if self.config.one_per_line or width is None:
            return render_single_column(entries, theme=self.theme)
        if self.config.horizontal:
            return render_across(entries, width, theme=self.theme)
        return render_grid(entries, width, theme=self.theme)


def walk(
    paths: list[str] | tuple[str, ...],
    config: ListingConfig | None = None,
    *,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """List ``paths`` according to ``config`` and return the exit status."""
    base = config or ListingConfig()
    if tuple(paths) != base.paths:
        base = replace(base, paths=tuple(paths))
    walker = ListingWalker(
        base,
        stdout=stdout if stdout is not None else sys.stdout,
        stderr=stderr if stderr is not None else sys.stderr,
    )
    return walker.run()


__all__ = [
    "EXIT_OK",
    "EXIT_FAILURE",
    "ListingConfig",
    "ListingWalker",
    "color_enabled",
    "walk",
]
