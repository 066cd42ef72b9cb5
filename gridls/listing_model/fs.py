"""Directory enumeration into listing results."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import error_from_os
from .metadata import entry_for_metadata, metadata_from_stat, resolve_entry
from .types import Entry, ListingResult

logger = logging.getLogger(__name__)

_PSEUDO_ENTRIES = frozenset({".", ".."})


def is_visible_name(name: str, include_hidden: bool) -> bool:
    """Return whether a directory member name should be listed."""
    if name in _PSEUDO_ENTRIES:
        return False
    return include_hidden or not name.startswith(".")


def child_path(directory: str | os.PathLike[str], name: str) -> Path:
    """Join a member name onto its directory; members of ``.`` stay bare."""
    if os.fspath(directory) == ".":
        return Path(name)
    return Path(directory) / name


def read_directory(directory: str | os.PathLike[str], include_hidden: bool = False) -> ListingResult:
    """Enumerate ``directory`` in OS order with per-entry metadata.

    Raises ``DirectoryUnreadable`` when the directory cannot be opened or
    iterated. Entries whose status cannot be read are kept with
    ``MetadataUnavailable`` metadata.
    """
    try:
        scanner = os.scandir(directory)
    except OSError as exc:
        raise error_from_os(directory, exc, "open") from exc

    entries: list[Entry] = []
    with scanner:
        try:
            for member in scanner:
                name = member.name
                if not is_visible_name(name, include_hidden):
                    continue
                entries.append(_entry_for_member(directory, member))
        except OSError as exc:
            raise error_from_os(directory, exc, "read") from exc

    logger.debug("read %d entries from %s", len(entries), os.fspath(directory))
    return ListingResult(entries=tuple(entries))


def _entry_for_member(directory: str | os.PathLike[str], member: os.DirEntry[str]) -> Entry:
    path = child_path(directory, member.name)
    try:
        st = member.stat(follow_symlinks=False)
    except OSError:
        # Retry with lstat; a second failure yields the unavailable sentinel.
        return resolve_entry(member.name, path)
    return entry_for_metadata(member.name, path, metadata_from_stat(st))


def read_path(path: str | os.PathLike[str]) -> Entry:
    """Resolve an explicitly named path into a single entry.

    The entry keeps the path text as its display name. Raises
    ``PathNotFound``/``PermissionDenied`` when the path cannot be stat'ed.
    """
    try:
        st = os.lstat(path)
    except OSError as exc:
        raise error_from_os(path, exc, "access") from exc
    return entry_for_metadata(os.fspath(path), Path(path), metadata_from_stat(st))


__all__ = [
    "is_visible_name",
    "child_path",
    "read_directory",
    "read_path",
]
