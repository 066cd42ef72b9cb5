"""Per-path status resolution built on link-unaware ``lstat``.

Also owns identity lookups (uid/gid to names) used by the long format.
"""

from __future__ import annotations

import grp
import logging
import os
import pwd
import stat
from functools import lru_cache
from pathlib import Path

from .errors import LinkUnreadable, os_error_text
from .types import (
    FILE_TYPE_BLOCK_DEVICE,
    FILE_TYPE_CHAR_DEVICE,
    FILE_TYPE_DIRECTORY,
    FILE_TYPE_FIFO,
    FILE_TYPE_REGULAR,
    FILE_TYPE_SOCKET,
    FILE_TYPE_SYMLINK,
    FILE_TYPE_UNKNOWN,
    Entry,
    EntryMetadata,
    MetadataUnavailable,
)

logger = logging.getLogger(__name__)

_TYPE_CHECKS = (
    (stat.S_ISDIR, FILE_TYPE_DIRECTORY),
    (stat.S_ISLNK, FILE_TYPE_SYMLINK),
    (stat.S_ISREG, FILE_TYPE_REGULAR),
    (stat.S_ISCHR, FILE_TYPE_CHAR_DEVICE),
    (stat.S_ISBLK, FILE_TYPE_BLOCK_DEVICE),
    (stat.S_ISFIFO, FILE_TYPE_FIFO),
    (stat.S_ISSOCK, FILE_TYPE_SOCKET),
)


def file_type_from_mode(mode: int) -> str:
    """Return the file-type name encoded in ``st_mode``."""
    for check, file_type in _TYPE_CHECKS:
        if check(mode):
            return file_type
    return FILE_TYPE_UNKNOWN


def metadata_from_stat(st: os.stat_result) -> EntryMetadata:
    """Snapshot the fields the listing needs from a stat result."""
    return EntryMetadata(
        file_type=file_type_from_mode(st.st_mode),
        mode=stat.S_IMODE(st.st_mode),
        nlink=int(st.st_nlink),
        uid=int(st.st_uid),
        gid=int(st.st_gid),
        size=int(st.st_size),
        mtime=float(st.st_mtime),
        blocks=int(getattr(st, "st_blocks", 0)),
    )


def resolve_metadata(path: str | os.PathLike[str]) -> EntryMetadata | MetadataUnavailable:
    """Return link-unaware metadata for ``path`` or the unavailable sentinel."""
    try:
        st = os.lstat(path)
    except OSError as exc:
        logger.debug("metadata unavailable for %s: %s", os.fspath(path), exc)
        return MetadataUnavailable(error=os_error_text(exc))
    return metadata_from_stat(st)


def read_link_target(path: str | os.PathLike[str]) -> str:
    """Return the raw, unresolved target of the symlink at ``path``."""
    try:
        return os.readlink(path)
    except OSError as exc:
        raise LinkUnreadable(path, os_error_text(exc), "read link") from exc


def entry_for_metadata(
    name: str,
    path: Path,
    metadata: EntryMetadata | MetadataUnavailable,
) -> Entry:
    """Build an entry, attaching the link target when ``metadata`` is a symlink.

    An unreadable link target leaves ``link_target`` unset.
    """
    link_target: str | None = None
    if metadata.file_type == FILE_TYPE_SYMLINK:
        try:
            link_target = read_link_target(path)
        except LinkUnreadable as exc:
            logger.debug("%s", exc)
    return Entry(name=name, path=path, metadata=metadata, link_target=link_target)


def resolve_entry(name: str, path: str | os.PathLike[str]) -> Entry:
    """Resolve ``path`` into an entry displayed as ``name``."""
    entry_path = Path(path)
    return entry_for_metadata(name, entry_path, resolve_metadata(entry_path))


@lru_cache(maxsize=256)
def owner_name(uid: int) -> str:
    """Return the user name for ``uid``, or the decimal id when unknown."""
    try:
        return pwd.getpwuid(uid).pw_name
    except (KeyError, OverflowError):
        return str(uid)


@lru_cache(maxsize=256)
def group_name(gid: int) -> str:
    """Return the group name for ``gid``, or the decimal id when unknown."""
    try:
        return grp.getgrgid(gid).gr_name
    except (KeyError, OverflowError):
        return str(gid)


__all__ = [
    "file_type_from_mode",
    "metadata_from_stat",
    "resolve_metadata",
    "read_link_target",
    "entry_for_metadata",
    "resolve_entry",
    "owner_name",
    "group_name",
]
