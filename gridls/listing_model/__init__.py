"""Domain model for one directory listing pass.

This package contains the non-rendering listing primitives:
- entry/metadata datatypes with an explicit unavailable-metadata variant
- link-unaware status resolution and identity lookups
- directory enumeration with hidden-name filtering
- byte-wise name ordering
"""

from __future__ import annotations

from .errors import (
    DirectoryUnreadable,
    LinkUnreadable,
    ListingError,
    NotADirectory,
    PathNotFound,
    PermissionDenied,
    error_from_os,
)
from .fs import child_path, is_visible_name, read_directory, read_path
from .metadata import (
    file_type_from_mode,
    group_name,
    owner_name,
    read_link_target,
    resolve_entry,
    resolve_metadata,
)
from .ordering import sort_entries, sorted_listing
from .types import Entry, EntryMetadata, ListingResult, MetadataUnavailable

__all__ = [
    "Entry",
    "EntryMetadata",
    "MetadataUnavailable",
    "ListingResult",
    "ListingError",
    "DirectoryUnreadable",
    "PathNotFound",
    "PermissionDenied",
    "NotADirectory",
    "LinkUnreadable",
    "error_from_os",
    "file_type_from_mode",
    "resolve_metadata",
    "read_link_target",
    "resolve_entry",
    "owner_name",
    "group_name",
    "is_visible_name",
    "child_path",
    "read_directory",
    "read_path",
    "sort_entries",
    "sorted_listing",
]
