"""Domain datatypes for one listing pass: entries, metadata, and results."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

FILE_TYPE_REGULAR = "regular"
FILE_TYPE_DIRECTORY = "directory"
FILE_TYPE_SYMLINK = "symlink"
FILE_TYPE_CHAR_DEVICE = "char_device"
FILE_TYPE_BLOCK_DEVICE = "block_device"
FILE_TYPE_FIFO = "fifo"
FILE_TYPE_SOCKET = "socket"
FILE_TYPE_UNKNOWN = "unknown"

SPECIAL_FILE_TYPES = frozenset(
    {FILE_TYPE_CHAR_DEVICE, FILE_TYPE_BLOCK_DEVICE, FILE_TYPE_FIFO, FILE_TYPE_SOCKET}
)


@dataclass(frozen=True)
class EntryMetadata:
    """Link-unaware status snapshot captured when the entry was read."""

    file_type: str
    mode: int
    nlink: int
    uid: int
    gid: int
    size: int
    mtime: float
    blocks: int


@dataclass(frozen=True)
class MetadataUnavailable:
    """Sentinel metadata for an entry whose status could not be read.

    Field defaults mirror a zeroed status so renderers can treat both variants
    uniformly; ``error`` keeps the OS error text.
    """

    error: str
    file_type: str = FILE_TYPE_UNKNOWN
    mode: int = 0
    nlink: int = 0
    uid: int = 0
    gid: int = 0
    size: int = 0
    mtime: float = 0.0
    blocks: int = 0


@dataclass(frozen=True)
class Entry:
    """One listed filesystem object."""

    name: str
    path: Path
    metadata: EntryMetadata | MetadataUnavailable
    link_target: str | None = None

    @property
    def is_dir(self) -> bool:
        return self.metadata.file_type == FILE_TYPE_DIRECTORY

    @property
    def is_symlink(self) -> bool:
        return self.metadata.file_type == FILE_TYPE_SYMLINK

    @property
    def metadata_available(self) -> bool:
        return isinstance(self.metadata, EntryMetadata)


@dataclass(frozen=True)
class ListingResult:
    """Entries of one directory (or one synthetic path) plus block totals."""

    entries: tuple[Entry, ...] = ()

    @property
    def total_blocks(self) -> int:
        """Sum of allocated 512-byte blocks over all entries."""
        return sum(entry.metadata.blocks for entry in self.entries)

    @property
    def total_kib(self) -> int:
        """Allocated size in 1024-byte units, as shown by the ``total`` line."""
        return self.total_blocks // 2

    def __len__(self) -> int:
        return len(self.entries)


__all__ = [
    "FILE_TYPE_REGULAR",
    "FILE_TYPE_DIRECTORY",
    "FILE_TYPE_SYMLINK",
    "FILE_TYPE_CHAR_DEVICE",
    "FILE_TYPE_BLOCK_DEVICE",
    "FILE_TYPE_FIFO",
    "FILE_TYPE_SOCKET",
    "FILE_TYPE_UNKNOWN",
    "SPECIAL_FILE_TYPES",
    "EntryMetadata",
    "MetadataUnavailable",
    "Entry",
    "ListingResult",
]
