"""Error taxonomy for listing failures.

Per-directory failures are raised as ``DirectoryUnreadable`` subclasses and
abort only that path. Per-entry failures never abort a listing: unreadable
status becomes a ``MetadataUnavailable`` value and ``LinkUnreadable`` is
caught by the reader, leaving the link target unset.
"""

from __future__ import annotations

import os


class ListingError(Exception):
    """Base class for listing failures bound to one path."""

    def __init__(self, path: str | os.PathLike[str], message: str, operation: str = "access") -> None:
        super().__init__(message)
        self.path = os.fspath(path)
        self.message = message
        self.operation = operation

    def diagnostic(self) -> str:
        """Return the user-facing stderr line for this failure."""
        return f"Cannot {self.operation} '{self.path}': {self.message}"

    def __str__(self) -> str:
        return self.diagnostic()


class DirectoryUnreadable(ListingError):
    """The directory (or named path) itself could not be opened or read."""


class PathNotFound(DirectoryUnreadable):
    pass


class PermissionDenied(DirectoryUnreadable):
    pass


class NotADirectory(DirectoryUnreadable):
    pass


class LinkUnreadable(ListingError):
    """A symlink's target string could not be read."""


def os_error_text(exc: OSError) -> str:
    """Return the system error text for ``exc`` without the errno prefix."""
    return exc.strerror or str(exc)


def error_from_os(
    path: str | os.PathLike[str],
    exc: OSError,
    operation: str = "access",
) -> DirectoryUnreadable:
    """Map an ``OSError`` raised for ``path`` onto the listing taxonomy."""
    message = os_error_text(exc)
    if isinstance(exc, FileNotFoundError):
        return PathNotFound(path, message, operation)
    if isinstance(exc, PermissionError):
        return PermissionDenied(path, message, operation)
    if isinstance(exc, NotADirectoryError):
        return NotADirectory(path, message, operation)
    return DirectoryUnreadable(path, message, operation)


__all__ = [
    "ListingError",
    "DirectoryUnreadable",
    "PathNotFound",
    "PermissionDenied",
    "NotADirectory",
    "LinkUnreadable",
    "os_error_text",
    "error_from_os",
]
