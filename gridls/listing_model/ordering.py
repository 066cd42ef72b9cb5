"""Byte-wise name ordering for listing entries."""

from __future__ import annotations

import os
from collections.abc import Iterable

from .types import Entry, ListingResult


def name_sort_key(entry: Entry) -> bytes:
    """Return raw name bytes so ordering matches a C ``strcmp``."""
    return os.fsencode(entry.name)


def sort_entries(entries: Iterable[Entry]) -> list[Entry]:
    """Return entries in strict byte-wise ascending name order."""
    return sorted(entries, key=name_sort_key)


def sorted_listing(listing: ListingResult) -> ListingResult:
    """Return ``listing`` with its entries in name order."""
    return ListingResult(entries=tuple(sort_entries(listing.entries)))


__all__ = ["name_sort_key", "sort_entries", "sorted_listing"]
