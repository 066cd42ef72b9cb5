"""Tests for byte-wise name ordering."""

from __future__ import annotations

import unittest
from pathlib import Path

from gridls.listing_model import Entry, ListingResult, MetadataUnavailable, sort_entries, sorted_listing


def _entry(name: str) -> Entry:
    return Entry(name=name, path=Path(name), metadata=MetadataUnavailable(error=""))


class SortEntriesTests(unittest.TestCase):
    def test_orders_by_raw_bytes_not_case_folded(self) -> None:
        names = ["b", "été", "a", "_x", "B"]
        ordered = [entry.name for entry in sort_entries(_entry(name) for name in names)]
        self.assertEqual(ordered, ["B", "_x", "a", "b", "été"])

    def test_resorting_is_idempotent(self) -> None:
        once = sort_entries([_entry(name) for name in ("z", "a.txt", "a", "A")])
        self.assertEqual(sort_entries(once), once)

    def test_sorted_listing_keeps_block_totals(self) -> None:
        listing = ListingResult(entries=(_entry("b"), _entry("a")))
        result = sorted_listing(listing)
        self.assertEqual([entry.name for entry in result.entries], ["a", "b"])
        self.assertEqual(result.total_blocks, listing.total_blocks)


if __name__ == "__main__":
    unittest.main()
