"""Tests for the sync summary message."""

from __future__ import annotations

from hoarder_sync.contracts.sync import DispositionCounts, SyncStats
from hoarder_sync.engine import build_sync_message


def test_single_new_bookmark_is_singular() -> None:
    assert build_sync_message(SyncStats(total_bookmarks=1)) == "Successfully synced 1 bookmark"


def test_zero_is_plural() -> None:
    assert build_sync_message(SyncStats()) == "Successfully synced 0 bookmarks"


def test_skipped_and_pushed_clauses() -> None:
    stats = SyncStats(total_bookmarks=2, skipped_files=1, updated_in_remote=1)

    assert build_sync_message(stats) == (
        "Successfully synced 2 bookmarks (skipped 1 existing file) and updated 1 note in Karakeep"
    )


def test_included_clause_requires_include_list() -> None:
    assert build_sync_message(SyncStats(included_by_tags=3)) == "Successfully synced 0 bookmarks"
    assert build_sync_message(SyncStats(included_by_tags=3, included_tags_enabled=True)) == (
        "Successfully synced 0 bookmarks, included 3 bookmarks by tags"
    )


def test_all_clauses_in_fixed_order() -> None:
    stats = SyncStats(
        total_bookmarks=5,
        skipped_files=2,
        updated_in_remote=1,
        excluded_by_tags=3,
        included_by_tags=4,
        included_tags_enabled=True,
        skipped_no_highlights=1,
        dispositions=DispositionCounts(deleted=1, archived=2, tagged=0, archived_handled=1),
    )

    assert build_sync_message(stats) == (
        "Successfully synced 5 bookmarks (skipped 2 existing files) and updated 1 note in Karakeep, "
        "excluded 3 bookmarks by tags, included 4 bookmarks by tags, "
        "skipped 1 bookmark without highlights, "
        "processed 3 deleted bookmarks (1 deleted) (2 archived), "
        "handled 1 archived bookmark"
    )


def test_tagged_deletions_clause() -> None:
    stats = SyncStats(dispositions=DispositionCounts(tagged=1))

    assert build_sync_message(stats) == "Successfully synced 0 bookmarks, processed 1 deleted bookmark (1 tagged)"
