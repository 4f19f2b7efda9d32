"""Tests for disposition classification and counting."""

from __future__ import annotations

import pytest

from hoarder_sync.contracts.config import DeletionPolicy, DispositionAction
from hoarder_sync.contracts.sync import DispositionInstruction, DispositionReason
from hoarder_sync.engine.disposition import classify_dispositions, count_dispositions


def policy(**overrides: object) -> DeletionPolicy:
    return DeletionPolicy.model_validate(overrides)


class TestClassifyDispositions:
    def test_deleted_and_archived_ids_are_classified(self) -> None:
        instructions = classify_dispositions(
            ["a", "b", "c"],
            {"a"},
            {"c"},
            policy(
                sync_deletions=True,
                deletion_action="relocate",
                handle_archived_bookmarks=True,
                archived_bookmark_action="tag",
            ),
        )

        assert instructions == [
            DispositionInstruction(
                bookmark_id="b", action=DispositionAction.RELOCATE, reason=DispositionReason.DELETED
            ),
            DispositionInstruction(bookmark_id="c", action=DispositionAction.TAG, reason=DispositionReason.ARCHIVED),
        ]

    def test_active_ids_never_produce_instructions(self) -> None:
        instructions = classify_dispositions(
            ["a"],
            {"a"},
            {"a"},
            policy(sync_deletions=True, handle_archived_bookmarks=True),
        )

        assert instructions == []

    def test_nothing_enabled_short_circuits(self) -> None:
        assert classify_dispositions(["a", "b"], set(), {"b"}, policy()) == []

    def test_ignore_action_produces_no_instruction(self) -> None:
        instructions = classify_dispositions(
            ["a", "b"],
            set(),
            {"b"},
            policy(
                sync_deletions=True,
                deletion_action="ignore",
                handle_archived_bookmarks=True,
                archived_bookmark_action="ignore",
            ),
        )

        assert instructions == []

    def test_archived_ids_are_left_alone_when_archive_handling_is_off(self) -> None:
        instructions = classify_dispositions(["a", "b"], set(), {"b"}, policy(sync_deletions=True))

        assert [instruction.bookmark_id for instruction in instructions] == ["a"]

    def test_deleted_ids_are_left_alone_when_deletion_sync_is_off(self) -> None:
        instructions = classify_dispositions(["a", "b"], set(), {"b"}, policy(handle_archived_bookmarks=True))

        assert [instruction.bookmark_id for instruction in instructions] == ["b"]

    def test_input_order_is_kept(self) -> None:
        instructions = classify_dispositions(["z", "m", "a"], set(), set(), policy(sync_deletions=True))

        assert [instruction.bookmark_id for instruction in instructions] == ["z", "m", "a"]

    def test_legacy_archive_action_means_relocate(self) -> None:
        instructions = classify_dispositions(
            ["a"], set(), set(), policy(sync_deletions=True, deletion_action="archive")
        )

        assert instructions[0].action == DispositionAction.RELOCATE


@pytest.mark.parametrize(
    ("action", "reason", "bucket"),
    [
        (DispositionAction.DELETE, DispositionReason.DELETED, "deleted"),
        (DispositionAction.RELOCATE, DispositionReason.DELETED, "archived"),
        (DispositionAction.TAG, DispositionReason.DELETED, "tagged"),
        (DispositionAction.DELETE, DispositionReason.ARCHIVED, "archived_handled"),
        (DispositionAction.RELOCATE, DispositionReason.ARCHIVED, "archived_handled"),
        (DispositionAction.TAG, DispositionReason.ARCHIVED, "archived_handled"),
    ],
)
def test_count_dispositions_buckets(action: DispositionAction, reason: DispositionReason, bucket: str) -> None:
    counts = count_dispositions([DispositionInstruction(bookmark_id="x", action=action, reason=reason)])

    assert getattr(counts, bucket) == 1
    assert counts.deleted + counts.archived + counts.tagged + counts.archived_handled == 1
