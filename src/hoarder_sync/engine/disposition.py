"""Classification of local documents whose bookmark left the active set."""

from __future__ import annotations

from collections.abc import Iterable, Set

from hoarder_sync.contracts.config import DeletionPolicy, DispositionAction
from hoarder_sync.contracts.sync import DispositionCounts, DispositionInstruction, DispositionReason


def classify_dispositions(
    local_ids: Iterable[str],
    active_ids: Set[str],
    archived_ids: Set[str],
    policy: DeletionPolicy,
) -> list[DispositionInstruction]:
    """Return one instruction per local id that needs handling, in input order.

    Ids still active remotely never produce an instruction, whatever their
    archived-set membership.
    """
    if not policy.sync_deletions and not policy.handle_archived_bookmarks:
        return []

    instructions: list[DispositionInstruction] = []
    for bookmark_id in local_ids:
        if bookmark_id in active_ids:
            continue
        if bookmark_id not in archived_ids:
            if policy.sync_deletions and policy.deletion_action != DispositionAction.IGNORE:
                instructions.append(
                    DispositionInstruction(
                        bookmark_id=bookmark_id,
                        action=policy.deletion_action,
                        reason=DispositionReason.DELETED,
                    )
                )
        elif policy.handle_archived_bookmarks and policy.archived_bookmark_action != DispositionAction.IGNORE:
            instructions.append(
                DispositionInstruction(
                    bookmark_id=bookmark_id,
                    action=policy.archived_bookmark_action,
                    reason=DispositionReason.ARCHIVED,
                )
            )
    return instructions


def count_dispositions(instructions: Iterable[DispositionInstruction]) -> DispositionCounts:
    counts = DispositionCounts()
    for instruction in instructions:
        if instruction.reason == DispositionReason.ARCHIVED:
            counts.archived_handled += 1
        elif instruction.action == DispositionAction.DELETE:
            counts.deleted += 1
        elif instruction.action == DispositionAction.RELOCATE:
            counts.archived += 1
        elif instruction.action == DispositionAction.TAG:
            counts.tagged += 1
    return counts
