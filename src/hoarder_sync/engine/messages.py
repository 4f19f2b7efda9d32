"""Human-readable summary of a sync pass."""

from __future__ import annotations

from hoarder_sync.contracts.sync import SyncStats


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def build_sync_message(stats: SyncStats) -> str:
    """Assemble the summary clauses in their fixed order.

    Only the created/updated clause is always present; every other clause is
    added when its counter is non-zero.
    """
    message = f"Successfully synced {_plural(stats.total_bookmarks, 'bookmark')}"

    if stats.skipped_files > 0:
        message += f" (skipped {_plural(stats.skipped_files, 'existing file')})"
    if stats.updated_in_remote > 0:
        message += f" and updated {_plural(stats.updated_in_remote, 'note')} in Karakeep"
    if stats.excluded_by_tags > 0:
        message += f", excluded {_plural(stats.excluded_by_tags, 'bookmark')} by tags"
    if stats.included_by_tags > 0 and stats.included_tags_enabled:
        message += f", included {_plural(stats.included_by_tags, 'bookmark')} by tags"
    if stats.skipped_no_highlights > 0:
        message += f", skipped {_plural(stats.skipped_no_highlights, 'bookmark')} without highlights"

    dispositions = stats.dispositions
    if dispositions.total_deleted > 0:
        message += f", processed {_plural(dispositions.total_deleted, 'deleted bookmark')}"
        if dispositions.deleted > 0:
            message += f" ({dispositions.deleted} deleted)"
        if dispositions.archived > 0:
            message += f" ({dispositions.archived} archived)"
        if dispositions.tagged > 0:
            message += f" ({dispositions.tagged} tagged)"
    if dispositions.archived_handled > 0:
        message += f", handled {_plural(dispositions.archived_handled, 'archived bookmark')}"

    return message
