"""Core reconciliation pass."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Set
from datetime import UTC, datetime

from hoarder_sync.contracts.bookmark import Bookmark, Highlight
from hoarder_sync.contracts.client import BookmarkClient
from hoarder_sync.contracts.config import DispositionAction, HoarderSyncConfig
from hoarder_sync.contracts.exceptions import ProviderError, StorageError
from hoarder_sync.contracts.storage import DocumentStore
from hoarder_sync.contracts.sync import (
    DispositionCounts,
    DispositionInstruction,
    DispositionReason,
    SyncReport,
    SyncStats,
)
from hoarder_sync.documents import add_tag, extract_notes, parse_header, read_header
from hoarder_sync.engine.disposition import classify_dispositions, count_dispositions
from hoarder_sync.engine.progress import NullSyncProgress, SyncPhase, SyncProgress
from hoarder_sync.engine.utils import fetch_all_bookmarks, fetch_all_highlights, group_highlights
from hoarder_sync.filenames import build_filename
from hoarder_sync.rendering import AssetResolver, MarkdownRenderer
from hoarder_sync.tags import FilterReason, evaluate_tag_filter
from hoarder_sync.titles import resolve_title
from hoarder_sync.watch.propagator import NotePropagator

_LOG = logging.getLogger(__name__)


class SyncEngine:
    """Run one reconciliation pass between the remote collection and the vault.

    The pass is linear: discover local documents, fetch the remote id sets,
    create or update one document per listed bookmark, then apply the
    deletion and archival dispositions. Anything escaping the per-item scopes
    aborts the pass; documents written before the failure stay written.
    """

    def __init__(
        self,
        client: BookmarkClient,
        store: DocumentStore,
        renderer: MarkdownRenderer,
        assets: AssetResolver,
        config: HoarderSyncConfig,
        *,
        propagator: NotePropagator | None = None,
        progress: SyncProgress | None = None,
    ) -> None:
        self._client = client
        self._store = store
        self._renderer = renderer
        self._assets = assets
        self._config = config
        self._propagator = propagator
        self._progress: SyncProgress = progress or NullSyncProgress()

    async def sync(self) -> SyncReport:
        config = self._config
        stats = SyncStats(included_tags_enabled=bool(config.included_tags))

        if not await self._store.exists(config.sync_folder):
            await self._store.create_folder(config.sync_folder)

        local_files = await self._discover()
        active_ids, archived_ids, highlights = await self._fetch()
        await self._reconcile(local_files, highlights, stats)
        stats.dispositions = await self._apply_dispositions(local_files, active_ids, archived_ids)

        return SyncReport(stats=stats, completed_at=datetime.now(UTC))

    async def _discover(self) -> dict[str, str]:
        self._progress.phase_start(SyncPhase.DISCOVER)
        try:
            local_files: dict[str, str] = {}
            for path in await self._store.list_documents(self._config.sync_folder):
                try:
                    header = await read_header(self._store, path)
                except StorageError as exc:
                    _LOG.warning("Skipping unreadable document %s: %s", path, exc)
                    continue
                if header is None or not header.bookmark_id:
                    continue
                local_files[header.bookmark_id] = path
                self._progress.item_done(SyncPhase.DISCOVER)
            _LOG.debug("Found %d synced documents under %s", len(local_files), self._config.sync_folder)
            self._progress.phase_done(SyncPhase.DISCOVER)
            return local_files
        except BaseException as exc:
            self._progress.phase_error(SyncPhase.DISCOVER, exc)
            raise

    async def _fetch(self) -> tuple[set[str], set[str], dict[str, list[Highlight]]]:
        config = self._config
        self._progress.phase_start(SyncPhase.FETCH)
        try:
            active = await fetch_all_bookmarks(self._client, archived=False, page_size=config.page_size)
            everything = await fetch_all_bookmarks(self._client, archived=None, page_size=config.page_size)
            active_ids = {bookmark.id for bookmark in active}
            archived_ids = {
                bookmark.id for bookmark in everything if bookmark.archived and bookmark.id not in active_ids
            }

            highlights: dict[str, list[Highlight]] = {}
            if config.sync_highlights or config.only_bookmarks_with_highlights:
                try:
                    highlights = group_highlights(await fetch_all_highlights(self._client))
                except ProviderError as exc:
                    _LOG.warning("Could not fetch highlights, continuing without them: %s", exc)

            self._progress.phase_done(SyncPhase.FETCH)
            return active_ids, archived_ids, highlights
        except BaseException as exc:
            self._progress.phase_error(SyncPhase.FETCH, exc)
            raise

    async def _reconcile(
        self,
        local_files: Mapping[str, str],
        highlights: Mapping[str, list[Highlight]],
        stats: SyncStats,
    ) -> None:
        config = self._config
        self._progress.phase_start(SyncPhase.RECONCILE)
        try:
            cursor: str | None = None
            while True:
                page = await self._client.list_bookmarks(
                    archived=False if config.exclude_archived else None,
                    favourited=True if config.only_favorites else None,
                    cursor=cursor,
                    limit=config.page_size,
                )
                for bookmark in page.bookmarks:
                    await self._reconcile_bookmark(bookmark, local_files, highlights, stats)
                    self._progress.item_done(SyncPhase.RECONCILE)
                cursor = page.next_cursor
                if not cursor:
                    break
            self._progress.phase_done(SyncPhase.RECONCILE)
        except BaseException as exc:
            self._progress.phase_error(SyncPhase.RECONCILE, exc)
            raise

    async def _reconcile_bookmark(
        self,
        bookmark: Bookmark,
        local_files: Mapping[str, str],
        highlights: Mapping[str, list[Highlight]],
        stats: SyncStats,
    ) -> None:
        config = self._config
        if config.only_bookmarks_with_highlights and bookmark.id not in highlights:
            stats.skipped_no_highlights += 1
            return

        included = [tag.lower() for tag in config.included_tags]
        verdict = evaluate_tag_filter(
            {name.lower() for name in bookmark.tag_names()},
            included,
            [tag.lower() for tag in config.excluded_tags],
            is_favorite=bookmark.favourited,
        )
        if included and verdict.reason != FilterReason.MISSING_INCLUDED_TAG:
            stats.included_by_tags += 1
        if not verdict.include:
            _LOG.debug("Skipping bookmark %s: %s", bookmark.id, verdict.reason)
            stats.excluded_by_tags += 1
            return

        title = resolve_title(bookmark)
        path = f"{config.sync_folder}/{build_filename(title, bookmark.created_at)}.md"
        bookmark_highlights = highlights.get(bookmark.id, [])

        existing_path = local_files.get(bookmark.id)
        if existing_path is None and await self._store.exists(path):
            existing_path = path

        if existing_path is None:
            await self._store.create(path, await self._render(bookmark, title, bookmark_highlights))
            _LOG.debug("Created %s for bookmark %s", path, bookmark.id)
            stats.total_bookmarks += 1
            return

        if not config.update_existing_files:
            stats.skipped_files += 1
            return

        existing = await self._store.read(existing_path)
        if config.sync_notes_to_remote:
            pushed = await self._push_local_note(bookmark, existing_path, existing, stats)
            if pushed is None:
                stats.skipped_files += 1
                return
            bookmark = pushed

        content = await self._render(bookmark, title, bookmark_highlights)
        if content == existing:
            stats.skipped_files += 1
            return
        await self._store.write(existing_path, content)
        _LOG.debug("Updated %s for bookmark %s", existing_path, bookmark.id)
        stats.total_bookmarks += 1

    async def _push_local_note(
        self, bookmark: Bookmark, path: str, existing: str, stats: SyncStats
    ) -> Bookmark | None:
        """Push an edited Notes section upstream and return the bookmark carrying it.

        The push happens before the re-render so the re-rendered reference note
        equals the pushed text and the next pass sees no difference. Returns
        ``None`` when the push failed; the document is then left as it is so
        the local edit survives until a later pass.
        """
        current = extract_notes(existing)
        if current is None:
            return bookmark

        header = parse_header(existing)
        reference = header.reference_note if header is not None else None
        remote = (bookmark.note or "").strip()

        if reference is None:
            if current == remote:
                return bookmark
        elif current == reference or current == remote:
            return bookmark

        try:
            await self._client.update_bookmark_note(bookmark.id, current)
        except ProviderError as exc:
            _LOG.warning("Could not push notes of %s to Karakeep: %s", path, exc)
            return None

        _LOG.info("Pushed local notes of %s to Karakeep", path)
        stats.updated_in_remote += 1
        if self._propagator is not None:
            self._propagator.remember_pushed(current)
            if reference is None:
                self._propagator.schedule_reference_update(path, current)
        return bookmark.model_copy(update={"note": current})

    async def _render(self, bookmark: Bookmark, title: str, highlights: list[Highlight]) -> str:
        assets = await self._assets.resolve(bookmark, title)
        return self._renderer.render(
            bookmark,
            title,
            view_url=self._client.bookmark_url(bookmark.id),
            highlights=highlights,
            assets=assets,
        )

    async def _apply_dispositions(
        self,
        local_files: Mapping[str, str],
        active_ids: Set[str],
        archived_ids: Set[str],
    ) -> DispositionCounts:
        instructions = classify_dispositions(local_files, active_ids, archived_ids, self._config.deletion_policy)
        self._progress.phase_start(SyncPhase.DISPOSITIONS, total=len(instructions))
        try:
            executed: list[DispositionInstruction] = []
            for instruction in instructions:
                path = local_files[instruction.bookmark_id]
                try:
                    if await self._execute(instruction, path):
                        executed.append(instruction)
                except StorageError as exc:
                    _LOG.error(
                        "Could not handle %s bookmark %s at %s: %s",
                        instruction.reason,
                        instruction.bookmark_id,
                        path,
                        exc,
                    )
                self._progress.item_done(SyncPhase.DISPOSITIONS)
            self._progress.phase_done(SyncPhase.DISPOSITIONS)
            return count_dispositions(executed)
        except BaseException as exc:
            self._progress.phase_error(SyncPhase.DISPOSITIONS, exc)
            raise

    async def _execute(self, instruction: DispositionInstruction, path: str) -> bool:
        """Apply one instruction; return whether the document was changed."""
        if not await self._store.exists(path):
            return False

        config = self._config
        if instruction.reason == DispositionReason.DELETED:
            folder, tag = config.archive_folder, config.deletion_tag
        else:
            folder, tag = config.archived_bookmark_folder, config.archived_bookmark_tag

        if instruction.action == DispositionAction.DELETE:
            await self._store.delete(path)
            _LOG.info("Deleted %s (%s bookmark %s)", path, instruction.reason, instruction.bookmark_id)
            return True
        if instruction.action == DispositionAction.RELOCATE:
            return await self._relocate(path, folder)
        if instruction.action == DispositionAction.TAG:
            updated = add_tag(await self._store.read(path), tag)
            if updated is None:
                return False
            await self._store.write(path, updated)
            _LOG.info("Tagged %s with %s", path, tag)
            return True
        return False

    async def _relocate(self, path: str, folder: str) -> bool:
        if path.startswith(f"{folder}/"):
            return False
        if not await self._store.exists(folder):
            await self._store.create_folder(folder)

        name = path.rsplit("/", 1)[-1]
        stem = name.removesuffix(".md")
        target = f"{folder}/{name}"
        counter = 1
        while await self._store.exists(target):
            target = f"{folder}/{stem}-{counter}.md"
            counter += 1

        await self._store.rename(path, target)
        _LOG.info("Moved %s to %s", path, target)
        return True
