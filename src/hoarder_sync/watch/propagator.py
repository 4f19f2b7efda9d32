"""Push local Notes edits upstream between sync passes."""

from __future__ import annotations

import asyncio
import logging

from hoarder_sync.contracts.client import BookmarkClient
from hoarder_sync.contracts.config import HoarderSyncConfig
from hoarder_sync.contracts.exceptions import ProviderError
from hoarder_sync.contracts.storage import DocumentStore
from hoarder_sync.documents import extract_notes, parse_header, set_reference_note
from hoarder_sync.watch.debounce import DebouncedTask

_LOG = logging.getLogger(__name__)


class NotePropagator:
    """React to document modifications by pushing edited notes to Karakeep.

    Each path has two debounced tasks: one that waits for the editor to go
    quiet before pushing, and one that later rewrites ``original_note`` once
    the pushed text is confirmed to still be the current text.
    """

    def __init__(self, client: BookmarkClient, store: DocumentStore, config: HoarderSyncConfig) -> None:
        self._client = client
        self._store = store
        self._config = config
        self._last_pushed: str | None = None
        self._edit_tasks: dict[str, DebouncedTask] = {}
        self._reference_tasks: dict[str, DebouncedTask] = {}

    @property
    def last_pushed(self) -> str | None:
        return self._last_pushed

    def remember_pushed(self, notes: str) -> None:
        """Record *notes* as just pushed so the resulting file change is not pushed again."""
        self._last_pushed = notes

    def notify_modified(self, path: str) -> None:
        if not self._config.sync_notes_to_remote:
            return
        if not path.endswith(".md") or not path.startswith(f"{self._config.sync_folder}/"):
            return
        task = self._edit_tasks.get(path)
        if task is None:
            task = DebouncedTask(self._config.edit_debounce_seconds, self.handle_modification)
            self._edit_tasks[path] = task
        task.schedule(path)

    async def handle_modification(self, path: str) -> None:
        if not await self._store.exists(path):
            return
        content = await self._store.read(path)
        current = extract_notes(content) or ""
        if current == self._last_pushed:
            _LOG.debug("Notes of %s match the last pushed text", path)
            return

        header = parse_header(content)
        if header is None or not header.bookmark_id:
            return

        reference = header.reference_note
        if reference is None:
            if current == (header.note or "").strip():
                return
        elif current == reference:
            return

        try:
            await self._client.update_bookmark_note(header.bookmark_id, current)
        except ProviderError as exc:
            _LOG.warning("Could not push notes of %s to Karakeep: %s", path, exc)
            return

        _LOG.info("Pushed local notes of %s to Karakeep", path)
        self._last_pushed = current
        self.schedule_reference_update(path, current)

    def schedule_reference_update(self, path: str, notes: str) -> None:
        task = self._reference_tasks.get(path)
        if task is None:
            task = DebouncedTask(self._config.reference_note_delay_seconds, self._update_reference)
            self._reference_tasks[path] = task
        task.schedule(path, notes)

    def has_pending_reference_update(self, path: str) -> bool:
        task = self._reference_tasks.get(path)
        return task is not None and task.pending

    async def _update_reference(self, path: str, notes: str) -> None:
        if not await self._store.exists(path):
            return
        content = await self._store.read(path)
        header = parse_header(content)
        if header is None:
            return
        if (extract_notes(content) or "") != notes:
            _LOG.debug("Notes of %s changed again, leaving original_note alone", path)
            return
        if header.reference_note == notes:
            return
        await self._store.write(path, set_reference_note(content, notes))
        _LOG.info("Updated original_note of %s", path)

    async def wait_idle(self) -> None:
        """Wait until every pending edit and reference task has run."""
        for tasks in (self._edit_tasks, self._reference_tasks):
            await asyncio.gather(*(task.wait() for task in tasks.values()))

    def cancel_all(self) -> None:
        for task in [*self._edit_tasks.values(), *self._reference_tasks.values()]:
            task.cancel()
