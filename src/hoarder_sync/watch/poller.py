"""Detect modified documents by polling modification times."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from hoarder_sync.contracts.exceptions import StorageError
from hoarder_sync.contracts.storage import DocumentStore

_LOG = logging.getLogger(__name__)


class LocalEditPoller:
    """Forward paths whose modification time changed to *on_modified*.

    Newly appearing documents are recorded but not reported; only changes to
    documents seen on an earlier poll count as modifications.
    """

    def __init__(
        self,
        store: DocumentStore,
        folder: str,
        on_modified: Callable[[str], None],
        *,
        interval: float = 1.0,
    ) -> None:
        self._store = store
        self._folder = folder
        self._on_modified = on_modified
        self._interval = interval
        self._seen: dict[str, float] = {}

    async def _snapshot(self) -> dict[str, float]:
        snapshot: dict[str, float] = {}
        if not await self._store.exists(self._folder):
            return snapshot
        for path in await self._store.list_documents(self._folder):
            try:
                snapshot[path] = await self._store.modified_time(path)
            except StorageError:
                _LOG.debug("Document %s vanished while polling", path)
        return snapshot

    async def prime(self) -> None:
        self._seen = await self._snapshot()

    async def poll(self) -> list[str]:
        snapshot = await self._snapshot()
        modified = [
            path for path, mtime in snapshot.items() if path in self._seen and self._seen[path] != mtime
        ]
        self._seen = snapshot
        for path in modified:
            _LOG.debug("Detected modification of %s", path)
            self._on_modified(path)
        return modified

    async def run(self) -> None:
        await self.prime()
        while True:
            await asyncio.sleep(self._interval)
            await self.poll()
