"""SDK composition root for hoarder-sync."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from functools import partial

from hoarder_sync.auth import TokenResolver, create_token_resolver
from hoarder_sync.contracts.client import BookmarkClient
from hoarder_sync.contracts.config import HoarderSyncConfig
from hoarder_sync.contracts.exceptions import AuthenticationError, MissingCredentialsError, SyncInProgressError
from hoarder_sync.contracts.storage import DocumentStore
from hoarder_sync.contracts.sync import SyncOutcome, SyncReport
from hoarder_sync.engine import SyncEngine, build_sync_message
from hoarder_sync.engine.progress import SyncProgress
from hoarder_sync.persistence import SyncState, load_state, persist_state
from hoarder_sync.providers import create_client
from hoarder_sync.rendering import AssetResolver, MarkdownRenderer
from hoarder_sync.storage import FileSystemDocumentStore
from hoarder_sync.watch import LocalEditPoller, NotePropagator, PeriodicSync

_LOG = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "Hoarder API key not configured"
IN_PROGRESS_MESSAGE = "Sync already in progress"


class HoarderSync:
    """hoarder-sync SDK public API.

    Owns the single-flight guard: at most one pass runs at a time, and a pass
    requested while another is running is rejected rather than queued.
    """

    def __init__(
        self,
        *,
        config: HoarderSyncConfig,
        store: DocumentStore,
        token_resolver: TokenResolver,
        client_factory: Callable[[str], BookmarkClient],
        progress: SyncProgress | None = None,
    ) -> None:
        self._config = config
        self._store = store
        self._token_resolver = token_resolver
        self._client_factory = client_factory
        self._progress = progress
        self._renderer = MarkdownRenderer(include_highlights=config.sync_highlights)
        self._propagator: NotePropagator | None = None
        self._syncing = False

    @classmethod
    def from_config(cls, config: HoarderSyncConfig, *, progress: SyncProgress | None = None) -> HoarderSync:
        return cls(
            config=config,
            store=FileSystemDocumentStore(config.vault_path),
            token_resolver=create_token_resolver(config),
            client_factory=partial(create_client, config),
            progress=progress,
        )

    @property
    def syncing(self) -> bool:
        return self._syncing

    @property
    def propagator(self) -> NotePropagator | None:
        """The local-edit propagator while ``watch`` is running, else ``None``."""
        return self._propagator

    def last_sync(self) -> SyncState:
        return load_state(self._config.state_path)

    async def sync(self) -> SyncReport:
        """Run one pass. Raises ``SyncInProgressError`` if a pass is already running."""
        if self._syncing:
            raise SyncInProgressError(IN_PROGRESS_MESSAGE)
        self._syncing = True
        try:
            token = await self._resolve_token()
            _LOG.info("Starting sync into %s/%s", self._config.vault_path, self._config.sync_folder)
            async with self._client_factory(token) as client:
                report = await self._engine(client).sync()
            persist_state(SyncState(last_sync_timestamp=report.completed_at), self._config.state_path)
            return report
        finally:
            self._syncing = False

    async def sync_now(self) -> SyncOutcome:
        """Manual trigger: run one pass and report it as a ``SyncOutcome``, never raising."""
        try:
            report = await self.sync()
        except SyncInProgressError:
            _LOG.info(IN_PROGRESS_MESSAGE)
            return SyncOutcome(success=False, message=IN_PROGRESS_MESSAGE)
        except MissingCredentialsError:
            _LOG.warning(MISSING_KEY_MESSAGE)
            return SyncOutcome(success=False, message=MISSING_KEY_MESSAGE)
        except Exception as exc:
            _LOG.exception("Sync failed")
            return SyncOutcome(success=False, message=f"Error syncing: {exc}")

        message = build_sync_message(report.stats)
        _LOG.info(message)
        return SyncOutcome(success=True, message=message)

    async def watch(self, *, on_outcome: Callable[[SyncOutcome], None] | None = None) -> None:
        """Sync periodically and push local note edits until cancelled."""
        token = await self._resolve_token()
        config = self._config
        async with self._client_factory(token) as client:
            propagator = NotePropagator(client, self._store, config)
            poller = LocalEditPoller(
                self._store,
                config.sync_folder,
                propagator.notify_modified,
                interval=config.poll_interval_seconds,
            )
            periodic = PeriodicSync(self.sync_now, config.sync_interval_minutes * 60, on_outcome=on_outcome)
            self._propagator = propagator
            try:
                async with asyncio.TaskGroup() as group:
                    group.create_task(periodic.run())
                    group.create_task(poller.run())
            finally:
                propagator.cancel_all()
                self._propagator = None

    async def check_credentials(self) -> None:
        """Raise ``MissingCredentialsError`` when no API key is configured."""
        await self._resolve_token()

    async def _resolve_token(self) -> str:
        try:
            return await self._token_resolver.resolve()
        except AuthenticationError as exc:
            raise MissingCredentialsError(MISSING_KEY_MESSAGE) from exc

    def _engine(self, client: BookmarkClient) -> SyncEngine:
        config = self._config
        assets = AssetResolver(
            client,
            self._store,
            attachments_folder=config.attachments_folder,
            download_assets=config.download_assets,
        )
        return SyncEngine(
            client,
            self._store,
            self._renderer,
            assets,
            config,
            propagator=self._propagator,
            progress=self._progress,
        )
