"""Factory for the remote bookmark client."""

from __future__ import annotations

from hoarder_sync.contracts.client import BookmarkClient
from hoarder_sync.contracts.config import HoarderSyncConfig
from hoarder_sync.providers.karakeep.client import KarakeepClient


def create_client(config: HoarderSyncConfig, token: str) -> BookmarkClient:
    """Return an unopened client; enter it with ``async with`` before use."""
    return KarakeepClient(base_url=config.api_endpoint, token=token, max_retries=config.max_retries)
