"""Shared test fixtures for hoarder-sync tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from hoarder_sync.contracts.config import HoarderSyncConfig
from tests.fakes.client import FakeBookmarkClient
from tests.fakes.config import make_config
from tests.fakes.store import InMemoryDocumentStore


@pytest.fixture
def config() -> HoarderSyncConfig:
    return make_config()


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def client() -> FakeBookmarkClient:
    return FakeBookmarkClient()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "hoarder-sync.json"
    path.write_text('{"vault_path": "vault", "auth": "token", "token": "secret"}', encoding="utf-8")
    return path
