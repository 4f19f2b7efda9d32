"""Tests for LocalEditPoller."""

from __future__ import annotations

import pytest

from hoarder_sync.watch import LocalEditPoller
from tests.fakes.store import InMemoryDocumentStore


def make_poller(store: InMemoryDocumentStore) -> tuple[LocalEditPoller, list[str]]:
    seen: list[str] = []
    return LocalEditPoller(store, "Hoarder", seen.append, interval=0.01), seen


@pytest.mark.asyncio
async def test_reports_modified_documents() -> None:
    store = InMemoryDocumentStore({"Hoarder/a.md": "a", "Hoarder/b.md": "b"})
    poller, seen = make_poller(store)
    await poller.prime()

    store.touch("Hoarder/b.md", "b edited")
    modified = await poller.poll()

    assert modified == ["Hoarder/b.md"]
    assert seen == ["Hoarder/b.md"]


@pytest.mark.asyncio
async def test_new_documents_are_not_reported() -> None:
    store = InMemoryDocumentStore({"Hoarder/a.md": "a"})
    poller, seen = make_poller(store)
    await poller.prime()

    store.touch("Hoarder/new.md", "created by a sync pass")

    assert await poller.poll() == []
    store.touch("Hoarder/new.md", "then edited")
    assert await poller.poll() == ["Hoarder/new.md"]
    assert seen == ["Hoarder/new.md"]


@pytest.mark.asyncio
async def test_unchanged_documents_are_reported_once_per_change() -> None:
    store = InMemoryDocumentStore({"Hoarder/a.md": "a"})
    poller, _ = make_poller(store)
    await poller.prime()

    store.touch("Hoarder/a.md", "edit")

    assert await poller.poll() == ["Hoarder/a.md"]
    assert await poller.poll() == []


@pytest.mark.asyncio
async def test_missing_folder_yields_nothing() -> None:
    poller, seen = make_poller(InMemoryDocumentStore())
    await poller.prime()

    assert await poller.poll() == []
    assert seen == []


@pytest.mark.asyncio
async def test_non_markdown_files_are_ignored() -> None:
    store = InMemoryDocumentStore({"Hoarder/attachments/img.jpg": "jpg"})
    poller, _ = make_poller(store)
    await poller.prime()

    store.touch("Hoarder/attachments/img.jpg", "new jpg")

    assert await poller.poll() == []
