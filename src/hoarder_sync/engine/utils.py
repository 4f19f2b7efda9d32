"""Pagination helpers over the bookmark client."""

from __future__ import annotations

from collections import defaultdict

from hoarder_sync.contracts.bookmark import Bookmark, Highlight
from hoarder_sync.contracts.client import BookmarkClient


async def fetch_all_bookmarks(
    client: BookmarkClient,
    *,
    archived: bool | None = None,
    favourited: bool | None = None,
    page_size: int = 100,
) -> list[Bookmark]:
    bookmarks: list[Bookmark] = []
    cursor: str | None = None
    while True:
        page = await client.list_bookmarks(archived=archived, favourited=favourited, cursor=cursor, limit=page_size)
        bookmarks.extend(page.bookmarks)
        cursor = page.next_cursor
        if not cursor:
            return bookmarks


async def fetch_all_highlights(client: BookmarkClient, *, page_size: int = 100) -> list[Highlight]:
    highlights: list[Highlight] = []
    cursor: str | None = None
    while True:
        page = await client.list_highlights(cursor=cursor, limit=page_size)
        highlights.extend(page.highlights)
        cursor = page.next_cursor
        if not cursor:
            return highlights


def group_highlights(highlights: list[Highlight]) -> dict[str, list[Highlight]]:
    grouped: dict[str, list[Highlight]] = defaultdict(list)
    for highlight in highlights:
        grouped[highlight.bookmark_id].append(highlight)
    return dict(grouped)
