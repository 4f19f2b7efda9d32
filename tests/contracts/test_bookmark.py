"""Tests for remote bookmark contracts."""

from __future__ import annotations

from hoarder_sync.contracts.bookmark import AssetContent, Bookmark, LinkContent, TextContent, UnknownContent
from tests.fakes.client import make_bookmark


def test_content_variant_is_chosen_by_type() -> None:
    link = make_bookmark("a")
    text = make_bookmark("b", content={"type": "text", "text": "body", "sourceUrl": "https://src"})
    asset = make_bookmark("c", content={"type": "asset", "assetType": "pdf", "assetId": "x"})

    assert isinstance(link.content, LinkContent)
    assert isinstance(text.content, TextContent)
    assert isinstance(asset.content, AssetContent)


def test_missing_content_is_unknown() -> None:
    bookmark = Bookmark.model_validate({"id": "a", "createdAt": "2024-01-15T10:30:00Z"})

    assert isinstance(bookmark.content, UnknownContent)
    assert bookmark.url is None
    assert bookmark.description is None


def test_url_and_description_per_variant() -> None:
    link = make_bookmark(
        "a", content={"type": "link", "url": "https://example.com", "description": "about it"}
    )
    text = make_bookmark("b", content={"type": "text", "text": "body", "sourceUrl": "https://src"})

    assert (link.url, link.description) == ("https://example.com", "about it")
    assert (text.url, text.description) == ("https://src", "body")


def test_snake_case_names_are_accepted() -> None:
    bookmark = Bookmark(id="a", created_at="2024-01-15T10:30:00Z", favourited=True)

    assert bookmark.favourited is True
    assert bookmark.tag_names() == []


def test_tag_names_keep_remote_order() -> None:
    assert make_bookmark("a", tags=["b", "a", "c"]).tag_names() == ["b", "a", "c"]
