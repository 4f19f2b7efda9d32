"""Tests for asset resolution."""

from __future__ import annotations

import pytest

from hoarder_sync.rendering import AssetEmbeds, AssetResolver
from tests.fakes.client import BASE_URL, FakeBookmarkClient, make_bookmark
from tests.fakes.store import InMemoryDocumentStore

ATTACHMENTS = "Hoarder/attachments"


def make_resolver(
    client: FakeBookmarkClient,
    store: InMemoryDocumentStore,
    *,
    download_assets: bool = True,
) -> AssetResolver:
    return AssetResolver(client, store, attachments_folder=ATTACHMENTS, download_assets=download_assets)


def link_with(**asset_ids: str) -> dict[str, str]:
    return {"type": "link", "url": "https://example.com/my-article.html", **asset_ids}


@pytest.mark.asyncio
async def test_banner_is_downloaded_and_linked() -> None:
    client = FakeBookmarkClient(assets={"img1": b"jpeg-bytes"})
    store = InMemoryDocumentStore()
    bookmark = make_bookmark("b1", content=link_with(imageAssetId="img1"))

    embeds = await make_resolver(client, store).resolve(bookmark, "my article")

    path = f"{ATTACHMENTS}/img1-my-article-Banner-Image.jpg"
    assert store.files[path] == b"jpeg-bytes"
    assert embeds.banner == f"[[{path}]]"
    assert embeds.body == f"\n![my article - Banner Image]({path})\n"
    assert ATTACHMENTS in store.folders


@pytest.mark.asyncio
async def test_existing_attachment_is_reused_without_download() -> None:
    client = FakeBookmarkClient(assets={"img1": b"new"})
    store = InMemoryDocumentStore({f"{ATTACHMENTS}/img1-old-name.png": b"old"})
    bookmark = make_bookmark("b1", content=link_with(imageAssetId="img1"))

    embeds = await make_resolver(client, store).resolve(bookmark, "my article")

    assert client.downloads == []
    assert embeds.banner == f"[[{ATTACHMENTS}/img1-old-name.png]]"


@pytest.mark.asyncio
async def test_failed_download_omits_the_embed() -> None:
    client = FakeBookmarkClient()
    store = InMemoryDocumentStore()
    bookmark = make_bookmark("b1", content=link_with(imageAssetId="missing", screenshotAssetId="shot"))
    client.assets["shot"] = b"png"

    embeds = await make_resolver(client, store).resolve(bookmark, "t")

    assert embeds.banner is None
    assert embeds.screenshot == f"[[{ATTACHMENTS}/shot-t-Screenshot.jpg]]"
    assert "Banner Image" not in embeds.body


@pytest.mark.asyncio
async def test_remote_urls_when_downloads_are_disabled() -> None:
    client = FakeBookmarkClient()
    store = InMemoryDocumentStore()
    bookmark = make_bookmark("b1", content=link_with(imageAssetId="img1"))

    embeds = await make_resolver(client, store, download_assets=False).resolve(bookmark, "t")

    assert client.downloads == []
    assert store.files == {}
    assert embeds.banner == f"{BASE_URL}/assets/img1"
    assert embeds.body == f"\n![t - Banner Image]({BASE_URL}/assets/img1)\n"


@pytest.mark.asyncio
async def test_video_is_linked_never_downloaded() -> None:
    client = FakeBookmarkClient(assets={"vid": b"mp4"})
    store = InMemoryDocumentStore()
    bookmark = make_bookmark("b1", content=link_with(videoAssetId="vid"))

    embeds = await make_resolver(client, store).resolve(bookmark, "t")

    assert client.downloads == []
    assert embeds.video == f"{BASE_URL}/assets/vid"
    assert embeds.body == f"\n[t - Video]({BASE_URL}/assets/vid)\n"


@pytest.mark.asyncio
async def test_external_image_url_used_when_no_asset_ids() -> None:
    client = FakeBookmarkClient()
    bookmark = make_bookmark("b1", content=link_with(imageUrl="https://cdn.example.com/og.png"))

    embeds = await make_resolver(client, InMemoryDocumentStore()).resolve(bookmark, "t")

    assert embeds.image == "https://cdn.example.com/og.png"
    assert embeds.body == "\n![t](https://cdn.example.com/og.png)\n"


@pytest.mark.asyncio
async def test_image_asset_bookmark_embeds_its_image() -> None:
    client = FakeBookmarkClient(assets={"a1": b"gif"})
    store = InMemoryDocumentStore()
    bookmark = make_bookmark("b1", content={"type": "asset", "assetType": "image", "assetId": "a1"})

    embeds = await make_resolver(client, store).resolve(bookmark, "photo")

    assert embeds.image == f"[[{ATTACHMENTS}/a1-photo.jpg]]"
    assert embeds.body == f"\n![photo]({ATTACHMENTS}/a1-photo.jpg)\n"


@pytest.mark.asyncio
async def test_additional_assets_skip_already_handled_ids() -> None:
    client = FakeBookmarkClient(assets={"img1": b"a", "extra": b"b"})
    store = InMemoryDocumentStore()
    bookmark = make_bookmark(
        "b1",
        content=link_with(imageAssetId="img1"),
        assets=[("img1", "bannerImage"), ("extra", "image"), ("clip", "video")],
    )

    embeds = await make_resolver(client, store).resolve(bookmark, "t")

    assert client.downloads == ["img1", "extra"]
    assert embeds.additional == [
        f"[[{ATTACHMENTS}/extra-t-Additional-Image.jpg]]",
        f"{BASE_URL}/assets/clip",
    ]
    assert f"\n[t - video]({BASE_URL}/assets/clip)\n" in embeds.body


def test_header_fields_skip_missing_links() -> None:
    embeds = AssetEmbeds(banner="[[a.jpg]]", video="https://v")

    assert embeds.header_fields() == [("banner", "[[a.jpg]]"), ("video", "https://v")]
