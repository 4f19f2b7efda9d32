"""Resolve bookmark assets into body embeds and header links."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from hoarder_sync.contracts.bookmark import AssetContent, Bookmark, LinkContent
from hoarder_sync.contracts.client import BookmarkClient
from hoarder_sync.contracts.exceptions import ProviderError, StorageError
from hoarder_sync.contracts.storage import DocumentStore
from hoarder_sync.filenames import MAX_ASSET_TITLE_LENGTH, slugify_title
from hoarder_sync.rendering.escaping import escape_markdown_path

_LOG = logging.getLogger(__name__)

_IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "gif", "webp"})


class AssetEmbeds(BaseModel):
    """Asset output for one bookmark: Markdown embeds plus header link fields."""

    body: str = ""
    image: str | None = None
    banner: str | None = None
    screenshot: str | None = None
    full_page_archive: str | None = None
    video: str | None = None
    additional: list[str] = Field(default_factory=list)

    def header_fields(self) -> list[tuple[str, str]]:
        fields = [
            ("image", self.image),
            ("banner", self.banner),
            ("screenshot", self.screenshot),
            ("full_page_archive", self.full_page_archive),
            ("video", self.video),
        ]
        return [(key, value) for key, value in fields if value]


class AssetResolver:
    def __init__(
        self,
        client: BookmarkClient,
        store: DocumentStore,
        *,
        attachments_folder: str,
        download_assets: bool,
    ) -> None:
        self._client = client
        self._store = store
        self._attachments_folder = attachments_folder
        self._download_assets = download_assets

    async def resolve(self, bookmark: Bookmark, title: str) -> AssetEmbeds:
        embeds = AssetEmbeds()
        chunks: list[str] = []
        handled_ids: set[str] = set()
        content = bookmark.content

        if isinstance(content, AssetContent) and content.asset_type == "image":
            if content.asset_id:
                handled_ids.add(content.asset_id)
                target = await self._image_target(content.asset_id, title)
                if target is not None:
                    chunks.append(f"\n![{title}]({escape_markdown_path(target)})\n")
                    embeds.image = self._header_link(target)
            elif content.source_url:
                chunks.append(f"\n![{title}]({escape_markdown_path(content.source_url)})\n")
                embeds.image = content.source_url
        elif isinstance(content, AssetContent) and content.asset_id:
            handled_ids.add(content.asset_id)
        elif isinstance(content, LinkContent):
            labelled = [
                ("banner", "Banner Image", content.image_asset_id),
                ("screenshot", "Screenshot", content.screenshot_asset_id),
                ("full_page_archive", "Full Page Archive", content.full_page_archive_asset_id),
                ("video", "Video", content.video_asset_id),
            ]
            for field, label, asset_id in labelled:
                if not asset_id:
                    continue
                handled_ids.add(asset_id)
                if field == "video":
                    url = self._client.asset_url(asset_id)
                    chunks.append(f"\n[{title} - {label}]({escape_markdown_path(url)})\n")
                    embeds.video = url
                    continue
                target = await self._image_target(asset_id, f"{title}-{label}")
                if target is None:
                    continue
                chunks.append(f"\n![{title} - {label}]({escape_markdown_path(target)})\n")
                setattr(embeds, field, self._header_link(target))

            if not handled_ids and content.image_url:
                chunks.append(f"\n![{title}]({escape_markdown_path(content.image_url)})\n")
                embeds.image = content.image_url

        for asset in bookmark.assets:
            if asset.id in handled_ids:
                continue
            handled_ids.add(asset.id)
            label = "Additional Image" if asset.asset_type == "image" else asset.asset_type
            if asset.asset_type == "video":
                url = self._client.asset_url(asset.id)
                chunks.append(f"\n[{title} - {label}]({escape_markdown_path(url)})\n")
                embeds.additional.append(url)
                continue
            target = await self._image_target(asset.id, f"{title}-{label}")
            if target is None:
                continue
            chunks.append(f"\n![{title} - {label}]({escape_markdown_path(target)})\n")
            embeds.additional.append(self._header_link(target))

        embeds.body = "".join(chunks)
        return embeds

    async def _image_target(self, asset_id: str, title: str) -> str | None:
        """Local path of the downloaded asset, or its remote URL when downloads are off."""
        url = self._client.asset_url(asset_id)
        if not self._download_assets:
            return url
        return await self._download(url, asset_id, title)

    async def _download(self, url: str, asset_id: str, title: str) -> str | None:
        folder = self._attachments_folder
        try:
            if not await self._store.exists(folder):
                await self._store.create_folder(folder)

            for existing in await self._store.list_files(folder):
                if existing.startswith(f"{folder}/{asset_id}"):
                    return existing

            extension = url.rsplit(".", 1)[-1].lower() if "." in url else ""
            if extension not in _IMAGE_EXTENSIONS:
                extension = "jpg"
            short_title = slugify_title(title, MAX_ASSET_TITLE_LENGTH)
            file_name = f"{asset_id}-{short_title}.{extension}" if short_title else f"{asset_id}.{extension}"
            path = f"{folder}/{file_name}"

            data = await self._client.download_asset(asset_id)
            await self._store.write_binary(path, data)
            _LOG.debug("Downloaded asset %s to %s", asset_id, path)
            return path
        except (ProviderError, StorageError) as exc:
            _LOG.warning("Could not download asset %s (%s): %s", asset_id, url, exc)
            return None

    def _header_link(self, target: str) -> str:
        if self._download_assets:
            return f"[[{target}]]"
        return target
