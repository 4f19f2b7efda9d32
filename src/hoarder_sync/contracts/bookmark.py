"""Remote bookmark contracts.

Payloads arrive from the bookmark API in camelCase; every model also accepts
the snake_case field names so tests and fakes can build them directly.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _RemoteModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TagOrigin(StrEnum):
    AI = "ai"
    HUMAN = "human"


class HighlightColor(StrEnum):
    YELLOW = "yellow"
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class BookmarkTag(_RemoteModel):
    id: str | None = None
    name: str
    attached_by: TagOrigin = TagOrigin.HUMAN


class BookmarkAsset(_RemoteModel):
    id: str
    asset_type: str


class LinkContent(_RemoteModel):
    type: Literal["link"] = "link"
    url: str
    title: str | None = None
    description: str | None = None
    image_url: str | None = None
    image_asset_id: str | None = None
    screenshot_asset_id: str | None = None
    full_page_archive_asset_id: str | None = None
    video_asset_id: str | None = None


class TextContent(_RemoteModel):
    type: Literal["text"] = "text"
    text: str = ""
    source_url: str | None = None


class AssetContent(_RemoteModel):
    type: Literal["asset"] = "asset"
    asset_type: str
    asset_id: str | None = None
    file_name: str | None = None
    source_url: str | None = None


class UnknownContent(_RemoteModel):
    type: Literal["unknown"] = "unknown"


BookmarkContent = Annotated[
    LinkContent | TextContent | AssetContent | UnknownContent,
    Field(discriminator="type"),
]


class Bookmark(_RemoteModel):
    id: str
    created_at: str
    modified_at: str | None = None
    title: str | None = None
    archived: bool = False
    favourited: bool = False
    note: str | None = None
    summary: str | None = None
    tags: list[BookmarkTag] = Field(default_factory=list)
    content: BookmarkContent = Field(default_factory=UnknownContent)
    assets: list[BookmarkAsset] = Field(default_factory=list)

    @property
    def url(self) -> str | None:
        """The resource URL: link target for links, source URL otherwise."""
        if isinstance(self.content, LinkContent):
            return self.content.url
        if isinstance(self.content, TextContent | AssetContent):
            return self.content.source_url
        return None

    @property
    def description(self) -> str | None:
        if isinstance(self.content, LinkContent):
            return self.content.description
        if isinstance(self.content, TextContent):
            return self.content.text
        return None

    def tag_names(self) -> list[str]:
        return [tag.name for tag in self.tags]


class Highlight(_RemoteModel):
    id: str
    bookmark_id: str
    start_offset: int
    end_offset: int
    color: HighlightColor = HighlightColor.YELLOW
    text: str = ""
    note: str | None = None
    created_at: str


class BookmarkPage(_RemoteModel):
    bookmarks: list[Bookmark] = Field(default_factory=list)
    next_cursor: str | None = None


class HighlightPage(_RemoteModel):
    highlights: list[Highlight] = Field(default_factory=list)
    next_cursor: str | None = None
