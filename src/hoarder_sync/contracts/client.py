"""Remote bookmark API adapter contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from hoarder_sync.contracts.bookmark import BookmarkPage, HighlightPage


class BookmarkClient(ABC):
    @abstractmethod
    async def __aenter__(self) -> BookmarkClient: ...  # pragma: no cover

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...  # pragma: no cover

    @abstractmethod
    async def list_bookmarks(
        self,
        *,
        archived: bool | None = None,
        favourited: bool | None = None,
        cursor: str | None = None,
        limit: int = 100,
    ) -> BookmarkPage: ...  # pragma: no cover

    @abstractmethod
    async def update_bookmark_note(self, bookmark_id: str, note: str) -> None: ...  # pragma: no cover

    @abstractmethod
    async def list_highlights(
        self, *, cursor: str | None = None, limit: int = 100
    ) -> HighlightPage: ...  # pragma: no cover

    @abstractmethod
    async def download_asset(self, asset_id: str) -> bytes: ...  # pragma: no cover

    @abstractmethod
    def asset_url(self, asset_id: str) -> str: ...  # pragma: no cover

    @abstractmethod
    def bookmark_url(self, bookmark_id: str) -> str: ...  # pragma: no cover
