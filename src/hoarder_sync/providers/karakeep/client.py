"""Karakeep (formerly Hoarder) REST API client."""

from __future__ import annotations

import logging
import re
from types import TracebackType
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from hoarder_sync.contracts.bookmark import BookmarkPage, HighlightPage
from hoarder_sync.contracts.client import BookmarkClient
from hoarder_sync.contracts.exceptions import AuthenticationError, ProviderError
from hoarder_sync.providers.karakeep._retrying_transport import RetryingTransport

_LOG = logging.getLogger(__name__)

_API_SUFFIX_RE = re.compile(r"/api/v1/?$")

ModelT = TypeVar("ModelT", bound=BaseModel)


class KarakeepClient(BookmarkClient):
    """Async client for the ``/api/v1`` endpoints used by the sync pass.

    Use as an async context manager; the underlying ``httpx.AsyncClient`` is
    opened on enter and closed on exit.
    """

    def __init__(
        self,
        *,
        base_url: str,
        token: str,
        max_retries: int = 3,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._max_retries = max_retries
        self._timeout = timeout
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    async def __aenter__(self) -> KarakeepClient:
        self._http = httpx.AsyncClient(
            transport=RetryingTransport(transport=self._transport, max_retries=self._max_retries),
            headers={"Authorization": f"Bearer {self._token}"},
            timeout=httpx.Timeout(self._timeout),
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def list_bookmarks(
        self,
        *,
        archived: bool | None = None,
        favourited: bool | None = None,
        cursor: str | None = None,
        limit: int = 100,
    ) -> BookmarkPage:
        params = _query(limit=limit, cursor=cursor, archived=archived, favourited=favourited)
        response = await self._request("GET", "/bookmarks", params=params)
        return _parse(BookmarkPage, response)

    async def update_bookmark_note(self, bookmark_id: str, note: str) -> None:
        await self._request("PATCH", f"/bookmarks/{bookmark_id}", json={"note": note})

    async def list_highlights(self, *, cursor: str | None = None, limit: int = 100) -> HighlightPage:
        response = await self._request("GET", "/highlights", params=_query(limit=limit, cursor=cursor))
        return _parse(HighlightPage, response)

    async def download_asset(self, asset_id: str) -> bytes:
        response = await self._request("GET", f"/assets/{asset_id}")
        return response.content

    def asset_url(self, asset_id: str) -> str:
        return f"{_API_SUFFIX_RE.sub('', self._base_url)}/assets/{asset_id}"

    def bookmark_url(self, bookmark_id: str) -> str:
        return f"{self._base_url.replace('/api/v1', '/dashboard/preview', 1)}/{bookmark_id}"

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        if self._http is None:
            raise ProviderError("Karakeep client is not open; use it as an async context manager")

        url = f"{self._base_url}{path}"
        try:
            response = await self._http.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise ProviderError(f"{method} {url} failed: {exc}") from exc

        if response.status_code >= 400:
            message = f"HTTP {response.status_code}: {response.text or 'Unknown error'}"
            if response.status_code in {401, 403}:
                raise AuthenticationError(message)
            raise ProviderError(message)
        _LOG.debug("%s %s -> %d", method, url, response.status_code)
        return response


def _query(**params: Any) -> dict[str, str | int]:
    query: dict[str, str | int] = {}
    for key, value in params.items():
        if value is None:
            continue
        query[key] = str(value).lower() if isinstance(value, bool) else value
    return query


def _parse(model: type[ModelT], response: httpx.Response) -> ModelT:
    try:
        return model.model_validate(response.json())
    except (ValueError, ValidationError) as exc:
        raise ProviderError(f"Unexpected response from {response.request.url}: {exc}") from exc
