"""httpx async transport wrapper that retries transient failures."""

from __future__ import annotations

import asyncio
import logging
import random

import httpx

_LOG = logging.getLogger(__name__)

_RETRYABLE_STATUS_CODES = frozenset({429, 502, 503, 504})
_MAX_BACKOFF_SECONDS = 8.0


class RetryingTransport(httpx.AsyncBaseTransport):
    """Retry transport errors and 429/502/503/504 responses.

    The wait before a retry is the larger of the server's ``Retry-After`` and
    an exponential backoff with jitter. After *max_retries* retries the last
    response is returned, or the last transport error re-raised.
    """

    def __init__(
        self,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        max_retries: int = 3,
    ) -> None:
        self._transport = transport or httpx.AsyncHTTPTransport()
        self._max_retries = max_retries

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        attempt = 0
        while True:
            try:
                response = await self._transport.handle_async_request(request)
            except httpx.TransportError as exc:
                if attempt >= self._max_retries:
                    raise
                _LOG.warning("Karakeep request %s %s failed (%s), retrying", request.method, request.url, exc)
                await asyncio.sleep(self._backoff(attempt))
                attempt += 1
                continue

            if response.status_code not in _RETRYABLE_STATUS_CODES or attempt >= self._max_retries:
                return response

            delay = max(self._retry_after(response), self._backoff(attempt))
            _LOG.warning(
                "Karakeep request %s %s returned HTTP %d, retrying in %.1fs",
                request.method,
                request.url,
                response.status_code,
                delay,
            )
            await response.aclose()
            await asyncio.sleep(delay)
            attempt += 1

    async def aclose(self) -> None:
        await self._transport.aclose()

    @staticmethod
    def _retry_after(response: httpx.Response) -> float:
        raw = response.headers.get("Retry-After")
        if raw is None:
            return 0.0
        try:
            return max(0.0, float(raw))
        except ValueError:
            return 0.0

    @staticmethod
    def _backoff(attempt: int) -> float:
        return min(_MAX_BACKOFF_SECONDS, float(2**attempt)) + random.uniform(0.0, 0.25)
