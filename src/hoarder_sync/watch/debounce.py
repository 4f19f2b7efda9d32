"""Cancellable delayed one-shot task."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

_LOG = logging.getLogger(__name__)


class DebouncedTask:
    """Run *callback* once *delay* seconds after the most recent ``schedule``.

    Scheduling again before the delay elapses cancels the pending run and
    restarts the delay with the new arguments, so only the last call fires.
    Exceptions raised by the callback are logged, not propagated.
    """

    def __init__(self, delay: float, callback: Callable[..., Awaitable[None]]) -> None:
        self._delay = delay
        self._callback = callback
        self._task: asyncio.Task[None] | None = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def schedule(self, *args: Any) -> None:
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run(args))

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()

    async def wait(self) -> None:
        """Wait for the pending run, if any, to finish or be cancelled."""
        if self._task is not None:
            await asyncio.wait({self._task})

    async def _run(self, args: tuple[Any, ...]) -> None:
        await asyncio.sleep(self._delay)
        try:
            await self._callback(*args)
        except Exception:
            _LOG.exception("Debounced callback %r failed", self._callback)
