"""Periodic sync trigger."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from hoarder_sync.contracts.sync import SyncOutcome

_LOG = logging.getLogger(__name__)


class PeriodicSync:
    """Call *trigger* now and then every *interval* seconds until cancelled.

    Ticks are sequential; a tick that lands while a manual pass is running is
    rejected by the trigger's own single-flight guard and simply reported.
    """

    def __init__(
        self,
        trigger: Callable[[], Awaitable[SyncOutcome]],
        interval: float,
        *,
        on_outcome: Callable[[SyncOutcome], None] | None = None,
    ) -> None:
        self._trigger = trigger
        self._interval = interval
        self._on_outcome = on_outcome

    async def tick(self) -> SyncOutcome:
        outcome = await self._trigger()
        if outcome.success:
            _LOG.info("Scheduled sync: %s", outcome.message)
        else:
            _LOG.warning("Scheduled sync failed: %s", outcome.message)
        if self._on_outcome is not None:
            self._on_outcome(outcome)
        return outcome

    async def run(self) -> None:
        while True:
            await self.tick()
            await asyncio.sleep(self._interval)
