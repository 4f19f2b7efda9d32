"""Progress reporting for a sync pass.

The engine announces each ``SyncPhase`` as it starts, advances and ends.
The CLI renders these events with Rich; library callers get the no-op
``NullSyncProgress`` unless they pass their own observer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum


class SyncPhase(StrEnum):
    DISCOVER = "Discover"  # local documents
    FETCH = "Fetch"  # remote listings and highlights
    RECONCILE = "Reconcile"  # one item per bookmark
    DISPOSITIONS = "Dispositions"  # one item per orphaned or archived document


class SyncProgress(ABC):
    """Observer for phase lifecycle events.

    *phase* is passed as a plain string so observers may also be driven by
    callers that do not use ``SyncPhase``.
    """

    @abstractmethod
    def phase_start(self, phase: str, total: int | None = None) -> None:
        """*total* is ``None`` when the item count is not known up front."""

    @abstractmethod
    def item_done(self, phase: str) -> None: ...

    @abstractmethod
    def phase_done(self, phase: str) -> None: ...

    @abstractmethod
    def phase_error(self, phase: str, error: BaseException) -> None:
        """The phase was aborted; *error* is re-raised by the engine afterwards."""


class NullSyncProgress(SyncProgress):
    def phase_start(self, phase: str, total: int | None = None) -> None:
        pass

    def item_done(self, phase: str) -> None:
        pass

    def phase_done(self, phase: str) -> None:
        pass

    def phase_error(self, phase: str, error: BaseException) -> None:
        pass
