"""Reconciliation engine."""

from hoarder_sync.engine.disposition import classify_dispositions, count_dispositions
from hoarder_sync.engine.engine import SyncEngine
from hoarder_sync.engine.messages import build_sync_message
from hoarder_sync.engine.progress import NullSyncProgress, SyncPhase, SyncProgress

__all__ = [
    "NullSyncProgress",
    "SyncEngine",
    "SyncPhase",
    "SyncProgress",
    "build_sync_message",
    "classify_dispositions",
    "count_dispositions",
]
