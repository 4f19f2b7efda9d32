"""State persistence."""

from hoarder_sync.persistence.state import SyncState, load_state, persist_state

__all__ = ["SyncState", "load_state", "persist_state"]
