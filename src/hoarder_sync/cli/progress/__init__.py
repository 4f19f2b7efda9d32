"""CLI progress displays."""

from hoarder_sync.cli.progress.rich import RichSyncProgress

__all__ = ["RichSyncProgress"]
