"""Public contracts for hoarder-sync."""

from hoarder_sync.contracts.bookmark import (
    AssetContent,
    Bookmark,
    BookmarkAsset,
    BookmarkContent,
    BookmarkPage,
    BookmarkTag,
    Highlight,
    HighlightColor,
    HighlightPage,
    LinkContent,
    TagOrigin,
    TextContent,
    UnknownContent,
)
from hoarder_sync.contracts.client import BookmarkClient
from hoarder_sync.contracts.config import DeletionPolicy, DispositionAction, HoarderSyncConfig
from hoarder_sync.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    HoarderSyncError,
    MissingCredentialsError,
    ProviderError,
    StorageError,
    SyncError,
    SyncInProgressError,
)
from hoarder_sync.contracts.storage import DocumentStore
from hoarder_sync.contracts.sync import (
    DispositionCounts,
    DispositionInstruction,
    DispositionReason,
    SyncOutcome,
    SyncReport,
    SyncStats,
)

__all__ = [
    "AssetContent",
    "AuthenticationError",
    "Bookmark",
    "BookmarkAsset",
    "BookmarkClient",
    "BookmarkContent",
    "BookmarkPage",
    "BookmarkTag",
    "ConfigError",
    "DeletionPolicy",
    "DispositionAction",
    "DispositionCounts",
    "DispositionInstruction",
    "DispositionReason",
    "DocumentStore",
    "Highlight",
    "HighlightColor",
    "HighlightPage",
    "HoarderSyncConfig",
    "HoarderSyncError",
    "LinkContent",
    "MissingCredentialsError",
    "ProviderError",
    "StorageError",
    "SyncError",
    "SyncInProgressError",
    "SyncOutcome",
    "SyncReport",
    "SyncStats",
    "TagOrigin",
    "TextContent",
    "UnknownContent",
]
