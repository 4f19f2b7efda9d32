"""Public API surface for hoarder-sync."""

__version__ = "1.0.0"

from hoarder_sync.auth import create_token_resolver
from hoarder_sync.config import load_config, scaffold_config, write_config
from hoarder_sync.contracts import (
    AuthenticationError,
    Bookmark,
    BookmarkClient,
    ConfigError,
    DocumentStore,
    HoarderSyncConfig,
    HoarderSyncError,
    MissingCredentialsError,
    ProviderError,
    StorageError,
    SyncError,
    SyncInProgressError,
    SyncOutcome,
    SyncReport,
    SyncStats,
)
from hoarder_sync.engine import SyncEngine, SyncProgress, build_sync_message
from hoarder_sync.sdk import HoarderSync

__all__ = [
    "AuthenticationError",
    "Bookmark",
    "BookmarkClient",
    "ConfigError",
    "DocumentStore",
    "HoarderSync",
    "HoarderSyncConfig",
    "HoarderSyncError",
    "MissingCredentialsError",
    "ProviderError",
    "StorageError",
    "SyncEngine",
    "SyncError",
    "SyncInProgressError",
    "SyncOutcome",
    "SyncProgress",
    "SyncReport",
    "SyncStats",
    "__version__",
    "build_sync_message",
    "create_token_resolver",
]
