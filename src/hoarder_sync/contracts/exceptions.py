"""Exception hierarchy for hoarder-sync."""

from __future__ import annotations


class HoarderSyncError(Exception):
    """Base exception for all hoarder-sync errors."""


class ConfigError(HoarderSyncError):
    """Configuration loading or validation failure."""


class MissingCredentialsError(ConfigError):
    """No API key is configured, so no pass can start."""


class ProviderError(HoarderSyncError):
    """Remote bookmark API call failed or returned malformed data."""


class AuthenticationError(ProviderError):
    """No usable credential, or the remote API rejected it."""


class StorageError(HoarderSyncError):
    """Local document store operation failure."""


class SyncError(HoarderSyncError):
    """Engine-level synchronization failure."""


class SyncInProgressError(SyncError):
    """A sync pass was requested while another one is still running."""
