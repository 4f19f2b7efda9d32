"""Token resolver factory."""

from __future__ import annotations

from hoarder_sync.auth.base import TokenResolver
from hoarder_sync.auth.resolvers.env import EnvTokenResolver
from hoarder_sync.auth.resolvers.static import StaticTokenResolver
from hoarder_sync.contracts.config import HoarderSyncConfig
from hoarder_sync.contracts.exceptions import ConfigError


def create_token_resolver(config: HoarderSyncConfig) -> TokenResolver:
    if config.auth == "env":
        return EnvTokenResolver(variable=config.api_key_env)
    if config.auth == "token":
        return StaticTokenResolver(token=config.token or "")
    raise ConfigError(f"Unknown auth mode: {config.auth}")
