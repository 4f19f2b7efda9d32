"""Concrete token resolvers."""

from hoarder_sync.auth.resolvers.env import EnvTokenResolver
from hoarder_sync.auth.resolvers.static import StaticTokenResolver

__all__ = ["EnvTokenResolver", "StaticTokenResolver"]
