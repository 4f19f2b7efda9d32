"""Auth module public exports."""

from hoarder_sync.auth.base import TokenResolver
from hoarder_sync.auth.factory import create_token_resolver

__all__ = ["TokenResolver", "create_token_resolver"]
