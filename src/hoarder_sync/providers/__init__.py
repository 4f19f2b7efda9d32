"""Remote bookmark providers."""

from hoarder_sync.providers.factory import create_client
from hoarder_sync.providers.karakeep import KarakeepClient

__all__ = ["KarakeepClient", "create_client"]
