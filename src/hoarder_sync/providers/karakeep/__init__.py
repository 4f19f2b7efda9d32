"""Karakeep provider."""

from hoarder_sync.providers.karakeep.client import KarakeepClient

__all__ = ["KarakeepClient"]
