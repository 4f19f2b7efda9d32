"""Local document storage."""

from hoarder_sync.storage.filesystem import FileSystemDocumentStore

__all__ = ["FileSystemDocumentStore"]
