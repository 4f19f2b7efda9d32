"""Local document store contract.

Paths are vault-relative POSIX strings such as ``Hoarder/2024-01-15-title.md``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class DocumentStore(ABC):
    @abstractmethod
    async def exists(self, path: str) -> bool: ...  # pragma: no cover

    @abstractmethod
    async def create_folder(self, path: str) -> None:
        """Create *path* and any missing parents; existing folders are left alone."""

    @abstractmethod
    async def read(self, path: str) -> str: ...  # pragma: no cover

    @abstractmethod
    async def create(self, path: str, content: str) -> None:
        """Create a new document. Raises ``StorageError`` if *path* exists."""

    @abstractmethod
    async def write(self, path: str, content: str) -> None: ...  # pragma: no cover

    @abstractmethod
    async def delete(self, path: str) -> None: ...  # pragma: no cover

    @abstractmethod
    async def rename(self, path: str, new_path: str) -> None: ...  # pragma: no cover

    @abstractmethod
    async def write_binary(self, path: str, data: bytes) -> None: ...  # pragma: no cover

    @abstractmethod
    async def list_files(self, folder: str) -> list[str]:
        """Return the paths of the files directly inside *folder*."""

    @abstractmethod
    async def list_documents(self, folder: str) -> list[str]:
        """Return every ``.md`` path under *folder*, recursively, sorted."""

    @abstractmethod
    async def modified_time(self, path: str) -> float: ...  # pragma: no cover
