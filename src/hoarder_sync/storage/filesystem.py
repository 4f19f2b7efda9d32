"""Document store backed by a vault directory on the local filesystem."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from hoarder_sync.contracts.exceptions import StorageError
from hoarder_sync.contracts.storage import DocumentStore

T = TypeVar("T")


class FileSystemDocumentStore(DocumentStore):
    """Map vault-relative POSIX paths onto files under *root*.

    Blocking filesystem calls run in a worker thread. ``OSError`` and
    undecodable text are wrapped in ``StorageError``, and paths that would leave *root* are rejected.
    """

    def __init__(self, root: Path) -> None:
        self._root = root.expanduser().resolve()

    @property
    def root(self) -> Path:
        return self._root

    def _resolve(self, path: str) -> Path:
        resolved = (self._root / path).resolve()
        if resolved != self._root and self._root not in resolved.parents:
            raise StorageError(f"path escapes the vault: {path}")
        return resolved

    def _relative(self, path: Path) -> str:
        return path.relative_to(self._root).as_posix()

    async def _run(self, description: str, func: Callable[[], T]) -> T:
        try:
            return await asyncio.to_thread(func)
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"{description}: {exc}") from exc

    async def exists(self, path: str) -> bool:
        target = self._resolve(path)
        return await self._run(f"checking {path}", target.exists)

    async def create_folder(self, path: str) -> None:
        target = self._resolve(path)
        await self._run(f"creating folder {path}", lambda: target.mkdir(parents=True, exist_ok=True))

    async def read(self, path: str) -> str:
        target = self._resolve(path)
        return await self._run(f"reading {path}", lambda: target.read_text(encoding="utf-8"))

    async def create(self, path: str, content: str) -> None:
        target = self._resolve(path)

        def _create() -> None:
            target.parent.mkdir(parents=True, exist_ok=True)
            with target.open("x", encoding="utf-8", newline="") as handle:
                handle.write(content)

        try:
            await self._run(f"creating {path}", _create)
        except StorageError as exc:
            if isinstance(exc.__cause__, FileExistsError):
                raise StorageError(f"document already exists: {path}") from exc.__cause__
            raise

    async def write(self, path: str, content: str) -> None:
        target = self._resolve(path)
        await self._run(f"writing {path}", lambda: _write_text(target, content))

    async def delete(self, path: str) -> None:
        target = self._resolve(path)
        await self._run(f"deleting {path}", target.unlink)

    async def rename(self, path: str, new_path: str) -> None:
        source = self._resolve(path)
        target = self._resolve(new_path)

        def _rename() -> None:
            if target.exists():
                raise FileExistsError(f"{new_path} already exists")
            target.parent.mkdir(parents=True, exist_ok=True)
            source.rename(target)

        await self._run(f"renaming {path} to {new_path}", _rename)

    async def write_binary(self, path: str, data: bytes) -> None:
        target = self._resolve(path)

        def _write() -> None:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)

        await self._run(f"writing {path}", _write)

    async def list_files(self, folder: str) -> list[str]:
        target = self._resolve(folder)

        def _list() -> list[str]:
            if not target.is_dir():
                return []
            return sorted(self._relative(child) for child in target.iterdir() if child.is_file())

        return await self._run(f"listing {folder}", _list)

    async def list_documents(self, folder: str) -> list[str]:
        target = self._resolve(folder)

        def _list() -> list[str]:
            if not target.is_dir():
                return []
            return sorted(self._relative(child) for child in target.rglob("*.md") if child.is_file())

        return await self._run(f"listing {folder}", _list)

    async def modified_time(self, path: str) -> float:
        target = self._resolve(path)
        return await self._run(f"reading modification time of {path}", lambda: target.stat().st_mtime)


def _write_text(target: Path, content: str) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8", newline="")
