from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Iterable, Mapping

from .interfaces import DocumentStore
from .task_repository import TaskRepository


class AsyncDocumentStore:
    """
    Async wrapper around a DocumentStore.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.
    """

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    async def load(self, logical_name: str) -> Any:
        return await asyncio.to_thread(self._store.load, logical_name)

    async def save(self, logical_name: str, document: Any) -> None:
        await asyncio.to_thread(self._store.save, logical_name, document)

    async def open_data_directory(self) -> None:
        await asyncio.to_thread(self._store.open_data_directory)

    async def list_backups(self, logical_name: str | None = None) -> list[Path]:
        return await asyncio.to_thread(self._store.list_backups, logical_name)


class AsyncTaskRepository:
    def __init__(self, repo: TaskRepository) -> None:
        self._repo = repo

    async def list(self) -> list[Any]:
        return await asyncio.to_thread(self._repo.list)

    async def add(self, task: Mapping[str, Any]) -> None:
        await asyncio.to_thread(self._repo.add, task)

    async def bulk_add(self, tasks: Iterable[Mapping[str, Any]]) -> None:
        await asyncio.to_thread(self._repo.bulk_add, list(tasks))

    async def update(self, task_id: str, patch: Mapping[str, Any]) -> bool:
        return await asyncio.to_thread(self._repo.update, task_id, patch)

    async def remove(self, task_id: str) -> bool:
        return await asyncio.to_thread(self._repo.remove, task_id)

    async def save_all(self, tasks: Iterable[Any]) -> None:
        await asyncio.to_thread(self._repo.save_all, list(tasks))
