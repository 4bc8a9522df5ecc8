from __future__ import annotations

from .document_store import DiskDocumentStore
from .errors import DocumentIOError, DocumentParseError, StoreError
from .interfaces import DocumentStore
from .kinds import DocumentKind, scaffold_for
from .models import SettingsDocument, TasksDocument
from .paths import DataDirectory, default_data_dir, resolve
from .repositories import AsyncDocumentStore, AsyncTaskRepository
from .task_repository import TaskRepository

__all__ = [
    "DataDirectory",
    "default_data_dir",
    "resolve",
    "DocumentKind",
    "scaffold_for",
    "SettingsDocument",
    "TasksDocument",
    "DocumentStore",
    "DiskDocumentStore",
    "TaskRepository",
    "AsyncDocumentStore",
    "AsyncTaskRepository",
    "StoreError",
    "DocumentIOError",
    "DocumentParseError",
]
