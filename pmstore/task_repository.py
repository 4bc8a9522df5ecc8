from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

from .errors import DocumentParseError
from .interfaces import DocumentStore
from .models import TasksDocument

DEFAULT_TASKS_DOCUMENT = "tasks.json"


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _has_id(task: Any, task_id: str) -> bool:
    return isinstance(task, Mapping) and task.get("id") == task_id


class TaskRepository:
    """
    Task-list operations on top of a tasks document.

    Each call is a full load/modify/save of the document; the repository holds
    no state of its own. Reads accept both the {version, tasks} envelope and a
    bare list; writes always use the envelope. Entries are kept as read, and
    only mappings can be matched by id.
    """

    def __init__(self, store: DocumentStore, document_name: str = DEFAULT_TASKS_DOCUMENT):
        self._store = store
        self._name = document_name

    def _read(self) -> TasksDocument:
        return TasksDocument.from_disk_doc(self._store.load(self._name))

    def _write(self, doc: TasksDocument) -> None:
        self._store.save(self._name, doc.to_disk_doc())

    def list(self) -> list[Any]:
        return self._read().tasks

    def add(self, task: Mapping[str, Any]) -> None:
        doc = self._read()
        doc.tasks.insert(0, dict(task))
        self._write(doc)

    def bulk_add(self, new_tasks: Iterable[Mapping[str, Any]]) -> None:
        doc = self._read()
        doc.tasks = [*(dict(t) for t in new_tasks), *doc.tasks]
        self._write(doc)

    def update(self, task_id: str, patch: Mapping[str, Any]) -> bool:
        doc = self._read()
        found = False
        for i, task in enumerate(doc.tasks):
            if _has_id(task, task_id):
                doc.tasks[i] = {**task, **patch, "updated_at": _utc_now_iso()}
                found = True
        if not found:
            return False
        self._write(doc)
        return True

    def remove(self, task_id: str) -> bool:
        doc = self._read()
        kept = [t for t in doc.tasks if not _has_id(t, task_id)]
        if len(kept) == len(doc.tasks):
            return False
        doc.tasks = kept
        self._write(doc)
        return True

    def save_all(self, tasks: Iterable[Any]) -> None:
        # A full replace still works over an unreadable file; its bytes go to backups.
        try:
            doc = self._read()
        except DocumentParseError:
            doc = TasksDocument()
        doc.tasks = list(tasks)
        self._write(doc)
