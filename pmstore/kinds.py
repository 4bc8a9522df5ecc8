from __future__ import annotations

from enum import Enum
from typing import Any

from .models import SettingsDocument, TasksDocument


class DocumentKind(str, Enum):
    TASKS = "tasks"
    SETTINGS = "settings"
    GENERIC = "generic"

    @classmethod
    def for_name(cls, logical_name: str) -> "DocumentKind":
        """
        Suffix match on the logical name, so "projects/alpha/tasks.json"
        and "team-tasks.json" are both task documents.
        """
        if logical_name.endswith("tasks.json"):
            return cls.TASKS
        if logical_name.endswith("settings.json"):
            return cls.SETTINGS
        return cls.GENERIC


def default_document(kind: DocumentKind) -> Any:
    """Fresh default value for ``kind``; callers may mutate it freely."""
    if kind is DocumentKind.TASKS:
        return TasksDocument().to_disk_doc()
    if kind is DocumentKind.SETTINGS:
        return SettingsDocument().to_disk_doc()
    return []


def scaffold_for(logical_name: str) -> Any:
    return default_document(DocumentKind.for_name(logical_name))
