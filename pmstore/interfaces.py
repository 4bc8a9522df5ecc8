from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .paths import DataDirectory


class DocumentStore(Protocol):
    """
    Whole-document JSON persistence keyed by logical name (e.g. "tasks.json").
    """

    @property
    def data_dir(self) -> "DataDirectory": ...

    def load(self, logical_name: str) -> Any:
        """Load the full document, or its default when no file exists yet."""
        ...

    def save(self, logical_name: str, document: Any) -> None:
        """Persist the full document atomically."""
        ...

    def open_data_directory(self) -> None: ...

    def list_backups(self, logical_name: str | None = None) -> list[Path]: ...
