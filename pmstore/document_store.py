from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, Any, Callable

from .backups import list_backups
from .interfaces import DocumentStore
from .json_store import atomic_write_json, read_json
from .kinds import scaffold_for
from .launcher import open_in_file_manager
from .paths import DataDirectory

if TYPE_CHECKING:
    from settings import Settings


class DiskDocumentStore(DocumentStore):
    """
    Stores JSON documents as files under a single data directory.

    - Missing files load as their scaffold default; nothing is written until the
      first save.
    - Saves are atomic and back up the previous file into <root>/backups.
    - No handles or document copies are kept between calls.
    """

    def __init__(
        self,
        data_dir: DataDirectory,
        *,
        backup_keep: int | None = None,
        opener: Callable[[Path], None] = open_in_file_manager,
    ):
        self._data_dir = data_dir
        self._backup_keep = backup_keep
        self._opener = opener

    @classmethod
    def from_settings(cls, settings: "Settings") -> "DiskDocumentStore":
        return cls(DataDirectory(settings.data_dir), backup_keep=settings.backup_keep)

    @property
    def data_dir(self) -> DataDirectory:
        return self._data_dir

    def path_for(self, logical_name: str) -> Path:
        return self._data_dir.resolve(logical_name)

    def load(self, logical_name: str) -> Any:
        self._data_dir.ensure()
        path = self.path_for(logical_name)
        if not path.exists():
            return scaffold_for(logical_name)
        return read_json(path)

    def save(self, logical_name: str, document: Any) -> None:
        atomic_write_json(
            self.path_for(logical_name),
            document,
            backups_dir=self._data_dir.backups_dir,
            keep=self._backup_keep,
        )

    def open_data_directory(self) -> None:
        self._opener(self._data_dir.ensure())

    def list_backups(self, logical_name: str | None = None) -> list[Path]:
        filename = PurePosixPath(logical_name.replace("\\", "/")).name if logical_name else None
        return list_backups(self._data_dir.backups_dir, filename)
