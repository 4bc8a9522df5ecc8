from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath, PureWindowsPath

from platformdirs import user_data_dir

from .errors import DocumentIOError

logger = logging.getLogger(__name__)

APP_FOLDER_NAME = "pm-app"
BACKUPS_DIRNAME = "backups"


def default_data_dir(app_name: str = APP_FOLDER_NAME) -> Path:
    """
    Per-user application data location suffixed with ``app_name``.

    Falls back to the current working directory when the platform location
    cannot be determined; never raises.
    """
    try:
        base = Path(user_data_dir())
    except Exception as e:
        logger.warning("DATA DIR: platform location unavailable (%r); using cwd", e)
        base = Path.cwd()
    return base / app_name


def resolve(root: Path, logical_name: str) -> Path:
    return root / logical_name


def ensure_dir(path: Path) -> Path:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DocumentIOError(f"failed to create directory {path}: {e}") from e
    return path


def check_logical_name(logical_name: str) -> str:
    """Reject names that are empty, absolute, or climb out of the data directory."""
    if not logical_name.strip():
        raise ValueError("logical name must not be empty")
    posix = PurePosixPath(logical_name.replace("\\", "/"))
    if posix.is_absolute() or PureWindowsPath(logical_name).drive:
        raise ValueError(f"logical name must be relative: {logical_name!r}")
    if ".." in posix.parts:
        raise ValueError(f"logical name must stay inside the data directory: {logical_name!r}")
    return logical_name


@dataclass(frozen=True)
class DataDirectory:
    """The data directory root, computed once at startup and passed to the store."""

    root: Path

    @property
    def backups_dir(self) -> Path:
        return self.root / BACKUPS_DIRNAME

    def resolve(self, logical_name: str) -> Path:
        return resolve(self.root, logical_name)

    def ensure(self) -> Path:
        return ensure_dir(self.root)

    @classmethod
    def default(cls, app_name: str = APP_FOLDER_NAME) -> "DataDirectory":
        return cls(default_data_dir(app_name))
