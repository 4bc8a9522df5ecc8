from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from pmstore.paths import APP_FOLDER_NAME, default_data_dir
from pmstore.task_repository import DEFAULT_TASKS_DOCUMENT


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_positive_int(name: str) -> int | None:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    value = int(raw)
    if value < 1:
        raise ValueError(f"{name} must be a positive integer, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    # Storage location
    app_name: str
    data_dir: Path

    # Backups (None keeps every backup)
    backup_keep: int | None

    # Documents
    tasks_document: str

    # Debug
    debug_log_requests: bool


def get_settings() -> Settings:
    app_name = os.getenv("PM_APP_NAME", APP_FOLDER_NAME).strip() or APP_FOLDER_NAME

    # An explicit directory wins over the per-user platform location.
    raw_dir = os.getenv("PM_DATA_DIR", "").strip()
    data_dir = Path(raw_dir).expanduser() if raw_dir else default_data_dir(app_name)

    backup_keep = _env_positive_int("PM_BACKUP_KEEP")
    tasks_document = os.getenv("PM_TASKS_DOCUMENT", DEFAULT_TASKS_DOCUMENT).strip() or DEFAULT_TASKS_DOCUMENT
    debug_log_requests = _env_bool("DEBUG_LOG_REQUESTS", True)

    return Settings(
        app_name=app_name,
        data_dir=data_dir,
        backup_keep=backup_keep,
        tasks_document=tasks_document,
        debug_log_requests=debug_log_requests,
    )
