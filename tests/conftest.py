from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from pmstore.document_store import DiskDocumentStore  # noqa: E402
from pmstore.paths import DataDirectory  # noqa: E402


class RecordingOpener:
    def __init__(self) -> None:
        self.opened: list[Path] = []

    def __call__(self, path: Path) -> None:
        self.opened.append(path)


@pytest.fixture
def default_settings() -> dict:
    return {
        "version": 1,
        "mode": "rule",
        "hard_limits": {"wip_per_owner": 1, "due_within_hours_priority": 24},
        "weights": {"priority": 0.45, "urgency": 0.35, "capacity_fit": 0.10, "budget_headroom": 0.10},
        "penalties": {"blocked": 2.0, "over_budget": 1.0},
        "focus_mode_on_accept": True,
        "columns": ["Now", "Next", "Later", "Blocked", "Done"],
    }


@pytest.fixture
def data_dir(tmp_path: Path) -> DataDirectory:
    """A data directory that does not exist yet, so lazy creation is exercised."""
    return DataDirectory(tmp_path / "pm-app")


@pytest.fixture
def opener() -> RecordingOpener:
    return RecordingOpener()


@pytest.fixture
def store(data_dir: DataDirectory, opener: RecordingOpener) -> DiskDocumentStore:
    return DiskDocumentStore(data_dir, opener=opener)


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch, data_dir: DataDirectory, store: DiskDocumentStore):
    """
    TestClient over an app whose store and settings point at the temp data directory.
    """
    from fastapi.testclient import TestClient

    import app as app_module

    monkeypatch.setenv("PM_DATA_DIR", str(data_dir.root))
    monkeypatch.delenv("PM_BACKUP_KEEP", raising=False)
    monkeypatch.delenv("PM_TASKS_DOCUMENT", raising=False)
    return TestClient(app_module.create_app(store=store))
