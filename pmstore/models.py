from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

SETTINGS_SCHEMA_VERSION = 1
TASKS_SCHEMA_VERSION = 1

DEFAULT_COLUMNS = ("Now", "Next", "Later", "Blocked", "Done")


class HardLimits(BaseModel):
    model_config = ConfigDict(extra="allow")

    wip_per_owner: int = 1
    due_within_hours_priority: int = 24


class Weights(BaseModel):
    """Recommendation weights; the defaults sum to 1.0."""

    model_config = ConfigDict(extra="allow")

    priority: float = 0.45
    urgency: float = 0.35
    capacity_fit: float = 0.10
    budget_headroom: float = 0.10


class Penalties(BaseModel):
    model_config = ConfigDict(extra="allow")

    blocked: float = 2.0
    over_budget: float = 1.0


class SettingsDocument(BaseModel):
    """
    Mirrors the on-disk settings.json schema:
      {
        "version": 1,
        "mode": "rule",
        "hard_limits": { "wip_per_owner": 1, "due_within_hours_priority": 24 },
        "weights": { "priority": 0.45, "urgency": 0.35, "capacity_fit": 0.1, "budget_headroom": 0.1 },
        "penalties": { "blocked": 2.0, "over_budget": 1.0 },
        "focus_mode_on_accept": true,
        "columns": ["Now", "Next", "Later", "Blocked", "Done"]
      }

    Unknown keys are kept so that newer front-ends can add fields.
    """

    model_config = ConfigDict(extra="allow")

    version: int = SETTINGS_SCHEMA_VERSION
    mode: str = "rule"
    hard_limits: HardLimits = Field(default_factory=HardLimits)
    weights: Weights = Field(default_factory=Weights)
    penalties: Penalties = Field(default_factory=Penalties)
    focus_mode_on_accept: bool = True
    columns: list[str] = Field(default_factory=lambda: list(DEFAULT_COLUMNS))

    @classmethod
    def from_disk_doc(cls, doc: Any) -> "SettingsDocument":
        return cls.model_validate(doc)

    def to_disk_doc(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class TasksDocument(BaseModel):
    """
    Envelope for tasks.json: { "version": 1, "tasks": [ {...}, ... ] }.
    Task items are caller-defined and kept as read; other envelope keys survive a rewrite.
    """

    model_config = ConfigDict(extra="allow")

    version: int = TASKS_SCHEMA_VERSION
    tasks: list[Any] = Field(default_factory=list)

    @classmethod
    def from_disk_doc(cls, doc: Any) -> "TasksDocument":
        # Older front-ends wrote a bare list of tasks.
        if isinstance(doc, list):
            return cls(tasks=list(doc))
        if isinstance(doc, dict) and isinstance(doc.get("tasks"), list):
            version = doc["version"] if isinstance(doc.get("version"), int) else TASKS_SCHEMA_VERSION
            return cls.model_validate({**doc, "version": version})
        return cls()

    def to_disk_doc(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
