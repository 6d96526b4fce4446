# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

_REQUIRED_FIELDS = ("id", "text", "completed", "createdAt")


def iso_timestamp(dt: datetime) -> str:
    """
    Format a datetime as ISO-8601 UTC with millisecond precision and a "Z" suffix,
    e.g. 2024-05-01T09:30:00.123Z. Naive datetimes are treated as UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    dt = dt.astimezone(UTC)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    text: str
    completed: bool
    created_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """
        Build a Task from a decoded snapshot record.

        Raises ValueError when the record is not a mapping with all fields present
        and correctly typed. Extra keys are ignored.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"task record must be an object, got {type(raw).__name__}")

        missing = [k for k in _REQUIRED_FIELDS if k not in raw]
        if missing:
            raise ValueError(f"task record missing fields: {', '.join(missing)}")

        task_id, text, completed, created_at = (raw[k] for k in _REQUIRED_FIELDS)
        if not isinstance(task_id, str) or not task_id:
            raise ValueError("task id must be a non-empty string")
        if not isinstance(text, str):
            raise ValueError("task text must be a string")
        if not isinstance(completed, bool):
            raise ValueError("task completed must be a boolean")
        if not isinstance(created_at, str):
            raise ValueError("task createdAt must be a string")

        return cls(id=task_id, text=text, completed=completed, created_at=created_at)


@dataclass(frozen=True, slots=True)
class TaskCounts:
    total: int
    pending: int
    completed: int

    def to_dict(self) -> dict[str, int]:
        return {"total": self.total, "pending": self.pending, "completed": self.completed}
