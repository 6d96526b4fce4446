# tests/test_task_models.py

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from tasklist.tasks.task_models import Task, iso_timestamp


def test_iso_timestamp_uses_millis_and_z() -> None:
    dt = datetime(2024, 1, 2, 3, 4, 5, 678901, tzinfo=UTC)
    assert iso_timestamp(dt) == "2024-01-02T03:04:05.678Z"


def test_iso_timestamp_converts_to_utc() -> None:
    dt = datetime(2024, 1, 2, 5, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    assert iso_timestamp(dt) == "2024-01-02T03:00:00.000Z"


def test_iso_timestamp_treats_naive_as_utc() -> None:
    assert iso_timestamp(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05.000Z"


def test_to_dict_uses_snapshot_field_names() -> None:
    task = Task(id="a1", text="hello", completed=True, created_at="2024-01-01T00:00:00.000Z")
    assert task.to_dict() == {
        "id": "a1",
        "text": "hello",
        "completed": True,
        "createdAt": "2024-01-01T00:00:00.000Z",
    }
    assert Task.from_dict(task.to_dict()) == task


def test_task_is_immutable() -> None:
    task = Task(id="a1", text="hello", completed=False, created_at="x")
    with pytest.raises(AttributeError):
        task.completed = True  # type: ignore[misc]


@pytest.mark.parametrize(
    "raw, message",
    [
        (["not", "a", "dict"], "must be an object"),
        ({"id": "a", "text": "t", "completed": False}, "missing fields: createdAt"),
        ({"id": "", "text": "t", "completed": False, "createdAt": "x"}, "id"),
        ({"id": 5, "text": "t", "completed": False, "createdAt": "x"}, "id"),
        ({"id": "a", "text": None, "completed": False, "createdAt": "x"}, "text"),
        ({"id": "a", "text": "t", "completed": 1, "createdAt": "x"}, "completed"),
        ({"id": "a", "text": "t", "completed": False, "createdAt": 0}, "createdAt"),
    ],
)
def test_from_dict_rejects_malformed_records(raw, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        Task.from_dict(raw)
