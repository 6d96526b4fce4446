# src/tasklist/tasks/task_store.py

from __future__ import annotations

import json
import logging
import uuid
from collections.abc import Iterator
from dataclasses import replace
from datetime import UTC, datetime

from ..core.ports import Clock, IdGenerator, KeyValueStore
from .task_models import Task, TaskCounts, iso_timestamp

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "esgTaskListApp"


def uuid_id() -> str:
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(UTC)


class TaskStore:
    """
    Ordered in-memory task list mirrored to one key-value entry.

    The snapshot under `storage_key` is a JSON array of
    {"id", "text", "completed", "createdAt"} objects.

    - every mutation persists immediately (no batching)
    - storage problems never raise: load() falls back to an empty list,
      save() reports failure as False
    - accessors return copies; Task itself is immutable
    """

    def __init__(
        self,
        kv: KeyValueStore,
        *,
        storage_key: str = DEFAULT_STORAGE_KEY,
        id_factory: IdGenerator = uuid_id,
        clock: Clock = utc_now,
    ) -> None:
        if not storage_key:
            raise ValueError("storage_key is required")
        self._kv = kv
        self._storage_key = storage_key
        self._id_factory = id_factory
        self._clock = clock
        self._tasks: list[Task] = []

    @property
    def storage_key(self) -> str:
        return self._storage_key

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    # ---- persistence ----

    def load(self) -> list[Task]:
        """
        Replace the in-memory list with the persisted snapshot.

        A missing or empty snapshot gives an empty list. An unreadable one (bad JSON,
        not an array, any malformed record, a repeated id) also gives an empty list
        and is logged.
        """
        try:
            raw = self._kv.get(self._storage_key)
        except Exception:
            logger.exception("Failed to read tasks key=%s; starting empty.", self._storage_key)
            self._tasks = []
            return self.get_tasks()

        if not raw:
            self._tasks = []
            return self.get_tasks()

        try:
            self._tasks = self._decode_snapshot(raw)
        except (ValueError, RecursionError) as e:
            logger.error("Malformed task snapshot key=%s: %s", self._storage_key, e)
            self._tasks = []
            return self.get_tasks()

        logger.info("Loaded %d tasks from key=%s", len(self._tasks), self._storage_key)
        return self.get_tasks()

    @staticmethod
    def _decode_snapshot(raw: str) -> list[Task]:
        data = json.loads(raw)
        if not isinstance(data, list):
            raise ValueError(f"expected a list, got {type(data).__name__}")

        tasks = [Task.from_dict(item) for item in data]
        seen: set[str] = set()
        for task in tasks:
            if task.id in seen:
                raise ValueError(f"duplicate task id {task.id!r}")
            seen.add(task.id)
        return tasks

    def save(self) -> bool:
        try:
            payload = json.dumps([t.to_dict() for t in self._tasks], ensure_ascii=False)
            ok = self._kv.set(self._storage_key, payload)
        except Exception:
            logger.exception("Failed to save %d tasks key=%s", len(self._tasks), self._storage_key)
            return False

        if ok is False:
            logger.error("Storage rejected write key=%s", self._storage_key)
            return False

        logger.debug("Saved %d tasks key=%s", len(self._tasks), self._storage_key)
        return True

    # ---- mutations ----

    def add_task(self, text: str) -> Task | None:
        trimmed = text.strip()
        if not trimmed:
            return None

        task = Task(
            id=self._new_id(),
            text=trimmed,
            completed=False,
            created_at=iso_timestamp(self._clock()),
        )
        self._tasks.append(task)
        self.save()
        logger.debug("Task added id=%s", task.id)
        return task

    def delete_task(self, task_id: str) -> bool:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]

        removed = len(self._tasks) < before
        if removed:
            self.save()
            logger.debug("Task deleted id=%s", task_id)
        return removed

    def toggle_task_complete(self, task_id: str) -> Task | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                updated = replace(task, completed=not task.completed)
                self._tasks[i] = updated
                self.save()
                logger.debug("Task toggled id=%s completed=%s", task_id, updated.completed)
                return updated
        return None

    def clear_completed_tasks(self) -> int:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if not t.completed]

        removed = before - len(self._tasks)
        if removed > 0:
            self.save()
            logger.debug("Cleared %d completed tasks", removed)
        return removed

    # ---- queries ----

    def get_tasks(self) -> list[Task]:
        return list(self._tasks)

    def get_task(self, task_id: str) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def get_task_counts(self) -> TaskCounts:
        total = 0
        completed = 0
        for task in self._tasks:
            total += 1
            if task.completed:
                completed += 1
        return TaskCounts(total=total, pending=total - completed, completed=completed)

    # ---- helpers ----

    def _new_id(self) -> str:
        """Ask the id factory for an id not already used in the list."""
        existing = {t.id for t in self._tasks}
        for _ in range(16):
            candidate = self._id_factory()
            if candidate and candidate not in existing:
                return candidate
        raise RuntimeError("id factory kept returning empty or duplicate ids")
