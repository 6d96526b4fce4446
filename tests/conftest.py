# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.core.state import AppState
from tasklist.tasks.task_store import TaskStore

from .fakes import FakeKeyValueStore, FixedClock, SequentialIds

STORAGE_KEY = "test-tasks"


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="DEBUG",
        log_to_file=False,
        data_dir=tmp_path,
        storage_backend="sqlite",
        storage_path=tmp_path / "tasklist.sqlite3",
        storage_key=STORAGE_KEY,
    )


@pytest.fixture()
def kv() -> FakeKeyValueStore:
    return FakeKeyValueStore()


@pytest.fixture()
def store(kv: FakeKeyValueStore) -> TaskStore:
    """TaskStore wired with deterministic ids and clock."""
    return TaskStore(kv, storage_key=STORAGE_KEY, id_factory=SequentialIds(), clock=FixedClock())


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store)
