# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- picks the key-value backend and wires it into a TaskStore,
- loads the persisted task snapshot.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import KeyValueStore
from ..core.state import AppState
from ..storage.kv_store import InMemoryKeyValueStore, JsonFileKeyValueStore, SqliteKeyValueStore
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_kv_store(settings) -> KeyValueStore:
    backend = getattr(settings, "storage_backend", "sqlite")
    if backend == "memory":
        return InMemoryKeyValueStore()

    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)
    if backend == "json":
        return JsonFileKeyValueStore(settings.storage_path)
    if backend == "sqlite":
        return SqliteKeyValueStore(settings.storage_path)
    raise ValueError(f"Unknown storage backend: {backend!r}")


def create_initial_state(*, settings=None, kv: KeyValueStore | None = None) -> AppState:
    """
    Create AppState from the provided settings and load the saved tasks.

    Keeping settings (and the key-value store) injectable makes the app easy to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if kv is None:
        kv = create_kv_store(settings)

    task_store = TaskStore(kv, storage_key=settings.storage_key)
    tasks = task_store.load()
    logger.info(
        "State ready backend=%s key=%s tasks=%d",
        getattr(settings, "storage_backend", "?"),
        settings.storage_key,
        len(tasks),
    )
    return AppState(settings=settings, task_store=task_store)
