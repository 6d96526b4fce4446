# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task store.

The store depends on Protocols instead of concrete implementations.
This keeps storage backends swappable and lets tests inject fakes.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Protocol

IdGenerator = Callable[[], str]
Clock = Callable[[], datetime]


class KeyValueStore(Protocol):
    """
    Synchronous string-keyed storage (browser-localStorage-like).

    - get returns None when the key is absent
    - set returns False (or raises) when the write is rejected
    """

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> bool: ...

