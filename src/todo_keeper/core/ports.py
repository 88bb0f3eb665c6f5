# src/todo_keeper/core/ports.py

"""
Ports (interfaces) used by the core.

The store depends on Protocols instead of concrete implementations.
This keeps the storage medium swappable (file, in-memory fake for tests).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from ..tasks.task_models import Task


class KeyValueStore(Protocol):
    """
    String-keyed, string-valued persistent map (browser localStorage analogue).

    get_item returns None for a missing key.
    """

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...


@dataclass(frozen=True, slots=True)
class PersistedState:
    """
    What the loader found on startup.

    None means "key absent": the store keeps its defaults for that part.
    """

    tasks: tuple[Task, ...] | None = None
    dark_mode: bool | None = None


class StateLoader(Protocol):
    def load(self) -> PersistedState: ...


class StateSaver(Protocol):
    def save(self, tasks: Sequence[Task], dark_mode: bool) -> None: ...
