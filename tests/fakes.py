# tests/fakes.py

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from todo_keeper.core.ports import PersistedState
from todo_keeper.tasks.task_models import Task


class FakeClock:
    """
    Deterministic clock for unit tests.

    Each call returns the current value, then advances by `step`.
    """

    def __init__(self, start: float = 1_700_000_000.0, step: float = 60.0) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        return value


class InMemoryKeyValueStore:
    """Dict-backed KeyValueStore (localStorage stand-in)."""

    def __init__(self, items: dict[str, str] | None = None) -> None:
        self.items: dict[str, str] = dict(items or {})
        self.writes: list[tuple[str, str]] = []

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value
        self.writes.append((key, value))

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


@dataclass(slots=True)
class RecordingPersistence:
    """
    StateLoader + StateSaver that returns a fixed PersistedState and
    captures every save for assertions.
    """

    initial: PersistedState = field(default_factory=PersistedState)
    saves: list[tuple[tuple[Task, ...], bool]] = field(default_factory=list)
    fail_saves: bool = False

    def load(self) -> PersistedState:
        return self.initial

    def save(self, tasks: Sequence[Task], dark_mode: bool) -> None:
        if self.fail_saves:
            raise OSError("disk full")
        self.saves.append((tuple(tasks), dark_mode))
