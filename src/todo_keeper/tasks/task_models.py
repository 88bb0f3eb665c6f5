# src/todo_keeper/tasks/task_models.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum


class TaskFilter(StrEnum):
    """Which tasks the derived view shows."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: str | None) -> TaskFilter:
        key = (raw or "").strip().lower()
        if not key:
            raise ValueError("filter is required")
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"unknown filter: {raw!r} (use all, active or completed)") from None


class SortOrder(StrEnum):
    """Display order of the derived view (never persisted)."""

    CREATION_DATE = "creation-date"
    COMPLETION_STATUS = "completion-status"

    @classmethod
    def parse(cls, raw: str | None) -> SortOrder:
        key = (raw or "").strip().lower().replace("_", "-")
        aliases = {
            "created": cls.CREATION_DATE,
            "date": cls.CREATION_DATE,
            "creation": cls.CREATION_DATE,
            "status": cls.COMPLETION_STATUS,
            "done": cls.COMPLETION_STATUS,
            "completion": cls.COMPLETION_STATUS,
        }
        if key in aliases:
            return aliases[key]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(
                f"unknown sort order: {raw!r} (use creation-date or completion-status)"
            ) from None


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    text: str
    completed: bool = False
    # Epoch seconds; None for records written before timestamps existed.
    created_at: float | None = None


@dataclass(frozen=True, slots=True)
class TaskList:
    """
    Stored value of the todo list.

    - tasks: insertion order (the only order that is persisted)
    - next_id: monotonic id counter, never decreases
    """

    tasks: tuple[Task, ...] = ()
    next_id: int = 1

    @classmethod
    def of(cls, tasks: Iterable[Task]) -> TaskList:
        items = tuple(tasks)
        next_id = max((t.id for t in items), default=0) + 1
        return cls(tasks=items, next_id=next_id)

    def __len__(self) -> int:
        return len(self.tasks)

    def get(self, task_id: int) -> Task | None:
        for t in self.tasks:
            if t.id == task_id:
                return t
        return None


# ---- actions ----


@dataclass(frozen=True, slots=True)
class AddTask:
    text: str


@dataclass(frozen=True, slots=True)
class ToggleTask:
    id: int


@dataclass(frozen=True, slots=True)
class DeleteTask:
    id: int


@dataclass(frozen=True, slots=True)
class UpdateTask:
    id: int
    text: str


@dataclass(frozen=True, slots=True)
class ClearCompleted:
    pass


@dataclass(frozen=True, slots=True)
class LoadTasks:
    tasks: tuple[Task, ...]


@dataclass(frozen=True, slots=True)
class ToggleDisplayMode:
    pass


TaskAction = AddTask | ToggleTask | DeleteTask | UpdateTask | ClearCompleted | LoadTasks
Action = TaskAction | ToggleDisplayMode
