# src/todo_keeper/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_models import SortOrder, Task, TaskFilter
from ..tasks.task_store import TodoStore
from ..tasks.views import items_left, visible_tasks


@dataclass
class AppState:
    """
    Top-level application context.

    Owns the TodoStore (persisted) and the view settings (filter/sort),
    which are per-session and never persisted.
    """

    settings: Any
    store: TodoStore

    filter: TaskFilter = TaskFilter.ALL
    sort_order: SortOrder = SortOrder.CREATION_DATE

    def visible(self) -> tuple[Task, ...]:
        return visible_tasks(self.store.tasks, self.filter, self.sort_order)

    def items_left(self) -> int:
        return items_left(self.store.tasks)
