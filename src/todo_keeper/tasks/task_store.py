# src/todo_keeper/tasks/task_store.py

from __future__ import annotations

import logging
import time

from ..core.ports import StateLoader, StateSaver
from .reducer import ID_STRATEGIES, Clock, IdStrategy, reduce_tasks
from .task_models import (
    Action,
    AddTask,
    ClearCompleted,
    DeleteTask,
    LoadTasks,
    Task,
    TaskList,
    ToggleDisplayMode,
    ToggleTask,
    UpdateTask,
)

logger = logging.getLogger(__name__)


def _clean_text(text: str | None) -> str:
    # Lone surrogates (undecodable terminal bytes) cannot be stored as UTF-8.
    return (text or "").encode("utf-8", "replace").decode("utf-8")


class TodoStore:
    """
    In-memory todo list + display-mode flag, persisted through collaborators.

    Lifecycle:
    - hydrate() once on startup (loader); decode errors propagate
    - every dispatch that changes state is flushed (saver), fire-and-forget

    The list is only ever replaced by applying the reducer to its current
    value; readers get immutable tuples.
    """

    def __init__(
        self,
        loader: StateLoader,
        saver: StateSaver,
        *,
        clock: Clock = time.time,
        id_strategy: IdStrategy = "counter",
    ) -> None:
        if id_strategy not in ID_STRATEGIES:
            raise ValueError(f"unknown id strategy: {id_strategy!r}")
        self._loader = loader
        self._saver = saver
        self._clock = clock
        self._id_strategy: IdStrategy = id_strategy
        self._task_list = TaskList()
        self._dark_mode = False

    # ---- read access ----

    @property
    def task_list(self) -> TaskList:
        return self._task_list

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._task_list.tasks

    @property
    def dark_mode(self) -> bool:
        return self._dark_mode

    def get(self, task_id: int) -> Task | None:
        return self._task_list.get(task_id)

    # ---- lifecycle ----

    def hydrate(self) -> None:
        """Seed state from the loader. Not flushed back."""
        persisted = self._loader.load()
        if persisted.tasks is not None:
            self._task_list = reduce_tasks(
                self._task_list, LoadTasks(tasks=persisted.tasks), clock=self._clock
            )
        if persisted.dark_mode is not None:
            self._dark_mode = persisted.dark_mode
        logger.info(
            "TodoStore hydrated tasks=%d dark_mode=%s", len(self._task_list), self._dark_mode
        )

    def _flush(self) -> None:
        try:
            self._saver.save(self._task_list.tasks, self._dark_mode)
        except Exception:
            logger.exception("Failed to persist todo state (ignored).")

    # ---- dispatch ----

    def dispatch(self, action: Action) -> TaskList:
        """Apply one action; persist if anything changed. Returns the current list."""
        logger.debug("dispatch %r", action)

        if isinstance(action, ToggleDisplayMode):
            self._dark_mode = not self._dark_mode
            self._flush()
            return self._task_list

        prev = self._task_list
        self._task_list = reduce_tasks(
            prev, action, clock=self._clock, id_strategy=self._id_strategy
        )
        if self._task_list != prev:
            self._flush()
        return self._task_list

    # ---- convenience API for the presentation layer ----

    def add(self, text: str) -> Task | None:
        """Add a task; empty or whitespace-only text is silently rejected."""
        clean = _clean_text(text).strip()
        if not clean:
            logger.debug("Rejected empty task text.")
            return None
        self.dispatch(AddTask(text=clean))
        return self._task_list.tasks[-1]

    def toggle(self, task_id: int) -> Task | None:
        self.dispatch(ToggleTask(id=task_id))
        return self.get(task_id)

    def delete(self, task_id: int) -> bool:
        before = len(self._task_list)
        self.dispatch(DeleteTask(id=task_id))
        return len(self._task_list) < before

    def update(self, task_id: int, text: str) -> Task | None:
        self.dispatch(UpdateTask(id=task_id, text=_clean_text(text)))
        return self.get(task_id)

    def clear_completed(self) -> int:
        """Returns how many tasks were removed."""
        before = len(self._task_list)
        self.dispatch(ClearCompleted())
        return before - len(self._task_list)

    def toggle_dark_mode(self) -> bool:
        self.dispatch(ToggleDisplayMode())
        return self._dark_mode

    def set_dark_mode(self, enabled: bool) -> bool:
        if bool(enabled) != self._dark_mode:
            self.dispatch(ToggleDisplayMode())
        return self._dark_mode
