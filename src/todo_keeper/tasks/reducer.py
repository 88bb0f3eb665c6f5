# src/todo_keeper/tasks/reducer.py

"""
Pure task-list reducer.

reduce_tasks(task_list, action) -> next task_list

Every accepted action produces a new TaskList value (tuples + frozen
dataclasses); nothing is mutated in place. The only impure input is the
clock used to stamp created_at on new tasks.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import replace
from typing import Literal

from .task_models import (
    Action,
    AddTask,
    ClearCompleted,
    DeleteTask,
    LoadTasks,
    Task,
    TaskList,
    ToggleTask,
    UpdateTask,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
IdStrategy = Literal["counter", "length"]

ID_STRATEGIES: tuple[str, ...] = ("counter", "length")


def _allocate_id(task_list: TaskList, id_strategy: IdStrategy) -> int:
    if id_strategy == "length":
        legacy_id = len(task_list.tasks) + 1
        if task_list.get(legacy_id) is None:
            return legacy_id
        logger.warning(
            "Length-based id %s is already taken; using counter id %s instead.",
            legacy_id,
            task_list.next_id,
        )
    return task_list.next_id


def reduce_tasks(
    task_list: TaskList,
    action: Action,
    *,
    clock: Clock = time.time,
    id_strategy: IdStrategy = "counter",
) -> TaskList:
    """
    Apply one action to the task list.

    Unknown actions and ids that match nothing leave the contents unchanged.
    Text validation (non-empty add) is the caller's job.
    """
    if isinstance(action, AddTask):
        new_id = _allocate_id(task_list, id_strategy)
        task = Task(id=new_id, text=action.text, completed=False, created_at=clock())
        return TaskList(
            tasks=(*task_list.tasks, task),
            next_id=max(task_list.next_id, new_id + 1),
        )

    if isinstance(action, ToggleTask):
        return replace(
            task_list,
            tasks=tuple(
                replace(t, completed=not t.completed) if t.id == action.id else t
                for t in task_list.tasks
            ),
        )

    if isinstance(action, DeleteTask):
        return replace(
            task_list,
            tasks=tuple(t for t in task_list.tasks if t.id != action.id),
        )

    if isinstance(action, UpdateTask):
        return replace(
            task_list,
            tasks=tuple(
                replace(t, text=action.text) if t.id == action.id else t
                for t in task_list.tasks
            ),
        )

    if isinstance(action, ClearCompleted):
        return replace(
            task_list,
            tasks=tuple(t for t in task_list.tasks if not t.completed),
        )

    if isinstance(action, LoadTasks):
        loaded = TaskList.of(action.tasks)
        # Ids handed out before the load stay retired.
        return replace(loaded, next_id=max(loaded.next_id, task_list.next_id))

    return task_list
