# src/todo_keeper/tasks/views.py

"""
Derived view: read-only projections of the stored list.

Sorting happens before filtering; both return new tuples and keep the
relative order of equal elements.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key

from .task_models import SortOrder, Task, TaskFilter


def _compare_completion(a: Task, b: Task) -> int:
    if a.completed == b.completed:
        return 0
    return -1 if a.completed else 1


def _creation_key(t: Task) -> tuple[int, float]:
    # Untimestamped (legacy) tasks count as the oldest.
    if t.created_at is None:
        return (0, 0.0)
    return (1, t.created_at)


def sort_tasks(tasks: Iterable[Task], order: SortOrder) -> tuple[Task, ...]:
    if order == SortOrder.COMPLETION_STATUS:
        return tuple(sorted(tasks, key=cmp_to_key(_compare_completion)))
    if order == SortOrder.CREATION_DATE:
        return tuple(sorted(tasks, key=_creation_key))
    raise ValueError(f"unknown sort order: {order!r}")


def filter_tasks(tasks: Iterable[Task], flt: TaskFilter) -> tuple[Task, ...]:
    if flt == TaskFilter.ALL:
        return tuple(tasks)
    if flt == TaskFilter.ACTIVE:
        return tuple(t for t in tasks if not t.completed)
    if flt == TaskFilter.COMPLETED:
        return tuple(t for t in tasks if t.completed)
    raise ValueError(f"unknown filter: {flt!r}")


def visible_tasks(
    tasks: Iterable[Task],
    flt: TaskFilter = TaskFilter.ALL,
    order: SortOrder = SortOrder.CREATION_DATE,
) -> tuple[Task, ...]:
    return filter_tasks(sort_tasks(tasks, order), flt)


def items_left(tasks: Iterable[Task]) -> int:
    """Number of unfinished tasks in the full (unfiltered) list."""
    return sum(1 for t in tasks if not t.completed)
