# src/todo_keeper/cli/render.py

"""Plain-text rendering of the derived view for the console."""

from __future__ import annotations

from datetime import datetime

from ..core.state import AppState
from ..tasks.task_models import Task

# Light / dark marker pairs: (done, open).
_MARKS = {
    False: ("[x]", "[ ]"),
    True: ("[#]", "[.]"),
}


def _fmt_created(ts: float | None) -> str:
    if ts is None:
        return ""
    return datetime.fromtimestamp(ts).astimezone().strftime("%Y-%m-%d %H:%M")


def render_task(task: Task, *, dark_mode: bool = False) -> str:
    done_mark, open_mark = _MARKS[dark_mode]
    mark = done_mark if task.completed else open_mark
    created = _fmt_created(task.created_at)
    suffix = f"  ({created})" if created else ""
    return f"{mark} {task.id:>3}. {task.text}{suffix}"


def render_footer(state: AppState) -> str:
    left = state.items_left()
    noun = "item" if left == 1 else "items"
    return (
        f"{left} {noun} left | filter: {state.filter.value} | "
        f"sort: {state.sort_order.value} | mode: {'dark' if state.store.dark_mode else 'light'}"
    )


def render_list(state: AppState) -> str:
    dark = state.store.dark_mode
    lines = [render_task(t, dark_mode=dark) for t in state.visible()]
    if not lines:
        lines = ["(nothing to show)"]
    lines.append(render_footer(state))
    return "\n".join(lines)
