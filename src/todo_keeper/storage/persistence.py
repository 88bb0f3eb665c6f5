# src/todo_keeper/storage/persistence.py

"""
Load/save collaborators for TodoStore on top of a KeyValueStore.

Two keys, both holding JSON text:
- tasks key (default "todos"):   [{"id": 1, "text": "...", "completed": false, "createdAt": "..."}]
- display key (default "darkMode"): true | false

Saving always rewrites both keys. Loading tolerates absent keys and
records without createdAt (older files); duplicate ids are renumbered
with a warning. Anything else malformed raises StorageDecodeError.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Sequence
from dataclasses import replace
from datetime import UTC, datetime
from typing import Any

from ..core.ports import KeyValueStore, PersistedState
from ..tasks.task_models import Task
from .kv_store import StorageDecodeError

logger = logging.getLogger(__name__)

DEFAULT_TASKS_KEY = "todos"
DEFAULT_DISPLAY_MODE_KEY = "darkMode"

# Numbers above this are taken as epoch milliseconds (Date.now() style).
_EPOCH_MS_THRESHOLD = 1e11


def encode_created_at(ts: float) -> str:
    return datetime.fromtimestamp(ts, UTC).isoformat()


def decode_created_at(raw: Any) -> float | None:
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise StorageDecodeError(f"createdAt must be a timestamp, got {raw!r}")
    if isinstance(raw, (int, float)):
        ts = float(raw)
        if not math.isfinite(ts):
            raise StorageDecodeError(f"createdAt must be a finite number, got {raw!r}")
        if ts > _EPOCH_MS_THRESHOLD:
            ts /= 1000.0
        try:
            datetime.fromtimestamp(ts, UTC)
        except (ValueError, OverflowError, OSError) as e:
            raise StorageDecodeError(f"createdAt is out of range: {raw!r}") from e
        return ts
    if isinstance(raw, str):
        try:
            dt = datetime.fromisoformat(raw.strip())
        except ValueError as e:
            raise StorageDecodeError(f"createdAt is not an ISO timestamp: {raw!r}") from e
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        return dt.timestamp()
    raise StorageDecodeError(f"createdAt must be a timestamp, got {raw!r}")


def task_to_dict(task: Task) -> dict[str, Any]:
    out: dict[str, Any] = {"id": task.id, "text": task.text, "completed": task.completed}
    if task.created_at is not None:
        out["createdAt"] = encode_created_at(task.created_at)
    return out


def task_from_dict(raw: Any) -> Task:
    if not isinstance(raw, dict):
        raise StorageDecodeError(f"task entry must be an object, got {type(raw).__name__}")

    tid = raw.get("id")
    if isinstance(tid, float) and tid.is_integer():
        tid = int(tid)
    if not isinstance(tid, int) or isinstance(tid, bool):
        raise StorageDecodeError(f"task id must be an integer, got {tid!r}")

    text = raw.get("text")
    if not isinstance(text, str):
        raise StorageDecodeError(f"task {tid} text must be a string, got {text!r}")

    completed = raw.get("completed", False)
    if not isinstance(completed, bool):
        raise StorageDecodeError(f"task {tid} completed must be a boolean, got {completed!r}")

    return Task(
        id=tid,
        text=text,
        completed=completed,
        created_at=decode_created_at(raw.get("createdAt")),
    )


def encode_tasks(tasks: Sequence[Task]) -> str:
    return json.dumps([task_to_dict(t) for t in tasks], ensure_ascii=False)


def decode_tasks(payload: str) -> tuple[Task, ...]:
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise StorageDecodeError(f"stored tasks are not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise StorageDecodeError("stored tasks must be a JSON array")

    return _renumber_duplicates(tuple(task_from_dict(item) for item in data))


def _renumber_duplicates(tasks: tuple[Task, ...]) -> tuple[Task, ...]:
    """
    Give later duplicates of an id a fresh id above the current maximum.

    Files written with length-based ids (len + 1 after a delete) contain such
    duplicates; the first occurrence keeps its id.
    """
    next_id = max((t.id for t in tasks), default=0) + 1
    seen: set[int] = set()
    out: list[Task] = []
    for t in tasks:
        if t.id in seen:
            logger.warning("Duplicate stored task id %s renumbered to %s.", t.id, next_id)
            t = replace(t, id=next_id)
            next_id += 1
        seen.add(t.id)
        out.append(t)
    return tuple(out)


def decode_dark_mode(payload: str) -> bool:
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise StorageDecodeError(f"stored display mode is not valid JSON: {e}") from e
    if not isinstance(data, bool):
        raise StorageDecodeError(f"stored display mode must be true/false, got {data!r}")
    return data


class KeyValueStatePersistence:
    """StateLoader + StateSaver backed by any KeyValueStore."""

    def __init__(
        self,
        kv: KeyValueStore,
        *,
        tasks_key: str = DEFAULT_TASKS_KEY,
        display_mode_key: str = DEFAULT_DISPLAY_MODE_KEY,
    ) -> None:
        self._kv = kv
        self._tasks_key = tasks_key
        self._display_mode_key = display_mode_key

    def load(self) -> PersistedState:
        raw_tasks = self._kv.get_item(self._tasks_key)
        raw_dark = self._kv.get_item(self._display_mode_key)

        tasks = decode_tasks(raw_tasks) if raw_tasks else None
        dark_mode = decode_dark_mode(raw_dark) if raw_dark else None

        logger.info(
            "Loaded persisted state tasks=%s dark_mode=%s",
            "absent" if tasks is None else len(tasks),
            "absent" if dark_mode is None else dark_mode,
        )
        return PersistedState(tasks=tasks, dark_mode=dark_mode)

    def save(self, tasks: Sequence[Task], dark_mode: bool) -> None:
        self._kv.set_item(self._tasks_key, encode_tasks(tasks))
        self._kv.set_item(self._display_mode_key, json.dumps(bool(dark_mode)))
        logger.debug("Saved state tasks=%d dark_mode=%s", len(tasks), dark_mode)
