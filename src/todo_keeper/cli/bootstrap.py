# src/todo_keeper/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the file-backed key-value store into TodoStore via the
  load/save collaborators,
- hydrates the store and builds AppState.
"""

from __future__ import annotations

import logging
from typing import cast

from ..config import get_settings
from ..core.ports import KeyValueStore
from ..core.state import AppState
from ..storage.kv_store import JsonFileKeyValueStore
from ..storage.persistence import KeyValueStatePersistence
from ..tasks.reducer import ID_STRATEGIES, IdStrategy
from ..tasks.task_models import SortOrder, TaskFilter
from ..tasks.task_store import TodoStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def _view_defaults(settings) -> tuple[TaskFilter, SortOrder]:
    try:
        flt = TaskFilter.parse(getattr(settings, "default_filter", "all"))
    except ValueError:
        logger.warning("Invalid default filter %r; using 'all'.", settings.default_filter)
        flt = TaskFilter.ALL
    try:
        order = SortOrder.parse(getattr(settings, "default_sort", "creation-date"))
    except ValueError:
        logger.warning("Invalid default sort %r; using 'creation-date'.", settings.default_sort)
        order = SortOrder.CREATION_DATE
    return flt, order


def _id_strategy(settings) -> IdStrategy:
    raw = str(getattr(settings, "id_strategy", "counter"))
    if raw not in ID_STRATEGIES:
        logger.warning("Invalid id strategy %r; using 'counter'.", raw)
        return "counter"
    return cast(IdStrategy, raw)


def create_initial_state(*, settings=None, kv: KeyValueStore | None = None) -> AppState:
    """
    Create and hydrate AppState from the provided settings.

    Keeping settings (and the key-value store) injectable makes the app easier
    to test. If settings is None, falls back to get_settings().

    Raises StorageDecodeError if persisted data is malformed.
    """
    if settings is None:
        settings = get_settings()

    if kv is None:
        _ensure_local_dirs(settings)
        kv = JsonFileKeyValueStore(settings.storage_path)

    persistence = KeyValueStatePersistence(
        kv,
        tasks_key=settings.tasks_key,
        display_mode_key=settings.display_mode_key,
    )
    store = TodoStore(
        loader=persistence,
        saver=persistence,
        id_strategy=_id_strategy(settings),
    )
    store.hydrate()

    flt, order = _view_defaults(settings)
    return AppState(settings=settings, store=store, filter=flt, sort_order=order)
