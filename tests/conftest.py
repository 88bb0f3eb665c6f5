# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_keeper.core.state import AppState
from todo_keeper.tasks.task_store import TodoStore

from .fakes import FakeClock, RecordingPersistence


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the command layer.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="todo",
        log_level="INFO",
        console_enabled=False,
        data_dir=tmp_path,
        storage_path=tmp_path / "storage.json",
        tasks_key="todos",
        display_mode_key="darkMode",
        default_filter="all",
        default_sort="creation-date",
        id_strategy="counter",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def persistence() -> RecordingPersistence:
    return RecordingPersistence()


@pytest.fixture()
def store(persistence: RecordingPersistence, clock: FakeClock) -> TodoStore:
    return TodoStore(loader=persistence, saver=persistence, clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TodoStore) -> AppState:
    """AppState wired with the recording persistence fake."""
    return AppState(settings=settings, store=store)
