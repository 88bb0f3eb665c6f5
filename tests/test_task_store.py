# tests/test_task_store.py

from __future__ import annotations

import logging

import pytest

from todo_keeper.core.ports import PersistedState
from todo_keeper.storage.kv_store import StorageDecodeError
from todo_keeper.tasks.task_models import SortOrder, Task, TaskFilter, ToggleTask
from todo_keeper.tasks.task_store import TodoStore
from todo_keeper.tasks.views import items_left, visible_tasks

from .fakes import FakeClock, RecordingPersistence


def test_scenario_add_toggle_filter(store: TodoStore) -> None:
    store.add("buy milk")
    assert [(t.id, t.text, t.completed) for t in store.tasks] == [(1, "buy milk", False)]

    store.add("wash car")
    assert [t.id for t in store.tasks] == [1, 2]

    store.toggle(1)
    assert store.get(1).completed is True

    active = visible_tasks(store.tasks, TaskFilter.ACTIVE, SortOrder.CREATION_DATE)
    assert [t.id for t in active] == [2]
    assert items_left(store.tasks) == 1


def test_add_trims_and_rejects_blank(store: TodoStore, persistence: RecordingPersistence) -> None:
    assert store.add("   ") is None
    assert store.add("") is None
    assert store.tasks == ()
    assert persistence.saves == []

    task = store.add("  walk dog  ")
    assert task is not None
    assert task.text == "walk dog"


def test_every_change_is_flushed(store: TodoStore, persistence: RecordingPersistence) -> None:
    store.add("a")
    store.toggle(1)
    store.update(1, "A")
    store.toggle_dark_mode()
    store.clear_completed()

    assert len(persistence.saves) == 5
    last_tasks, last_dark = persistence.saves[-1]
    assert last_tasks == ()
    assert last_dark is True


def test_no_op_actions_are_not_flushed(store: TodoStore, persistence: RecordingPersistence) -> None:
    store.add("a")
    persistence.saves.clear()

    store.toggle(99)
    store.delete(99)
    store.update(99, "x")
    store.clear_completed()
    store.dispatch(object())  # type: ignore[arg-type]

    assert persistence.saves == []
    assert [t.text for t in store.tasks] == ["a"]


def test_save_failure_is_logged_not_raised(
    store: TodoStore, persistence: RecordingPersistence, caplog: pytest.LogCaptureFixture
) -> None:
    persistence.fail_saves = True

    with caplog.at_level(logging.ERROR):
        task = store.add("still here")

    assert task is not None
    assert store.tasks == (task,)
    assert "Failed to persist" in caplog.text


def test_hydrate_loads_tasks_and_flag_without_flushing() -> None:
    persisted = PersistedState(tasks=(Task(5, "x", True), Task(8, "y")), dark_mode=True)
    persistence = RecordingPersistence(initial=persisted)
    store = TodoStore(loader=persistence, saver=persistence, clock=FakeClock())

    store.hydrate()

    assert store.tasks == persisted.tasks
    assert store.dark_mode is True
    assert persistence.saves == []
    # new ids continue after the highest hydrated id
    assert store.add("z").id == 9


def test_hydrate_with_absent_keys_keeps_defaults(store: TodoStore) -> None:
    store.hydrate()
    assert store.tasks == ()
    assert store.dark_mode is False


def test_hydrate_propagates_decode_errors() -> None:
    class BrokenLoader:
        def load(self) -> PersistedState:
            raise StorageDecodeError("bad json")

    store = TodoStore(loader=BrokenLoader(), saver=RecordingPersistence())
    with pytest.raises(StorageDecodeError):
        store.hydrate()


def test_scenario_load_then_clear_completed() -> None:
    persistence = RecordingPersistence(initial=PersistedState(tasks=(Task(5, "x", True),)))
    store = TodoStore(loader=persistence, saver=persistence)
    store.hydrate()

    assert store.clear_completed() == 1
    assert store.tasks == ()


def test_delete_reports_whether_removed(store: TodoStore) -> None:
    store.add("a")
    assert store.delete(1) is True
    assert store.delete(1) is False


def test_set_dark_mode_only_flushes_on_change(
    store: TodoStore, persistence: RecordingPersistence
) -> None:
    assert store.set_dark_mode(False) is False
    assert persistence.saves == []

    assert store.set_dark_mode(True) is True
    assert persistence.saves == [((), True)]


def test_previous_snapshots_are_not_aliased(store: TodoStore) -> None:
    store.add("a")
    before = store.task_list
    store.dispatch(ToggleTask(1))

    assert before.tasks[0].completed is False
    assert store.tasks[0].completed is True


def test_unknown_id_strategy_rejected(persistence: RecordingPersistence) -> None:
    with pytest.raises(ValueError):
        TodoStore(loader=persistence, saver=persistence, id_strategy="random")  # type: ignore[arg-type]


def test_text_with_lone_surrogates_is_sanitized(
    store: TodoStore, persistence: RecordingPersistence
) -> None:
    task = store.add("bad \udcff byte")
    assert task is not None
    assert task.text == "bad ? byte"

    store.update(task.id, "again \udc80")
    assert store.get(task.id).text == "again ?"

    saved_tasks, _ = persistence.saves[-1]
    assert [t.text for t in saved_tasks] == ["again ?"]
