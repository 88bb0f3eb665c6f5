# src/todo_keeper/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.task_models import SortOrder, TaskFilter
from .render import render_list, render_task

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/add, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(raw: str) -> int | None:
    try:
        return int(raw.lstrip("#"))
    except ValueError:
        return None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    settings = state.settings
    storage = getattr(settings, "storage_path", "?")
    return (
        "Status:\n"
        f"  Tasks: {len(state.store.tasks)} ({state.items_left()} left)\n"
        f"  Filter: {state.filter.value}\n"
        f"  Sort: {state.sort_order.value}\n"
        f"  Display mode: {'dark' if state.store.dark_mode else 'light'}\n"
        f"  Storage: {storage}"
    )


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_list(state)


def cmd_add(state: AppState, args: list[str]) -> str:
    task = state.store.add(" ".join(args))
    if task is None:
        return "Nothing to add: task text is empty. Usage: /add <text>"
    return f"Added: {render_task(task, dark_mode=state.store.dark_mode)}"


def cmd_toggle(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args[0]) if args else None
    if task_id is None:
        return "Usage: /toggle <id>"
    state.store.toggle(task_id)
    return render_list(state)


def cmd_delete(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args[0]) if args else None
    if task_id is None:
        return "Usage: /delete <id>"
    state.store.delete(task_id)
    return render_list(state)


def cmd_edit(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args[0]) if args else None
    if task_id is None or len(args) < 2:
        return "Usage: /edit <id> <new text>"
    state.store.update(task_id, " ".join(args[1:]))
    return render_list(state)


def cmd_clear(state: AppState, args: list[str]) -> str:
    removed = state.store.clear_completed()
    return f"Cleared {removed} completed task(s).\n{render_list(state)}"


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter            -> show current filter
    /filter active     -> only unfinished tasks
    """
    if not args:
        return f"Filter is {state.filter.value}. Use /filter all | active | completed."
    try:
        state.filter = TaskFilter.parse(args[0])
    except ValueError as e:
        return str(e)
    return render_list(state)


def cmd_sort(state: AppState, args: list[str]) -> str:
    if not args:
        return (
            f"Sort order is {state.sort_order.value}. "
            "Use /sort creation-date | completion-status."
        )
    try:
        state.sort_order = SortOrder.parse(args[0])
    except ValueError as e:
        return str(e)
    return render_list(state)


def cmd_dark(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    """
    /dark       -> flip display mode
    /dark on    -> dark
    /dark off   -> light
    """
    if not args:
        enabled = state.store.toggle_dark_mode()
    else:
        arg = args[0].lower()
        if arg in ("on", "1", "true", "yes", "dark"):
            enabled = state.store.set_dark_mode(True)
        elif arg in ("off", "0", "false", "no", "light"):
            enabled = state.store.set_dark_mode(False)
        else:
            return "Usage: /dark [on|off]"

    if emit:
        with contextlib.suppress(Exception):
            emit(f"[MODE] Switched to {'dark' if enabled else 'light'} mode.")

    logger.debug("Display mode now dark=%s", enabled)
    return render_list(state)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show counts, view settings and storage path.")
registry.register("list", cmd_list, help_text="Show tasks (current filter/sort).", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <text> (plain text works too).")
registry.register("toggle", cmd_toggle, help_text="Complete/reopen a task: /toggle <id>.", aliases=["done"])
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm", "del"])
registry.register("edit", cmd_edit, help_text="Change task text: /edit <id> <text>.")
registry.register("clear", cmd_clear, help_text="Remove all completed tasks.")
registry.register("filter", cmd_filter, help_text="Filter: /filter all | active | completed.")
registry.register("sort", cmd_sort, help_text="Sort: /sort creation-date | completion-status.")
registry.register("dark", cmd_dark, help_text="Toggle display mode: /dark [on|off].")
