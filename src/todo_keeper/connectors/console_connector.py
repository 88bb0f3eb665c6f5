# src/todo_keeper/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.render import render_list
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def handle_line(state: AppState, line: str, emit=None) -> str | None:
    """
    One REPL step: slash commands go to the registry, anything else is a new task.
    Returns the text to show (None for blank input).
    """
    line = line.strip()
    if not line:
        return None

    reply = command_registry.handle(state, line, emit=emit)
    if reply is not None:
        return reply

    task = state.store.add(line)
    if task is None:
        return None
    return render_list(state)


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%d).", len(state.store.tasks))
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "todo"))
    _print_ts(f"[{app_name.upper()}] Type a task to add it. Use /help for commands. Use /exit to quit.\n")
    print(render_list(state))

    def emit(text: str) -> None:
        print(f"[{_ts_local()}] {text}", flush=True)

    while True:
        try:
            user_input = input(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = handle_line(state, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            print(reply)

    logger.info("Console connector finished.")
