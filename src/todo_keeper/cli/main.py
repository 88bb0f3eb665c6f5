# src/todo_keeper/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds and hydrates AppState, then runs the console REPL.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..storage.kv_store import StorageDecodeError

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_dir = getattr(settings, "data_dir", ".local/todo")
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s...", getattr(settings, "app_name", "todo"))

    try:
        state = create_initial_state(settings=settings)
    except StorageDecodeError as e:
        # Corrupt storage is fatal; never overwrite it with an empty list.
        logger.error("Cannot load saved tasks from %s: %s", settings.storage_path, e)
        return 1

    if settings.console_enabled:
        run_console_loop(state)
    else:
        logger.info("Console disabled; nothing to run.")

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
