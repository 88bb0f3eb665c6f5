# src/todo_keeper/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a sane default; no .env is required.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Connector flags ----
    console_enabled: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    storage_path: Path

    # ---- Persistence keys ----
    tasks_key: str
    display_mode_key: str

    # ---- View defaults / behaviour ----
    default_filter: str
    default_sort: str
    id_strategy: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))
        storage_path = _env_path(_k("STORAGE_PATH"), data_dir / "storage.json")

        tasks_key = _env(_k("TASKS_KEY"), "todos").strip() or "todos"
        display_mode_key = _env(_k("DISPLAY_MODE_KEY"), "darkMode").strip() or "darkMode"

        default_filter = _env(_k("DEFAULT_FILTER"), "all").strip().lower() or "all"
        default_sort = _env(_k("DEFAULT_SORT"), "creation-date").strip().lower() or "creation-date"
        id_strategy = _env(_k("ID_STRATEGY"), "counter").strip().lower() or "counter"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_enabled=console_enabled,
            data_dir=data_dir,
            storage_path=storage_path,
            tasks_key=tasks_key,
            display_mode_key=display_mode_key,
            default_filter=default_filter,
            default_sort=default_sort,
            id_strategy=id_strategy,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
