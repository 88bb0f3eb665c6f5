# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO).",
    # Connectors
    "TODO_CONSOLE_ENABLED": "Run the interactive console (true/false).",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory (default: .local/todo).",
    "TODO_STORAGE_PATH": "Key-value storage JSON file (default: <data_dir>/storage.json).",
    # Persistence keys
    "TODO_TASKS_KEY": "Storage key for the task list (default: todos).",
    "TODO_DISPLAY_MODE_KEY": "Storage key for the dark-mode flag (default: darkMode).",
    # View / behaviour
    "TODO_DEFAULT_FILTER": "Initial filter: all | active | completed (default: all).",
    "TODO_DEFAULT_SORT": "Initial sort: creation-date | completion-status (default: creation-date).",
    "TODO_ID_STRATEGY": "counter (monotonic ids) or length (legacy len+1 ids) (default: counter).",
}
