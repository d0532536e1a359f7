# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todolist).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Remote source
    "TODO_REMOTE_BASE_URL": (
        "Task server base URL; tasks are read from <base>/todos "
        "(default: https://dummyjson.com, empty => offline demo source)."
    ),
    "TODO_REMOTE_CONNECT_TIMEOUT_SECONDS": "HTTP connect timeout (default: 5.0).",
    "TODO_REMOTE_READ_TIMEOUT_SECONDS": "HTTP read timeout (default: 15.0).",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory (default: .local/todolist).",
    "TODO_TASKS_DB_PATH": "TaskStore SQLite path (default: <data_dir>/tasks.sqlite3).",
    "TODO_FETCH_STATUS_PATH": (
        "Initial-sync flag file (default: <data_dir>/fetch_status.json). "
        "Delete it together with the SQLite file to re-run the first-launch sync."
    ),
}
