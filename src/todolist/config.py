# src/todolist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing is read at import time; the first get_settings() call loads it.
- Every consumer accepts an injected Settings, so tests never touch the env.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

DEFAULT_REMOTE_BASE_URL = "https://dummyjson.com"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


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

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_db_path: Path
    fetch_status_path: Path

    # ---- Remote task source ----
    # Empty base URL means "use the built-in offline source".
    remote_base_url: str
    remote_connect_timeout: float
    remote_read_timeout: float

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todolist").strip() or "todolist"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todolist"))
        tasks_db_path = _env_path(_k("TASKS_DB_PATH"), data_dir / "tasks.sqlite3")
        fetch_status_path = _env_path(_k("FETCH_STATUS_PATH"), data_dir / "fetch_status.json")

        remote_base_url = _env(_k("REMOTE_BASE_URL"), DEFAULT_REMOTE_BASE_URL).strip().rstrip("/")
        connect_timeout = _env_float(_k("REMOTE_CONNECT_TIMEOUT_SECONDS"), 5.0)
        read_timeout = _env_float(_k("REMOTE_READ_TIMEOUT_SECONDS"), 15.0)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
            fetch_status_path=fetch_status_path,
            remote_base_url=remote_base_url,
            remote_connect_timeout=max(0.1, connect_timeout),
            remote_read_timeout=max(0.1, read_timeout),
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Load settings once per process (reads .env without overriding real env vars)."""
    global _settings
    if _settings is None:
        load_dotenv(override=False)
        _settings = Settings.from_env()
    return _settings
