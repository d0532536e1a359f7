# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from todolist.cli.bootstrap import create_app_state
from todolist.config import Settings
from todolist.core.state import AppState


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings pointing at tmp paths, with no remote URL (offline source).

    Built directly instead of via get_settings() to keep unit tests isolated
    from the developer's environment and .env file.
    """
    return Settings(
        app_name="todolist-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        tasks_db_path=tmp_path / "tasks.sqlite3",
        fetch_status_path=tmp_path / "fetch_status.json",
        remote_base_url="",
        remote_connect_timeout=1.0,
        remote_read_timeout=1.0,
    )


@pytest.fixture()
def state(settings: Settings) -> AppState:
    """
    AppState wired through the real composition root.

    NOTE: We keep the real SQLite store and flag file here because their
    behavior together with the interactor is part of what we want to test.
    """
    return create_app_state(settings=settings)
