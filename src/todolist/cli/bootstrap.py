# src/todolist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- creates the SQLite store (which creates its own directory),
- wires concrete implementations (remote source, SQLite store, fetch flag)
  into the interactor and AppState.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.ports import RemoteTaskSource
from ..core.state import AppState
from ..remote.client import HttpTaskSource
from ..remote.offline import OfflineTaskSource
from ..tasks.fetch_status import FetchStatusStore
from ..tasks.interactor import TasksInteractor
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_remote_source(settings: Settings) -> tuple[RemoteTaskSource, str]:
    try:
        return HttpTaskSource.from_settings(settings), "http"
    except ValueError:
        # Demo / local runs without a server.
        logger.info("No remote base URL configured; using the offline task source.")
        return OfflineTaskSource(), "offline"


def create_app_state(*, settings: Settings | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    The interactor starts without an output; the caller attaches its presenter.
    """
    if settings is None:
        settings = get_settings()

    remote, remote_mode = create_remote_source(settings)
    task_store = TaskStore(settings.tasks_db_path)
    fetch_status = FetchStatusStore(settings.fetch_status_path)

    interactor = TasksInteractor(
        remote=remote,
        store=task_store,
        fetch_status=fetch_status,
    )

    return AppState(
        settings=settings,
        task_store=task_store,
        fetch_status=fetch_status,
        interactor=interactor,
        remote_mode=remote_mode,
    )
