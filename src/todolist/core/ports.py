# src/todolist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the interactor.

The interactor depends on Protocols instead of concrete implementations.
This keeps the remote source, the store and the presenter swappable and makes
testing easier.
"""

from typing import Awaitable, Protocol

from ..tasks.task_models import ServerTasks, Task
from .errors import TodoError


class RemoteTaskSource(Protocol):
    """Network fetch of the full task list."""

    def fetch_tasks(self) -> Awaitable[ServerTasks]: ...


class LocalTaskStore(Protocol):
    def fetch_tasks(self) -> Awaitable[list[Task]]: ...
    def save_task(self, task: Task) -> Awaitable[None]: ...
    def update_task(self, task: Task) -> Awaitable[None]: ...
    def delete_task(self, task: Task) -> Awaitable[None]: ...


class FetchStatusRepo(Protocol):
    """Synchronous, process-local "initial sync done" flag."""

    def get_fetch_status(self) -> bool: ...
    def set_fetch_status(self, value: bool) -> None: ...


class TasksOutput(Protocol):
    """
    Presenter-side port.

    Exactly one of these is called per interactor operation (the bootstrap
    fan-out may add extra did_fail calls for individual saves). Calls happen
    on the event-loop thread.
    """

    def did_fetch(self, tasks: list[Task]) -> None: ...
    def did_update(self, task: Task) -> None: ...
    def did_delete(self, task: Task) -> None: ...
    def did_fail(self, error: TodoError) -> None: ...
