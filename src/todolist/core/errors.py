# src/todolist/core/errors.py

from __future__ import annotations


class TodoError(Exception):
    """Base error delivered to the presentation layer (opaque at interactor level)."""


class NetworkError(TodoError):
    """Remote task source failed (transport, HTTP status, or payload decoding)."""


class StoreError(TodoError):
    """Local task store failed."""


class TaskNotFoundError(StoreError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task not found: id={task_id}")
        self.task_id = task_id


def friendly_error_message(err: BaseException) -> str:
    msg = str(err).strip()
    if isinstance(err, TaskNotFoundError):
        return f"No such task (id={err.task_id}). Use /list to refresh."
    if isinstance(err, NetworkError):
        return f"Could not load tasks from the server: {msg or 'network error'}. Try again later."
    if isinstance(err, StoreError):
        return f"Local storage error: {msg or 'unknown'}."
    return msg or err.__class__.__name__
