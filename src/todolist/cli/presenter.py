# src/todolist/cli/presenter.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..core.errors import TodoError, friendly_error_message
from ..core.state import AppState
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

Printer = Callable[[str], None]


def ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def print_ts(text: str) -> None:
    print(f"[{ts_local()}] {text}")


def format_task(task: Task) -> str:
    mark = "x" if task.is_completed else " "
    line = f"[{mark}] {task.id:>4}  {task.title}"
    if task.details:
        line += f"  ({task.details})"
    return line


def format_task_list(tasks: list[Task]) -> str:
    if not tasks:
        return "No tasks."
    done = sum(1 for t in tasks if t.is_completed)
    lines = [f"Tasks ({done}/{len(tasks)} done):"]
    lines.extend(format_task(t) for t in tasks)
    return "\n".join(lines)


class ConsolePresenter:
    """
    TasksOutput implementation for the console.

    Keeps AppState.tasks in sync with what the interactor reports, so commands
    can resolve ids without another fetch.
    """

    def __init__(self, state: AppState, printer: Printer | None = None) -> None:
        self._state = state
        self._printer = printer or print_ts

    def did_fetch(self, tasks: list[Task]) -> None:
        self._state.tasks = list(tasks)
        self._printer(format_task_list(self._state.tasks))

    def did_update(self, task: Task) -> None:
        self._state.tasks = [task if t.id == task.id else t for t in self._state.tasks]
        self._printer(f"Updated: {format_task(task)}")

    def did_delete(self, task: Task) -> None:
        self._state.tasks = [t for t in self._state.tasks if t.id != task.id]
        self._printer(f"Deleted: {format_task(task)}")

    def did_fail(self, error: TodoError) -> None:
        logger.debug("Presenter received failure: %r", error)
        self._printer(f"[ERROR] {friendly_error_message(error)}")
