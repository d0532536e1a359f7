# src/todolist/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..config import Settings
from ..tasks.fetch_status import FetchStatusStore
from ..tasks.interactor import TasksInteractor
from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    settings: Settings

    task_store: TaskStore
    fetch_status: FetchStatusStore
    interactor: TasksInteractor

    # "http" or "offline"; shown by /status.
    remote_mode: str

    # Last list the presenter received; commands look tasks up here by id.
    tasks: list[Task] = field(default_factory=list)

    def find_task(self, task_id: int) -> Task | None:
        for t in self.tasks:
            if t.id == task_id:
                return t
        return None
