# src/todolist/remote/offline.py

from __future__ import annotations

from ..tasks.task_models import ServerTask, ServerTasks

_DEMO_TASKS = (
    ServerTask(id=1, todo="Read the welcome note", completed=True),
    ServerTask(id=2, todo="Add TODO_REMOTE_BASE_URL to your .env", completed=False),
    ServerTask(id=3, todo="Mark this task as done with /done 3", completed=False),
)


class OfflineTaskSource:
    """
    Offline deterministic remote source used for demos when no server is configured.

    Returns the same small list on every call, without any network access.
    """

    async def fetch_tasks(self) -> ServerTasks:
        tasks = list(_DEMO_TASKS)
        return ServerTasks(tasks=tasks, total=len(tasks), skip=0, limit=len(tasks))
