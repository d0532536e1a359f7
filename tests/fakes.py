# tests/fakes.py

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

from todolist.core.errors import StoreError, TaskNotFoundError, TodoError
from todolist.tasks.task_models import ServerTask, ServerTasks, Task


def server_tasks(*items: tuple[int, str, bool]) -> ServerTasks:
    tasks = [ServerTask(id=i, todo=title, completed=done) for i, title, done in items]
    return ServerTasks(tasks=tasks, total=len(tasks), skip=0, limit=len(tasks))


class FakeRemoteSource:
    """
    Deterministic RemoteTaskSource.

    - Returns `result` or raises it when it is an exception
    - Counts calls for assertions
    """

    def __init__(self, result: ServerTasks | Exception) -> None:
        self.result = result
        self.calls = 0

    async def fetch_tasks(self) -> ServerTasks:
        self.calls += 1
        await asyncio.sleep(0)
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


class InMemoryTaskStore:
    """
    In-memory LocalTaskStore.

    This avoids SQLite and keeps interactor tests purely about coordination.
    `fail_save_ids` makes individual saves fail; `fail_ops` makes a whole
    operation ("fetch", "update", "delete") fail.
    """

    def __init__(
        self,
        tasks: list[Task] | None = None,
        *,
        fail_save_ids: set[int] | None = None,
        fail_ops: set[str] | None = None,
    ) -> None:
        self.tasks: dict[int, Task] = {t.id: t for t in tasks or []}
        self.fail_save_ids = set(fail_save_ids or ())
        self.fail_ops = set(fail_ops or ())
        self.saved: list[int] = []

    async def fetch_tasks(self) -> list[Task]:
        await asyncio.sleep(0)
        if "fetch" in self.fail_ops:
            raise StoreError("fetch failed")
        return sorted(self.tasks.values(), key=lambda t: (t.created_at, t.id))

    async def save_task(self, task: Task) -> None:
        await asyncio.sleep(0)
        if task.id in self.fail_save_ids:
            raise StoreError(f"save failed id={task.id}")
        self.tasks[task.id] = task
        self.saved.append(task.id)

    async def update_task(self, task: Task) -> None:
        await asyncio.sleep(0)
        if "update" in self.fail_ops:
            raise StoreError("update failed")
        if task.id not in self.tasks:
            raise TaskNotFoundError(task.id)
        self.tasks[task.id] = task

    async def delete_task(self, task: Task) -> None:
        await asyncio.sleep(0)
        if "delete" in self.fail_ops:
            raise StoreError("delete failed")
        if task.id not in self.tasks:
            raise TaskNotFoundError(task.id)
        del self.tasks[task.id]


@dataclass(slots=True)
class InMemoryFetchStatus:
    value: bool = False
    writes: list[bool] = field(default_factory=list)

    def get_fetch_status(self) -> bool:
        return self.value

    def set_fetch_status(self, value: bool) -> None:
        self.writes.append(value)
        self.value = value


class RecordingOutput:
    """TasksOutput that records every callback as (name, payload)."""

    def __init__(self) -> None:
        self.events: list[tuple[str, Any]] = []

    def did_fetch(self, tasks: list[Task]) -> None:
        self.events.append(("fetch", list(tasks)))

    def did_update(self, task: Task) -> None:
        self.events.append(("update", task))

    def did_delete(self, task: Task) -> None:
        self.events.append(("delete", task))

    def did_fail(self, error: TodoError) -> None:
        self.events.append(("fail", error))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]

    def payloads(self, name: str) -> list[Any]:
        return [payload for n, payload in self.events if n == name]


class GatedTaskStore(InMemoryTaskStore):
    """
    Store whose saves block until `expected` saves are running at once.

    A bootstrap that saves one task at a time never opens the gate.
    """

    def __init__(self, expected: int) -> None:
        super().__init__()
        self.expected = expected
        self.started = 0
        self.max_running = 0
        self._running = 0
        self._gate = asyncio.Event()

    async def save_task(self, task: Task) -> None:
        self.started += 1
        self._running += 1
        self.max_running = max(self.max_running, self._running)
        if self.started >= self.expected:
            self._gate.set()
        try:
            await self._gate.wait()
            await super().save_task(task)
        finally:
            self._running -= 1
