# src/todolist/tasks/interactor.py

from __future__ import annotations

"""
Tasks interactor.

Sits between the presenter and the data sources:
- decides between the remote source and the local store using the fetch-status flag,
- on first launch copies every remote task into the local store (fan-out + join),
- reports exactly one result callback per operation to the presenter.

Public methods are fire-and-forget: they schedule work on the running event loop
and return immediately. Results arrive through the TasksOutput port.
"""

import asyncio
import logging
import weakref
from collections.abc import Callable, Coroutine
from typing import Any

from ..core.errors import TodoError
from ..core.ports import FetchStatusRepo, LocalTaskStore, RemoteTaskSource, TasksOutput
from .task_models import ServerTasks, Task

logger = logging.getLogger(__name__)


def _as_todo_error(exc: Exception) -> TodoError:
    if isinstance(exc, TodoError):
        return exc
    wrapped = TodoError(f"{exc.__class__.__name__}: {exc}")
    wrapped.__cause__ = exc
    return wrapped


class TasksInteractor:
    def __init__(
        self,
        *,
        remote: RemoteTaskSource,
        store: LocalTaskStore,
        fetch_status: FetchStatusRepo,
        output: TasksOutput | None = None,
    ) -> None:
        self._remote = remote
        self._store = store
        self._fetch_status = fetch_status
        self._output_ref: weakref.ReferenceType[TasksOutput] | None = None
        # Strong refs to running operations; the loop itself only keeps weak ones.
        self._inflight: set[asyncio.Task[None]] = set()
        self.output = output

    # ---- presenter wiring ----

    @property
    def output(self) -> TasksOutput | None:
        """Non-owning reference: the presenter's lifetime is managed by its owner."""
        ref = self._output_ref
        return ref() if ref is not None else None

    @output.setter
    def output(self, value: TasksOutput | None) -> None:
        self._output_ref = weakref.ref(value) if value is not None else None

    @property
    def pending_operations(self) -> int:
        return sum(1 for t in self._inflight if not t.done())

    # ---- public API ----

    def fetch_tasks(self) -> None:
        has_fetched_data = self._fetch_status.get_fetch_status()
        if has_fetched_data:
            self._spawn(self._fetch_local_tasks, name="fetch_local_tasks")
        else:
            self._spawn(self._fetch_server_tasks, name="fetch_server_tasks")

    def update_task(self, task: Task) -> None:
        self._spawn(self._update_task, task, name=f"update_task:{task.id}")

    def delete_task(self, task: Task) -> None:
        self._spawn(self._delete_task, task, name=f"delete_task:{task.id}")

    async def join(self) -> None:
        """Wait until every operation started so far (and anything it started) has finished."""
        while True:
            pending = [t for t in self._inflight if not t.done()]
            if not pending:
                return
            await asyncio.gather(*pending, return_exceptions=True)

    # ---- internals ----

    def _spawn(
        self,
        fn: Callable[..., Coroutine[Any, Any, None]],
        *args: Any,
        name: str,
    ) -> None:
        loop = asyncio.get_running_loop()
        task = loop.create_task(fn(*args), name=name)
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)

    def _emit(self, method: str, *args: Any) -> None:
        output = self.output
        if output is None:
            logger.debug("No output attached; dropping %s", method)
            return
        try:
            getattr(output, method)(*args)
        except Exception:
            logger.exception("Output callback %s crashed", method)

    def _fail(self, exc: Exception) -> None:
        self._emit("did_fail", _as_todo_error(exc))

    async def _update_task(self, task: Task) -> None:
        try:
            await self._store.update_task(task)
        except Exception as e:
            logger.warning("update_task failed id=%s: %s", task.id, e)
            self._fail(e)
            return
        self._emit("did_update", task)

    async def _delete_task(self, task: Task) -> None:
        try:
            await self._store.delete_task(task)
        except Exception as e:
            logger.warning("delete_task failed id=%s: %s", task.id, e)
            self._fail(e)
            return
        self._emit("did_delete", task)

    async def _fetch_server_tasks(self) -> None:
        try:
            server_tasks = await self._remote.fetch_tasks()
        except Exception as e:
            logger.warning("Remote fetch failed: %s", e)
            self._fail(e)
            return

        logger.info("Remote returned %d tasks; saving locally", len(server_tasks.tasks))
        try:
            await self._save_server_tasks_to_local(server_tasks)
        except Exception as e:
            logger.exception("Could not record fetch status")
            self._fail(e)
            return

        await self._fetch_local_tasks()

    async def _fetch_local_tasks(self) -> None:
        try:
            tasks = await self._store.fetch_tasks()
        except Exception as e:
            logger.warning("Local fetch failed: %s", e)
            self._fail(e)
            return
        self._emit("did_fetch", tasks)

    async def _save_one(self, task: Task) -> bool:
        try:
            await self._store.save_task(task)
        except Exception as e:
            logger.warning("Saving remote task id=%s failed: %s", task.id, e)
            self._fail(e)
            return False
        return True

    async def _save_server_tasks_to_local(self, server_tasks: ServerTasks) -> None:
        tasks = server_tasks.to_tasks()

        # Join on all saves; an empty list completes immediately.
        results = await asyncio.gather(*(self._save_one(t) for t in tasks))

        failed = results.count(False)
        if failed:
            logger.warning("Initial sync: %d of %d tasks failed to save", failed, len(tasks))

        # Set even after partial failure: the flag marks a finished bootstrap, not a clean one.
        self._fetch_status.set_fetch_status(True)
