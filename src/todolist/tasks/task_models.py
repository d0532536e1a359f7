# src/todolist/tasks/task_models.py

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any


def _int_field(raw: dict[str, Any], key: str, default: int = 0) -> int:
    value = raw.get(key, default)
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"'{key}' must be an integer, got {value!r}") from e


@dataclass(slots=True)
class Task:
    id: int
    title: str
    details: str = ""
    is_completed: bool = False
    created_at: float = field(default_factory=time.time)


@dataclass(slots=True, frozen=True)
class ServerTask:
    """One record of the remote `/todos` payload."""

    id: int
    todo: str
    completed: bool
    user_id: int | None = None

    @classmethod
    def from_dict(cls, raw: Any) -> ServerTask:
        if not isinstance(raw, dict):
            raise ValueError(f"task record must be an object, got {type(raw).__name__}")
        try:
            task_id = int(raw["id"])
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"task record has no valid id: {raw!r}") from e

        completed = raw.get("completed", False)
        if not isinstance(completed, bool):
            raise ValueError(f"task {task_id}: 'completed' must be a boolean, got {completed!r}")

        user_id = raw.get("userId")
        return cls(
            id=task_id,
            todo=str(raw.get("todo") or ""),
            completed=completed,
            user_id=_int_field(raw, "userId") if user_id is not None else None,
        )

    def to_task(self, *, now_ts: float | None = None) -> Task:
        return Task(
            id=self.id,
            title=self.todo,
            details="",
            is_completed=self.completed,
            created_at=time.time() if now_ts is None else now_ts,
        )


@dataclass(slots=True, frozen=True)
class ServerTasks:
    """
    Envelope of the remote task list.

    A missing "todos" key decodes as an empty list; anything that is not a list
    is rejected.
    """

    tasks: list[ServerTask]
    total: int = 0
    skip: int = 0
    limit: int = 0

    @classmethod
    def from_dict(cls, raw: Any) -> ServerTasks:
        if not isinstance(raw, dict):
            raise ValueError(f"payload must be an object, got {type(raw).__name__}")
        items = raw.get("todos", [])
        if not isinstance(items, list):
            raise ValueError("'todos' must be a list")
        tasks = [ServerTask.from_dict(item) for item in items]
        return cls(
            tasks=tasks,
            total=_int_field(raw, "total", len(tasks)),
            skip=_int_field(raw, "skip", 0),
            limit=_int_field(raw, "limit", len(tasks)),
        )

    def to_tasks(self) -> list[Task]:
        # One timestamp per batch; the store breaks created_at ties by id.
        now = time.time()
        return [t.to_task(now_ts=now) for t in self.tasks]
