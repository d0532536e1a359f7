# src/todolist/tasks/task_store.py

from __future__ import annotations

import asyncio
import contextlib
import logging
import sqlite3
from pathlib import Path

from ..core.errors import StoreError, TaskNotFoundError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    SQLite task store.

    The schema is simple and migration-safe:
    - create table if missing
    - use PRAGMA table_info to detect missing columns
    - add columns with ALTER TABLE only when needed

    Thread-safety:
    - each method opens its own SQLite connection, so the async facade can run
      every call in a worker thread.

    Errors:
    - sqlite3.Error is re-raised as StoreError
    - update/delete of a missing id raises TaskNotFoundError
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("TaskStore ready db=%s total=%s", self._db_path, self.count_tasks())

    @property
    def db_path(self) -> Path:
        return self._db_path

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        # Not every filesystem supports WAL; the default journal still works.
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()

            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    id INTEGER PRIMARY KEY,
                    title TEXT NOT NULL DEFAULT '',
                    details TEXT NOT NULL DEFAULT '',
                    is_completed INTEGER NOT NULL DEFAULT 0,
                    created_at REAL NOT NULL DEFAULT 0
                )
                """
            )

            # Migrations (safe): add missing columns.
            cur.execute("PRAGMA table_info(tasks)")
            cols = {row["name"] for row in cur.fetchall()}

            def add_col(name: str, decl: str) -> None:
                if name in cols:
                    return
                cur.execute(f"ALTER TABLE tasks ADD COLUMN {name} {decl}")
                logger.info("TaskStore migration: added column %s", name)

            add_col("title", "TEXT NOT NULL DEFAULT ''")
            add_col("details", "TEXT NOT NULL DEFAULT ''")
            add_col("is_completed", "INTEGER NOT NULL DEFAULT 0")
            add_col("created_at", "REAL NOT NULL DEFAULT 0")

            cur.execute("CREATE INDEX IF NOT EXISTS idx_tasks_created ON tasks(created_at, id)")

            conn.commit()
        except sqlite3.Error as e:
            raise StoreError(f"Failed to prepare task schema at {self._db_path}: {e}") from e
        finally:
            conn.close()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            title=str(row["title"] or ""),
            details=str(row["details"] or ""),
            is_completed=bool(row["is_completed"]),
            created_at=float(row["created_at"] or 0.0),
        )

    # ---- sync API (runs in worker threads) ----

    def count_tasks(self) -> int:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT COUNT(*) FROM tasks")
            (n,) = cur.fetchone()
            return int(n)
        except sqlite3.Error as e:
            raise StoreError(f"count failed: {e}") from e
        finally:
            conn.close()

    def list_tasks(self) -> list[Task]:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT * FROM tasks ORDER BY created_at ASC, id ASC")
            return [self._row_to_task(r) for r in cur.fetchall()]
        except sqlite3.Error as e:
            raise StoreError(f"fetch failed: {e}") from e
        finally:
            conn.close()

    def insert_task(self, task: Task) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO tasks(id, title, details, is_completed, created_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    int(task.id),
                    task.title,
                    task.details,
                    1 if task.is_completed else 0,
                    float(task.created_at),
                ),
            )
            conn.commit()
            logger.debug("Task saved id=%s completed=%s", task.id, task.is_completed)
        except sqlite3.IntegrityError as e:
            raise StoreError(f"Task already exists: id={task.id}") from e
        except sqlite3.Error as e:
            raise StoreError(f"save failed id={task.id}: {e}") from e
        finally:
            conn.close()

    def replace_task(self, task: Task) -> None:
        conn = self._get_conn()
        try:
            cur = conn.execute(
                """
                UPDATE tasks
                SET title = ?,
                    details = ?,
                    is_completed = ?,
                    created_at = ?
                WHERE id = ?
                """,
                (
                    task.title,
                    task.details,
                    1 if task.is_completed else 0,
                    float(task.created_at),
                    int(task.id),
                ),
            )
            conn.commit()
            if cur.rowcount != 1:
                raise TaskNotFoundError(task.id)
            logger.debug("Task updated id=%s completed=%s", task.id, task.is_completed)
        except sqlite3.Error as e:
            raise StoreError(f"update failed id={task.id}: {e}") from e
        finally:
            conn.close()

    def remove_task(self, task_id: int) -> None:
        conn = self._get_conn()
        try:
            cur = conn.execute("DELETE FROM tasks WHERE id = ?", (int(task_id),))
            conn.commit()
            if cur.rowcount != 1:
                raise TaskNotFoundError(task_id)
            logger.debug("Task deleted id=%s", task_id)
        except sqlite3.Error as e:
            raise StoreError(f"delete failed id={task_id}: {e}") from e
        finally:
            conn.close()

    # ---- async API (LocalTaskStore port) ----

    async def fetch_tasks(self) -> list[Task]:
        return await asyncio.to_thread(self.list_tasks)

    async def save_task(self, task: Task) -> None:
        await asyncio.to_thread(self.insert_task, task)

    async def update_task(self, task: Task) -> None:
        await asyncio.to_thread(self.replace_task, task)

    async def delete_task(self, task: Task) -> None:
        await asyncio.to_thread(self.remove_task, task.id)
