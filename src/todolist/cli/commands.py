# src/todolist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from ..core.state import AppState

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0])
    except ValueError:
        return None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    state.interactor.fetch_tasks()
    return "Loading tasks..."


def cmd_status(state: AppState, args: list[str]) -> str:
    settings = state.settings
    source = settings.remote_base_url if state.remote_mode == "http" else "offline demo"
    synced = "yes" if state.fetch_status.get_fetch_status() else "no"
    return (
        "Status:\n"
        f"  Remote source: {source}\n"
        f"  Initial sync done: {synced}\n"
        f"  Local store: {state.task_store.db_path}\n"
        f"  Tasks shown: {len(state.tasks)}\n"
        f"  Operations in flight: {state.interactor.pending_operations}"
    )


def _set_completed(state: AppState, args: list[str], completed: bool, usage: str) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return usage
    task = state.find_task(task_id)
    if task is None:
        return f"Unknown task id {task_id}. Use /list to refresh."
    if task.is_completed == completed:
        return f"Task {task_id} is already {'done' if completed else 'open'}."
    state.interactor.update_task(replace(task, is_completed=completed))
    return f"Updating task {task_id}..."


def cmd_done(state: AppState, args: list[str]) -> str:
    return _set_completed(state, args, True, "Usage: /done <id>")


def cmd_undo(state: AppState, args: list[str]) -> str:
    return _set_completed(state, args, False, "Usage: /undo <id>")


def cmd_rename(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    title = " ".join(args[1:]).strip()
    if task_id is None or not title:
        return "Usage: /rename <id> <new title>"
    task = state.find_task(task_id)
    if task is None:
        return f"Unknown task id {task_id}. Use /list to refresh."
    state.interactor.update_task(replace(task, title=title))
    return f"Updating task {task_id}..."


def cmd_delete(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /delete <id>"
    task = state.find_task(task_id)
    if task is None:
        return f"Unknown task id {task_id}. Use /list to refresh."
    logger.debug("Delete requested id=%s", task_id)
    state.interactor.delete_task(task)
    return f"Deleting task {task_id}..."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Load and show tasks.", aliases=["ls"])
registry.register("status", cmd_status, help_text="Show source, sync flag and store location.")
registry.register("done", cmd_done, help_text="Mark a task as done: /done <id>.")
registry.register("undo", cmd_undo, help_text="Mark a task as open again: /undo <id>.")
registry.register("rename", cmd_rename, help_text="Change a task title: /rename <id> <title>.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm"])
