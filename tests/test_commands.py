# tests/test_commands.py

from __future__ import annotations

import pytest

from todolist.cli.commands import CommandRegistry, registry
from todolist.cli.presenter import ConsolePresenter
from todolist.tasks.task_models import Task


def test_command_registry_routes_and_aliases(state) -> None:
    reg = CommandRegistry()
    called: list[list[str]] = []

    def handler(state, args):
        called.append(args)
        return "ok"

    reg.register("a", handler, "a", aliases=["alpha"])

    assert reg.handle(state, "/a x y") == "ok"
    assert reg.handle(state, "/ALPHA") == "ok"
    assert called == [["x", "y"], []]
    assert "/a - a" in reg.build_help()


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


@pytest.mark.asyncio
async def test_console_flow_against_real_store(state) -> None:
    printed: list[str] = []
    presenter = ConsolePresenter(state, printer=printed.append)
    state.interactor.output = presenter

    assert registry.handle(state, "/list") == "Loading tasks..."
    await state.interactor.join()

    assert state.fetch_status.get_fetch_status() is True
    assert [t.id for t in state.tasks] == [1, 2, 3]
    assert printed[-1].startswith("Tasks (1/3 done):")

    assert registry.handle(state, "/done 2") == "Updating task 2..."
    await state.interactor.join()
    assert state.find_task(2).is_completed is True
    assert printed[-1].startswith("Updated: [x]")

    assert "already done" in registry.handle(state, "/done 2")
    assert registry.handle(state, "/rename 3 Ship it") == "Updating task 3..."
    await state.interactor.join()
    assert state.find_task(3).title == "Ship it"

    assert registry.handle(state, "/delete 1") == "Deleting task 1..."
    await state.interactor.join()
    assert state.find_task(1) is None
    assert state.task_store.count_tasks() == 2

    # Second fetch comes from the local store: edits survive.
    registry.handle(state, "/list")
    await state.interactor.join()
    assert [(t.id, t.title, t.is_completed) for t in state.tasks] == [
        (2, "Add TODO_REMOTE_BASE_URL to your .env", True),
        (3, "Ship it", False),
    ]

    status = registry.handle(state, "/status")
    assert "Initial sync done: yes" in status
    assert "offline demo" in status


@pytest.mark.asyncio
async def test_commands_validate_ids(state) -> None:
    assert registry.handle(state, "/done") == "Usage: /done <id>"
    assert registry.handle(state, "/delete abc") == "Usage: /delete <id>"
    assert "Unknown task id 99" in registry.handle(state, "/undo 99")
    assert registry.handle(state, "/rename 1") == "Usage: /rename <id> <new title>"
    assert state.interactor.pending_operations == 0


@pytest.mark.asyncio
async def test_presenter_prints_friendly_failure(state) -> None:
    printed: list[str] = []
    presenter = ConsolePresenter(state, printer=printed.append)
    state.interactor.output = presenter

    state.interactor.delete_task(Task(id=404, title="ghost"))
    await state.interactor.join()

    assert printed == ["[ERROR] No such task (id=404). Use /list to refresh."]
