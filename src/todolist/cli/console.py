# src/todolist/cli/console.py

from __future__ import annotations

import asyncio
import logging

from ..core.state import AppState
from .commands import registry as command_registry
from .presenter import print_ts

logger = logging.getLogger(__name__)


async def run_console_loop(state: AppState) -> None:
    """
    Read commands until /exit or EOF.

    input() runs in a worker thread so interactor callbacks keep flowing on the
    event loop. After each command the loop waits for the interactor to go idle,
    so results print before the next prompt.
    """
    logger.info("Console started (remote=%s).", state.remote_mode)
    print_ts("[CONSOLE] Use /help for commands. Use /exit to quit.\n")

    while True:
        try:
            user_input = (await asyncio.to_thread(input, ">>> ")).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is None:
            reply = "Commands start with '/'. Use /help to list available commands."
        print_ts(reply)

        await state.interactor.join()

    await state.interactor.join()
    logger.info("Console finished.")
