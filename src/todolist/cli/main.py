# src/todolist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, attaches the console presenter, loads
tasks once (like a list screen on first appearance), then runs the console.
"""

from __future__ import annotations

import asyncio
import logging

from ..config import Settings, get_settings
from ..logging_setup import setup_logging
from .bootstrap import create_app_state
from .console import run_console_loop
from .presenter import ConsolePresenter

logger = logging.getLogger(__name__)


async def _run(settings: Settings) -> None:
    state = create_app_state(settings=settings)

    # The interactor only holds a weak reference; this local keeps the presenter alive.
    presenter = ConsolePresenter(state)
    state.interactor.output = presenter

    state.interactor.fetch_tasks()
    await state.interactor.join()

    await run_console_loop(state)


def main() -> None:
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        asyncio.run(_run(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down...")
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
