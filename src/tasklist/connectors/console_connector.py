# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")


def handle_line(state: AppState, line: str) -> str | None:
    """
    Turn one input line into a reply.

    Slash-commands go to the registry; any other non-empty text becomes a new task.
    Returns None for blank lines.
    """
    line = line.strip()
    if not line:
        return None

    try:
        reply = command_registry.handle(state, line)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."

    if reply is not None:
        return reply

    task = state.task_store.add_task(line)
    return f"Added: {task.text}" if task is not None else None


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] | None = None,
    write: Callable[[str], None] = print,
) -> None:
    read_line = read_line or input
    logger.info("Console connector started (tasks=%d).", len(state.task_store))
    app_name = str(getattr(state.settings, "app_name", "tasklist"))
    write(f"[{app_name}] Type a task to add it. Use /help for commands, /exit to quit.")

    while True:
        try:
            user_input = read_line("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if user_input.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, user_input)
        if reply is not None:
            write(reply)

    logger.info("Console connector finished.")
