# src/task_reporter/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from datetime import datetime
from typing import TextIO

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


class ConsoleDisplay:
    """DisplaySink that prints every line with a local timestamp."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def show(self, lines: Iterable[str]) -> None:
        out = self._stream or sys.stdout
        ts = _ts_local()
        for line in lines:
            print(f"[{ts}] {line}", file=out, flush=True)


def run_console_loop(state: AppState, display: ConsoleDisplay | None = None) -> None:
    display = display or ConsoleDisplay()
    logger.info("Console connector started (tasks=%s).", state.task_store.count_tasks())
    display.show(["[CONSOLE] Use /help for commands. Use /exit to quit.", ""])

    def emit(text: str) -> None:
        # Immediate user-visible feedback for slow operations (task creation delay)
        display.show([text])

    while True:
        try:
            user_input = input(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            cmd_response = command_registry.handle(state, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            cmd_response = "Internal error while handling a command."

        if cmd_response is None:
            cmd_response = "Not a command. Use /help to list available commands."

        display.show(cmd_response.splitlines())

    logger.info("Console connector finished.")
