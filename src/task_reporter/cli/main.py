# src/task_reporter/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then either:
- runs the console REPL (default), or
- runs the one-shot demo: append a task after the creation delay, then report (--demo).
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from ..cli.bootstrap import create_initial_state
from ..cli.commands import format_report_lines, format_task_lines
from ..config import get_settings
from ..connectors.console_connector import ConsoleDisplay, run_console_loop
from ..core.ports import DisplaySink
from ..core.state import AppState
from ..logging_setup import setup_logging
from ..tasks.seed import DEMO_NEW_TASK
from ..tasks.task_api import Success, create_and_report

logger = logging.getLogger(__name__)


async def run_demo(state: AppState, display: DisplaySink) -> bool:
    """Append the demo task, then list and report. Returns True if creation succeeded."""
    delay = float(getattr(state.settings, "append_delay_seconds", 0.0))

    display.show([f"Creating task: {DEMO_NEW_TASK.description}"])
    result, report = await create_and_report(state.task_store, DEMO_NEW_TASK, delay_seconds=delay)

    if not isinstance(result, Success):
        display.show([f"Task creation failed: {result.reason}"])

    display.show(["Tasks:", *format_task_lines(state.task_store.snapshot())])
    display.show(format_report_lines(report))
    return isinstance(result, Success)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="task-reporter", description="Task list reporter.")
    parser.add_argument(
        "--demo",
        action="store_true",
        help="append the demo task, print the list and report, then exit",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = get_settings()

    console_level = getattr(logging, str(settings.log_level).upper(), logging.INFO)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    display = ConsoleDisplay()

    try:
        if args.demo:
            ok = asyncio.run(run_demo(state, display))
            return 0 if ok else 1
        run_console_loop(state, display)
        return 0
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    raise SystemExit(main())
