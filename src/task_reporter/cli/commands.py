# src/task_reporter/cli/commands.py

from __future__ import annotations

import asyncio
import contextlib
import inspect
import logging
from collections.abc import Callable, Iterable
from typing import cast

from ..core.state import AppState
from ..tasks.task_api import Success, create_and_report
from ..tasks.task_models import InvalidTask, Task, TaskPriority, TaskStatus
from ..tasks.task_report import TaskReport, build_report, pending_tasks

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /report, ...)."""

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

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
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

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- formatting (display side; the reporter itself never formats) ----


def format_task_line(index: int, task: Task) -> str:
    return f"{index}. {task.description} | Status {task.status.value} | Priority is {task.priority.value}"


def format_task_lines(tasks: Iterable[Task]) -> list[str]:
    return [format_task_line(i, t) for i, t in enumerate(tasks, start=1)]


def format_high_priority_message(all_done: bool) -> str:
    if all_done:
        return "All high priority tasks are done!"
    return "There are still high priority tasks pending."


def format_report_lines(report: TaskReport) -> list[str]:
    lines = [
        f"Total tasks: {report.total}",
        f"Done: {report.by_status.done}",
        f"Pending: {report.by_status.pending}",
        f"High priority pending: {report.high_priority_pending}",
    ]
    for priority in TaskPriority:
        done = report.by_priority_and_status[(priority, TaskStatus.DONE)]
        pending = report.by_priority_and_status[(priority, TaskStatus.PENDING)]
        lines.append(f"  {priority.value}: done={done} pending={pending}")
    lines.append(format_high_priority_message(report.all_high_priority_done))
    return lines


# ---- handlers ----


def cmd_help(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    tasks = state.task_store.snapshot()
    if not tasks:
        return "No tasks."
    return "\n".join(["Tasks:", *format_task_lines(tasks)])


def cmd_pending(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    pending = pending_tasks(state.task_store.snapshot())
    if not pending:
        return "No pending tasks."
    return "\n".join(["Pending tasks:", *format_task_lines(pending)])


def cmd_report(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    return "\n".join(format_report_lines(build_report(state.task_store.snapshot())))


def cmd_status(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    settings = state.settings
    return (
        "Status:\n"
        f"  App: {getattr(settings, 'app_name', 'task-reporter')}\n"
        f"  Tasks: {state.task_store.count_tasks()}\n"
        f"  Append delay: {getattr(settings, 'append_delay_seconds', 0.0):.2f}s"
    )


_ADD_USAGE = "Usage: /add <low|medium|high> <pending|done> <description...> [--fail]"


def cmd_add(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /add high pending Finish async revision
    /add low done Something --fail   -> force the creation failure path
    """
    fail = bool(args) and args[-1] == "--fail"
    if fail:
        args = args[:-1]
    if len(args) < 3:
        return _ADD_USAGE

    try:
        task = Task.from_raw(" ".join(args[2:]), args[1], args[0])
    except InvalidTask as e:
        return f"Invalid task: {e}. {_ADD_USAGE}"

    delay = float(getattr(state.settings, "append_delay_seconds", 0.0))
    logger.debug("Task add requested priority=%s status=%s fail=%s", task.priority, task.status, fail)
    if emit:
        with contextlib.suppress(Exception):
            emit(f"Creating task (about {delay:.1f}s)...")

    result, report = asyncio.run(
        create_and_report(state.task_store, task, delay_seconds=delay, fail=fail)
    )
    if isinstance(result, Success):
        head = f"Task added: {task.description}"
    else:
        head = f"Task creation failed: {result.reason}"
    return "\n".join([head, *format_report_lines(report)])


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="List all tasks in order.", aliases=["ls"])
registry.register("pending", cmd_pending, help_text="List pending tasks.")
registry.register("report", cmd_report, help_text="Show counts by status and priority.")
registry.register("status", cmd_status, help_text="Show current settings.")
registry.register("add", cmd_add, help_text="Create a task: /add <priority> <status> <description>.")
