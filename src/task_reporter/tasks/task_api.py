# src/task_reporter/tasks/task_api.py

"""
Asynchronous task creation.

append_task simulates a remote "create": it waits for a delay, then yields
either Success (with the extended collection) or Failure(reason). The input
collection is never mutated.

create_and_report is the "append, then report" sequence: the report is only
built after the creation has been observed.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .task_models import Task
from .task_report import TaskReport, build_report
from .task_store import TaskStore

logger = logging.getLogger(__name__)

DEFAULT_APPEND_DELAY_SECONDS = 1.0
DEFAULT_FAILURE_REASON = "Something went wrong"


class CreationFailed(Exception):
    """The only error kind raised by task creation."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


@dataclass(frozen=True, slots=True)
class Success:
    tasks: tuple[Task, ...]

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> tuple[Task, ...]:
        """Return the extended collection."""
        return self.tasks


@dataclass(frozen=True, slots=True)
class Failure:
    reason: str

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> tuple[Task, ...]:
        """Raise CreationFailed with the recorded reason."""
        raise CreationFailed(self.reason)


CreationResult = Success | Failure


async def append_task(
    tasks: Sequence[Task],
    new_task: Task,
    *,
    delay_seconds: float = DEFAULT_APPEND_DELAY_SECONDS,
    fail: bool = False,
) -> CreationResult:
    """
    Append new_task after a simulated delay.

    fail is hard-wired to False by every normal caller; passing True forces the
    failure path and leaves the collection untouched.
    """
    await asyncio.sleep(max(0.0, float(delay_seconds)))

    if fail:
        logger.debug("append_task forced failure description=%r", new_task.description)
        return Failure(reason=DEFAULT_FAILURE_REASON)

    return Success(tasks=(*tasks, new_task))


async def create_and_report(
    store: TaskStore,
    new_task: Task,
    *,
    delay_seconds: float = DEFAULT_APPEND_DELAY_SECONDS,
    fail: bool = False,
) -> tuple[CreationResult, TaskReport]:
    """
    Append new_task to the store, then report on the resulting collection.

    On failure the reason is logged and nothing else happens: no retry, no
    rollback. The report then reflects the unchanged collection.
    """
    result = await append_task(store.snapshot(), new_task, delay_seconds=delay_seconds, fail=fail)

    if isinstance(result, Success):
        store.append(new_task)
        logger.info("Task created: %s (total=%s)", new_task.description, len(store))
    else:
        logger.error("Task creation failed: %s", result.reason)

    return result, build_report(store.snapshot())
