# src/task_reporter/tasks/task_report.py

"""
Aggregations over a task collection.

All functions here are pure: they take any iterable of tasks, never mutate it,
and never format output. Each one is a single linear scan.

Values that are not TaskStatus/TaskPriority members can only appear if the
Task constructor was bypassed; they are ignored by the counts below.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .task_models import Task, TaskPriority, TaskStatus

PriorityStatusCounts = dict[tuple[TaskPriority, TaskStatus], int]


@dataclass(frozen=True, slots=True)
class StatusCounts:
    done: int = 0
    pending: int = 0

    @property
    def total(self) -> int:
        return self.done + self.pending


@dataclass(frozen=True, slots=True)
class TaskReport:
    total: int
    by_status: StatusCounts
    by_priority_and_status: PriorityStatusCounts
    high_priority_pending: int
    all_high_priority_done: bool


def count_by_status(tasks: Iterable[Task]) -> StatusCounts:
    done = 0
    pending = 0
    for task in tasks:
        if task.status == TaskStatus.DONE:
            done += 1
        elif task.status == TaskStatus.PENDING:
            pending += 1
    return StatusCounts(done=done, pending=pending)


def count_high_priority_pending(tasks: Iterable[Task]) -> int:
    return sum(
        1
        for task in tasks
        if task.priority == TaskPriority.HIGH and task.status == TaskStatus.PENDING
    )


def all_high_priority_done(tasks: Iterable[Task]) -> bool:
    """True iff every high-priority task is done (vacuously true with none)."""
    return all(task.status == TaskStatus.DONE for task in tasks if task.priority == TaskPriority.HIGH)


def pending_tasks(tasks: Iterable[Task]) -> list[Task]:
    return [task for task in tasks if task.status == TaskStatus.PENDING]


def count_by_priority_and_status(tasks: Iterable[Task]) -> PriorityStatusCounts:
    counts: PriorityStatusCounts = {
        (priority, status): 0 for priority in TaskPriority for status in TaskStatus
    }
    for task in tasks:
        key = (task.priority, task.status)
        if key in counts:
            counts[key] += 1
    return counts


def build_report(tasks: Iterable[Task]) -> TaskReport:
    items = list(tasks)
    return TaskReport(
        total=len(items),
        by_status=count_by_status(items),
        by_priority_and_status=count_by_priority_and_status(items),
        high_priority_pending=count_high_priority_pending(items),
        all_high_priority_done=all_high_priority_done(items),
    )
