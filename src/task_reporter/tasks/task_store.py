# src/task_reporter/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .seed import DEFAULT_TASKS
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory ordered task collection with a single owner.

    The only mutation is append; readers get immutable snapshots so a report
    never observes a half-applied change.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or ())
        logger.info("TaskStore ready total=%s", len(self._tasks))

    @classmethod
    def seeded(cls) -> TaskStore:
        return cls(DEFAULT_TASKS)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.snapshot())

    def count_tasks(self) -> int:
        return len(self._tasks)

    def snapshot(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def append(self, task: Task) -> int:
        """Append a task at the end and return the new collection size."""
        if not isinstance(task, Task):
            raise TypeError(f"expected Task, got {type(task).__name__}")
        self._tasks.append(task)
        logger.debug(
            "Task appended description=%r status=%s priority=%s total=%s",
            task.description,
            task.status.value,
            task.priority.value,
            len(self._tasks),
        )
        return len(self._tasks)
