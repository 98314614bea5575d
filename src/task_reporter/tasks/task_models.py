# src/task_reporter/tasks/task_models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class InvalidTask(ValueError):
    """Raised when a task is built from an unknown status/priority or an empty description."""


class TaskStatus(StrEnum):
    DONE = "done"
    PENDING = "pending"

    @classmethod
    def parse(cls, raw: Any) -> TaskStatus:
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            raise InvalidTask(f"unknown task status: {raw!r}") from None


class TaskPriority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, raw: Any) -> TaskPriority:
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            raise InvalidTask(f"unknown task priority: {raw!r}") from None


@dataclass(frozen=True, slots=True)
class Task:
    """
    A single task record.

    Tasks never change after construction; the collection only grows by
    appending new ones.
    """

    description: str
    status: TaskStatus
    priority: TaskPriority

    def __post_init__(self) -> None:
        if not isinstance(self.description, str) or not self.description.strip():
            raise InvalidTask("description is required")
        if not isinstance(self.status, TaskStatus):
            raise InvalidTask(f"status must be a TaskStatus, got {self.status!r}")
        if not isinstance(self.priority, TaskPriority):
            raise InvalidTask(f"priority must be a TaskPriority, got {self.priority!r}")

    @classmethod
    def from_raw(cls, description: str, status: Any, priority: Any) -> Task:
        return cls(
            description=str(description or "").strip(),
            status=TaskStatus.parse(status),
            priority=TaskPriority.parse(priority),
        )

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Task:
        return cls.from_raw(
            raw.get("description", ""),
            raw.get("status"),
            raw.get("priority"),
        )

    @property
    def is_done(self) -> bool:
        return self.status == TaskStatus.DONE

    @property
    def is_high_priority(self) -> bool:
        return self.priority == TaskPriority.HIGH

    def to_dict(self) -> dict[str, str]:
        return {
            "description": self.description,
            "status": self.status.value,
            "priority": self.priority.value,
        }
