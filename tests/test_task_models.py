# tests/test_task_models.py

from __future__ import annotations

import dataclasses

import pytest

from task_reporter.tasks.seed import DEFAULT_TASKS
from task_reporter.tasks.task_models import InvalidTask, Task, TaskPriority, TaskStatus


def test_from_raw_parses_and_normalizes() -> None:
    task = Task.from_raw("  Do laundry ", " Pending", "HIGH")
    assert task.description == "Do laundry"
    assert task.status is TaskStatus.PENDING
    assert task.priority is TaskPriority.HIGH
    assert task.is_high_priority
    assert not task.is_done


@pytest.mark.parametrize(
    ("description", "status", "priority"),
    [
        ("x", "finished", "high"),
        ("x", "done", "urgent"),
        ("", "done", "low"),
        ("   ", "pending", "low"),
        ("x", None, "low"),
    ],
)
def test_invalid_input_is_rejected(description, status, priority) -> None:
    with pytest.raises(InvalidTask):
        Task.from_raw(description, status, priority)


def test_direct_construction_requires_enum_members() -> None:
    with pytest.raises(InvalidTask):
        Task(description="x", status="done", priority=TaskPriority.LOW)  # type: ignore[arg-type]


def test_invalid_task_is_a_value_error() -> None:
    assert issubclass(InvalidTask, ValueError)


def test_task_is_immutable() -> None:
    task = Task.from_raw("x", "done", "low")
    with pytest.raises(dataclasses.FrozenInstanceError):
        task.status = TaskStatus.PENDING  # type: ignore[misc]


def test_dict_round_trip_for_one_task() -> None:
    raw = {"description": "Clean room", "status": "pending", "priority": "medium"}
    task = Task.from_dict(raw)
    assert task.to_dict() == raw
    assert Task.from_dict(task.to_dict()) == task


def test_default_seed_list() -> None:
    assert len(DEFAULT_TASKS) == 10
    assert DEFAULT_TASKS[0].description == "Make Fajr Salaah"
    assert DEFAULT_TASKS[-1].description == "Setup meetup with Abdul"
    assert all(isinstance(t, Task) for t in DEFAULT_TASKS)
