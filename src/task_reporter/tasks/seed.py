# src/task_reporter/tasks/seed.py

"""Default task list the store is seeded with at startup."""

from __future__ import annotations

from .task_models import Task

_DEFAULT_TASK_ROWS: tuple[tuple[str, str, str], ...] = (
    ("Make Fajr Salaah", "done", "high"),
    ("Fetch banana and water meal", "done", "medium"),
    ("Read Quran", "done", "high"),
    ("Clean room", "pending", "medium"),
    ("Attain more LinkedIn connections", "pending", "low"),
    ("Rebook CPUT graduation ceremony ticket", "pending", "high"),
    ("Schedule booking with dentist", "pending", "medium"),
    ("Help sister learn basic web development", "pending", "medium"),
    ("Do laundry", "pending", "high"),
    ("Setup meetup with Abdul", "pending", "low"),
)

DEFAULT_TASKS: tuple[Task, ...] = tuple(
    Task.from_raw(description, status, priority)
    for description, status, priority in _DEFAULT_TASK_ROWS
)

# Task appended by the demo run ("append, then report").
DEMO_NEW_TASK = Task.from_raw("Finish async revision", "pending", "high")
