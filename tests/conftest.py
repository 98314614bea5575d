# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_reporter.core.state import AppState
from task_reporter.tasks.task_models import Task
from task_reporter.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="task-reporter-test",
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
        append_delay_seconds=0.0,
        seed_defaults=True,
    )


@pytest.fixture()
def three_tasks() -> list[Task]:
    return [
        Task.from_raw("Read Quran", "done", "high"),
        Task.from_raw("Clean room", "pending", "medium"),
        Task.from_raw("Do laundry", "pending", "high"),
    ]


@pytest.fixture()
def state(settings: SimpleNamespace, three_tasks: list[Task]) -> AppState:
    return AppState(settings=settings, task_store=TaskStore(three_tasks))
