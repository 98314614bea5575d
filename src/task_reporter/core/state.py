# src/task_reporter/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings-like object; tests pass a SimpleNamespace with the same fields.
    settings: Any
    task_store: TaskStore
