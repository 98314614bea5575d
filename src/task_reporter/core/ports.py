# src/task_reporter/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core produces data; rendering it is the job of whoever implements these
Protocols (console connector, test fakes).
"""

from collections.abc import Iterable
from typing import Protocol


class DisplaySink(Protocol):
    """Receives an ordered sequence of already formatted lines."""

    def show(self, lines: Iterable[str]) -> None: ...
