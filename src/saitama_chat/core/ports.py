# src/saitama_chat/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations, so the
storage backend can be swapped and tests can use in-memory fakes.
"""

from collections.abc import Sequence
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Persists the ordered task list as a whole."""

    def load_tasks(self) -> list[Task]: ...
    def save_tasks(self, tasks: Sequence[Task]) -> None: ...
    def count_tasks(self) -> int: ...
