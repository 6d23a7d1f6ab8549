# src/saitama_chat/core/outcomes.py

"""
Results of applying one command to the task list.

Outcomes are transient: produced by TaskEngine, consumed by the formatter,
then dropped. `soft_failure` marks well-formed commands that found nothing
to act on; they are reported to the user but are not errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ..tasks.task_models import Task
from .errors import SaitamaError


@dataclass(frozen=True, slots=True)
class Outcome:
    @property
    def soft_failure(self) -> bool:
        return False

    @property
    def should_exit(self) -> bool:
        return False

    @property
    def mutated(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class TaskAdded(Outcome):
    task: Task
    total: int

    @property
    def mutated(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class TaskList(Outcome):
    tasks: tuple[Task, ...]


@dataclass(frozen=True, slots=True)
class EmptyList(Outcome):
    @property
    def soft_failure(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class TaskMarked(Outcome):
    task: Task

    @property
    def mutated(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class TaskDeleted(Outcome):
    task: Task
    total: int

    @property
    def mutated(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class NoSuchTask(Outcome):
    action: Literal["mark", "delete"]

    @property
    def soft_failure(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class FoundTasks(Outcome):
    keyword: str
    tasks: tuple[Task, ...]


@dataclass(frozen=True, slots=True)
class NoMatch(Outcome):
    keyword: str

    @property
    def soft_failure(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class MissingKeyword(Outcome):
    @property
    def soft_failure(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Farewell(Outcome):
    @property
    def should_exit(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failure(Outcome):
    """A hard error caught at TaskEngine.submit."""

    error: SaitamaError
