# src/saitama_chat/tasks/task_models.py

from __future__ import annotations

from enum import StrEnum


class TaskKind(StrEnum):
    """Task variant tag. Values are stored as-is by the task store."""

    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"

    @classmethod
    def from_db(cls, raw: str | None) -> TaskKind | None:
        if not raw:
            return None
        try:
            return cls(raw.lower())
        except ValueError:
            return None


class Task:
    """
    Base task: a description plus a done flag.

    Subclasses set `kind`, `symbol` and, when they carry one, a `marker`
    (free text such as a date) shown after the description.
    """

    kind: TaskKind
    symbol: str = "?"

    def __init__(self, description: str, *, done: bool = False) -> None:
        description = (description or "").strip()
        if not description:
            raise ValueError("description is required")
        self.description = description
        self.done = bool(done)

    @property
    def marker(self) -> str | None:
        return None

    def is_done(self) -> bool:
        return self.done

    def mark_done(self) -> None:
        # Marking twice is fine.
        self.done = True

    def status_icon(self) -> str:
        return "X" if self.done else " "

    def render(self) -> str:
        return f"[{self.symbol}][{self.status_icon()}] {self.description}"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(description={self.description!r}, "
            f"marker={self.marker!r}, done={self.done!r})"
        )


class Todo(Task):
    kind = TaskKind.TODO
    symbol = "T"


class Deadline(Task):
    kind = TaskKind.DEADLINE
    symbol = "D"

    def __init__(self, description: str, by: str, *, done: bool = False) -> None:
        super().__init__(description, done=done)
        self.by = (by or "").strip()

    @property
    def marker(self) -> str | None:
        return self.by

    def render(self) -> str:
        return f"{super().render()} (by: {self.by})"


class Event(Task):
    kind = TaskKind.EVENT
    symbol = "E"

    def __init__(self, description: str, at: str, *, done: bool = False) -> None:
        super().__init__(description, done=done)
        self.at = (at or "").strip()

    @property
    def marker(self) -> str | None:
        return self.at

    def render(self) -> str:
        return f"{super().render()} (at: {self.at})"


def build_task(
    kind: TaskKind, description: str, marker: str | None = None, *, done: bool = False
) -> Task:
    """Construct the variant for `kind` (used when restoring stored tasks)."""
    if kind is TaskKind.TODO:
        return Todo(description, done=done)
    if kind is TaskKind.DEADLINE:
        return Deadline(description, marker or "", done=done)
    if kind is TaskKind.EVENT:
        return Event(description, marker or "", done=done)
    raise ValueError(f"unknown task kind: {kind!r}")
