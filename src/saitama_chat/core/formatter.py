# src/saitama_chat/core/formatter.py

"""
Outcome -> user-facing text.

Pure functions only. The wording and the "<n>.<task>" numbering are shared by
every front-end, so keep them stable.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from ..tasks.task_models import Task
from .errors import SaitamaError
from .outcomes import (
    EmptyList,
    Failure,
    Farewell,
    FoundTasks,
    MissingKeyword,
    NoMatch,
    NoSuchTask,
    Outcome,
    TaskAdded,
    TaskDeleted,
    TaskList,
    TaskMarked,
)

GREETING: Final[str] = (
    "Hello! I'm Saitama\n"
    "I do 100 sit-ups, 100 push-ups, 100 squats\n"
    "and a 10 kilometer run every day! No cap"
)
FAREWELL: Final[str] = "Hope to see you again!! ^_^"
LOADING_ERROR: Final[str] = "There is an error while loading tasks or commands."


def greeting() -> str:
    return GREETING


def loading_error() -> str:
    return LOADING_ERROR


def format_task_lines(tasks: Iterable[Task]) -> list[str]:
    return [f"{i}.{task.render()}" for i, task in enumerate(tasks, start=1)]


def format_error(error: SaitamaError) -> str:
    return error.message


def format_outcome(outcome: Outcome) -> str:
    if isinstance(outcome, TaskAdded):
        return (
            "Got it. I've added this task:\n"
            f"\t{outcome.task.render()}\n"
            f"Now you have {outcome.total} tasks in the list."
        )

    if isinstance(outcome, TaskList):
        return "\n".join(format_task_lines(outcome.tasks))

    if isinstance(outcome, EmptyList):
        return "You have no task!"

    if isinstance(outcome, TaskMarked):
        return f"Nice! I've marked this task as done: \n\t{outcome.task.render()}"

    if isinstance(outcome, TaskDeleted):
        return (
            "Noted. I've removed this task: \n"
            f"\t{outcome.task.render()}\n"
            f"Now you have {outcome.total} tasks in the list."
        )

    if isinstance(outcome, NoSuchTask):
        if outcome.action == "delete":
            return "There is no such task to delete!"
        return "There is no such task to mark!"

    if isinstance(outcome, FoundTasks):
        if len(outcome.tasks) > 1:
            header = "Here are the matching tasks in your list:"
        else:
            header = "Here is the matching task in your list:"
        return "\n".join([header, *format_task_lines(outcome.tasks)])

    if isinstance(outcome, NoMatch):
        return "No task is found!"

    if isinstance(outcome, MissingKeyword):
        return "There is no keyword to search for!"

    if isinstance(outcome, Farewell):
        return FAREWELL

    if isinstance(outcome, Failure):
        return format_error(outcome.error)

    raise TypeError(f"Unsupported outcome: {type(outcome).__name__}")
