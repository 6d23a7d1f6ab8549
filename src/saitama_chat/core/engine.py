# src/saitama_chat/core/engine.py

"""
Task engine: owns the ordered task list and applies commands to it.

Key invariants:
- the task list is only mutated here, one step per command,
- payload validation always happens before that step (no partial mutation),
- task numbers are positional (1-based) and shift down after a delete,
- hard errors are raised by handlers and caught only in `submit`.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Sequence

from ..tasks.task_models import Deadline, Event, Task, Todo
from .errors import IncompleteDescriptionError, InvalidCommandError, SaitamaError
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
from .parser import Command, CommandParser, Keyword

logger = logging.getLogger(__name__)

CommandHandler = Callable[[str], Outcome]
ChangeListener = Callable[[Sequence[Task]], None]

_INDEX_RE = re.compile(r"\d+")


def _separator_re(sep: str) -> re.Pattern[str]:
    # Whole payload must look like "<detail> /by <marker>": detail starts with non-space,
    # a space precedes some separator, and non-space text follows it.
    return re.compile(rf"\S.*\s{re.escape(sep)}\s*\S.*", re.DOTALL)


_SEPARATORS = {"deadline": "/by", "event": "/at"}
_DEADLINE_RE = _separator_re(_SEPARATORS["deadline"])
_EVENT_RE = _separator_re(_SEPARATORS["event"])


class TaskEngine:
    def __init__(
        self,
        tasks: Iterable[Task] = (),
        *,
        parser: CommandParser | None = None,
        on_change: ChangeListener | None = None,
    ) -> None:
        self._tasks: list[Task] = list(tasks)
        self._parser = parser or CommandParser()
        self._on_change = on_change
        self._handlers: dict[Keyword, CommandHandler] = {}

        self.register(Keyword.TODO, self._add_todo)
        self.register(Keyword.DEADLINE, self._add_deadline)
        self.register(Keyword.EVENT, self._add_event)
        self.register(Keyword.LIST, self._list)
        self.register(Keyword.DONE, self._mark)
        self.register(Keyword.DELETE, self._delete)
        self.register(Keyword.BYE, self._bye)
        self.register(Keyword.FIND, self._find)

        missing = self._parser.keywords - set(self._handlers)
        if missing:
            raise RuntimeError(f"No handler registered for: {', '.join(sorted(missing))}")

    def register(self, keyword: Keyword, handler: CommandHandler) -> None:
        self._handlers[keyword] = handler

    # ---- read-only view ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- entry points ----

    def submit(self, raw_line: str) -> Outcome:
        """Parse and apply one line. Hard errors come back as Failure outcomes."""
        try:
            command = self._parser.parse(raw_line)
            return self.execute(command)
        except SaitamaError as e:
            logger.debug("Command rejected line=%r error=%s", raw_line, type(e).__name__)
            return Failure(error=e)

    def execute(self, command: Command) -> Outcome:
        """Apply an already parsed command. Raises SaitamaError on bad payloads."""
        handler = self._handlers.get(command.keyword)
        if handler is None:
            raise InvalidCommandError()

        logger.debug("Executing %s payload=%r", command.keyword, command.payload)
        outcome = handler(command.payload)

        if outcome.mutated and self._on_change is not None:
            self._on_change(self.tasks)
        return outcome

    # ---- helpers ----

    def _append(self, task: Task) -> Outcome:
        self._tasks.append(task)
        return TaskAdded(task=task, total=len(self._tasks))

    @staticmethod
    def _split_marker(payload: str, pattern: re.Pattern[str], kind: str) -> tuple[str, str]:
        if not pattern.fullmatch(payload):
            raise IncompleteDescriptionError(kind)
        # Split at the first separator, even one glued to the preceding word.
        sep = _SEPARATORS[kind]
        i = payload.find(sep)
        detail, marker = payload[:i].strip(), payload[i + len(sep) :].strip()
        if not detail or not marker:
            raise IncompleteDescriptionError(kind)
        return detail, marker

    def _resolve_index(self, payload: str) -> int | None:
        """Return the 0-based index for a 1-based task number, None if out of range."""
        if not _INDEX_RE.fullmatch(payload):
            raise InvalidCommandError()
        index = int(payload) - 1
        if index < 0 or index >= len(self._tasks):
            return None
        return index

    # ---- handlers ----

    def _add_todo(self, payload: str) -> Outcome:
        if not payload.strip():
            raise IncompleteDescriptionError("todo")
        return self._append(Todo(payload))

    def _add_deadline(self, payload: str) -> Outcome:
        detail, by = self._split_marker(payload, _DEADLINE_RE, "deadline")
        return self._append(Deadline(detail, by))

    def _add_event(self, payload: str) -> Outcome:
        detail, at = self._split_marker(payload, _EVENT_RE, "event")
        return self._append(Event(detail, at))

    def _list(self, payload: str) -> Outcome:
        if payload:
            raise InvalidCommandError()
        if not self._tasks:
            return EmptyList()
        return TaskList(tasks=self.tasks)

    def _mark(self, payload: str) -> Outcome:
        index = self._resolve_index(payload)
        if index is None:
            return NoSuchTask(action="mark")
        task = self._tasks[index]
        task.mark_done()
        return TaskMarked(task=task)

    def _delete(self, payload: str) -> Outcome:
        index = self._resolve_index(payload)
        if index is None:
            return NoSuchTask(action="delete")
        task = self._tasks.pop(index)
        return TaskDeleted(task=task, total=len(self._tasks))

    def _bye(self, payload: str) -> Outcome:
        if payload:
            raise InvalidCommandError()
        return Farewell()

    def _find(self, payload: str) -> Outcome:
        if not payload:
            return MissingKeyword()
        found = tuple(t for t in self._tasks if payload in t.description)
        if not found:
            return NoMatch(keyword=payload)
        return FoundTasks(keyword=payload, tasks=found)
