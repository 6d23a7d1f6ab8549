# src/saitama_chat/core/errors.py

"""
Hard failures raised while interpreting a command.

Soft results (an index that points nowhere, a search with no hits) are not
errors; they are ordinary outcome values (see core/outcomes.py).
"""

from __future__ import annotations


class SaitamaError(Exception):
    """Base class for user-facing command errors."""

    default_message = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self.args[0])


class InvalidCommandError(SaitamaError):
    """Unknown keyword, or a known keyword used with the wrong syntax."""

    default_message = "OOPS!!! I'm sorry, but I don't know what that means :-("


class IncompleteDescriptionError(SaitamaError):
    """An add-command (todo/deadline/event) with missing or malformed content."""

    _USAGE = {
        "deadline": "Usage: deadline <description> /by <date>",
        "event": "Usage: event <description> /at <time>",
    }

    def __init__(self, kind: str) -> None:
        self.kind = kind
        article = "an" if kind[:1] in "aeiou" else "a"
        message = f"OOPS!!! The description of {article} {kind} is incomplete."
        usage = self._USAGE.get(kind)
        if usage:
            message = f"{message}\n{usage}"
        super().__init__(message)
