# src/saitama_chat/core/chat.py

"""
Core chat orchestration.

This module is transport-agnostic:
- connectors provide one inbound line at a time,
- the engine applies it to the task list,
- the formatter turns the outcome into text,
- connectors decide how to display the Reply (console, any event-driven UI).

`is_error` is a styling hint: set for hard errors and for soft failures
(e.g. "There is no such task to mark!"), so a UI can highlight both.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .formatter import format_outcome, greeting
from .outcomes import Failure
from .state import AppState

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Reply:
    text: str
    is_error: bool = False
    should_exit: bool = False


def welcome_reply() -> Reply:
    return Reply(text=greeting())


def respond(state: AppState, line: str) -> Reply:
    """Apply one user line to the engine and build the reply for it."""
    outcome = state.engine.submit(line)
    is_error = isinstance(outcome, Failure) or outcome.soft_failure
    if isinstance(outcome, Failure):
        # DEBUG only: INFO would print into the interactive console next to the reply.
        logger.debug("Rejected command: %s", type(outcome.error).__name__)
    return Reply(
        text=format_outcome(outcome),
        is_error=is_error,
        should_exit=outcome.should_exit,
    )
