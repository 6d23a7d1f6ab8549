# tests/test_chat.py

from __future__ import annotations

from saitama_chat.core.chat import Reply, respond, welcome_reply
from saitama_chat.core.state import AppState

from .fakes import FakeTaskRepo


def test_respond_add_then_list(state: AppState) -> None:
    added = respond(state, "todo read book")
    assert added == Reply(
        text="Got it. I've added this task:\n\t[T][ ] read book\nNow you have 1 tasks in the list.",
        is_error=False,
        should_exit=False,
    )

    listing = respond(state, "list")
    assert listing.text == "1.[T][ ] read book"
    assert not listing.is_error


def test_errors_and_soft_failures_are_flagged(state: AppState) -> None:
    assert respond(state, "blah").is_error
    assert respond(state, "list").is_error  # empty list
    respond(state, "todo a")
    missing = respond(state, "done 9")
    assert missing.is_error
    assert missing.text == "There is no such task to mark!"
    assert not respond(state, "done 1").is_error


def test_bye_requests_exit(state: AppState) -> None:
    reply = respond(state, "bye")
    assert reply.should_exit
    assert reply.text == "Hope to see you again!! ^_^"


def test_mutations_reach_the_repo(state: AppState, repo: FakeTaskRepo) -> None:
    respond(state, "deadline return book /by Sunday")
    respond(state, "done 1")
    respond(state, "list")
    respond(state, "nonsense")

    assert len(repo.saves) == 2
    assert repo.rows == [("deadline", "return book", "Sunday", True)]


def test_welcome_reply() -> None:
    reply = welcome_reply()
    assert "Saitama" in reply.text
    assert not reply.is_error and not reply.should_exit
