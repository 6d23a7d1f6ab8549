# tests/test_console_connector.py

from __future__ import annotations

from collections.abc import Iterator

from saitama_chat.connectors.console_connector import format_reply_block, run_console_loop
from saitama_chat.core.chat import Reply
from saitama_chat.core.state import AppState


def _reader(lines: list[str]):
    it: Iterator[str] = iter(lines)

    def read_line(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line


def test_format_reply_block_indents_continuation_lines() -> None:
    reply = Reply(text="Nice!\n\t[T][X] a")
    assert format_reply_block("Saitama", reply, ts="T") == "[T] <<< Saitama: Nice!\n\t\t[T][X] a"
    assert format_reply_block("S", Reply(text="no", is_error=True), ts="T") == "[T] <<< S [!]: no"


def test_loop_runs_until_bye(state: AppState) -> None:
    out: list[str] = []
    run_console_loop(
        state,
        read_line=_reader(["todo a", "", "done 7", "list", "bye", "todo never"]),
        write=out.append,
    )

    assert len(out) == 5  # greeting + 4 replies; the blank line is skipped
    assert "Hello! I'm Saitama" in out[0]
    assert "There is no such task to mark!" in out[2]
    assert "1.[T][ ] a" in out[3]
    assert out[4].endswith("Hope to see you again!! ^_^")
    assert [t.description for t in state.engine.tasks] == ["a"]


def test_loop_stops_on_eof(state: AppState) -> None:
    out: list[str] = []
    run_console_loop(state, read_line=_reader(["todo a"]), write=out.append)
    assert len(out) == 2
    assert len(state.engine) == 1


def test_loop_reports_load_failure(state: AppState) -> None:
    state.load_failed = True
    out: list[str] = []
    run_console_loop(state, read_line=_reader([]), write=out.append)
    assert "There is an error while loading tasks or commands." in out[1]
    assert "[!]" in out[1]
