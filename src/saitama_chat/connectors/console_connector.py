# src/saitama_chat/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..core.chat import Reply, respond, welcome_reply
from ..core.formatter import loading_error
from ..core.state import AppState

logger = logging.getLogger(__name__)

ReadLine = Callable[[str], str]
Write = Callable[[str], None]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def format_reply_block(app_name: str, reply: Reply, ts: str | None = None) -> str:
    """`[ts] <<< Saitama: first line` with continuation lines tab-indented."""
    ts = ts or _ts_local()
    tag = " [!]" if reply.is_error else ""
    body = reply.text.replace("\n", "\n\t")
    return f"[{ts}] <<< {app_name}{tag}: {body}"


def run_console_loop(
    state: AppState,
    *,
    read_line: ReadLine = input,
    write: Write = print,
) -> None:
    """
    Read commands until "bye", EOF or Ctrl+C.

    `read_line` / `write` default to input() / print(); tests pass fakes.
    """
    app_name = str(getattr(state.settings, "app_name", "Saitama"))
    logger.info("Console connector started (tasks=%d).", len(state.engine))

    def show(reply: Reply) -> None:
        write(format_reply_block(app_name, reply))

    show(welcome_reply())
    if state.load_failed:
        show(Reply(text=loading_error(), is_error=True))

    while True:
        try:
            user_input = read_line(">>> You: ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not user_input:
            continue

        try:
            with state.lock:
                reply = respond(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = Reply(text="Internal error while handling a command.", is_error=True)

        show(reply)
        if reply.should_exit:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
