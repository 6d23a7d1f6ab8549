# src/saitama_chat/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (tasks loaded from the store), runs the
console loop in the main thread and saves the task list on the way out.
"""

from __future__ import annotations

import logging
import signal

from ..cli.bootstrap import create_initial_state, save_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _handle_sigterm(signum, _frame) -> None:
    logger.info("Signal %s received, shutting down...", signum)
    # Unwinds the console loop through the same path as Ctrl+C.
    raise KeyboardInterrupt


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)
    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    try:
        signal.signal(signal.SIGTERM, _handle_sigterm)
    except (ValueError, OSError, AttributeError):
        # Not on the main thread, or SIGTERM unsupported on this platform.
        pass

    try:
        run_console_loop(state)
    finally:
        save_state(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
