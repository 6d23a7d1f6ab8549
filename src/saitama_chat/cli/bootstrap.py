# src/saitama_chat/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- seeds the engine from the task store and wires persistence after each change.
"""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Sequence

from ..config import get_settings
from ..core.engine import TaskEngine
from ..core.parser import CommandParser
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)


def persist_tasks(store: TaskRepo, tasks: Sequence[Task]) -> bool:
    """Best-effort save; a storage failure must not end the session."""
    try:
        store.save_tasks(tasks)
        return True
    except (OSError, sqlite3.Error):
        logger.exception("Failed to save %d tasks.", len(tasks))
        return False


def create_initial_state(*, settings=None, store: TaskRepo | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the store) injectable makes the app easier to test.
    If settings is None, falls back to get_settings(). With `save_tasks` off
    and no explicit store, the session is in-memory only.
    """
    if settings is None:
        settings = get_settings()

    tasks: list[Task] = []
    load_failed = False

    if store is None and getattr(settings, "save_tasks", False):
        try:
            _ensure_local_dirs(settings)
            store = TaskStore(settings.tasks_db_path)
        except (OSError, sqlite3.Error):
            logger.exception("Task store unavailable at %s; tasks will not be saved.",
                             settings.tasks_db_path)
            load_failed = True

    if store is not None:
        try:
            tasks = store.load_tasks()
            logger.info("Loaded %d tasks.", len(tasks))
        except (OSError, sqlite3.Error):
            logger.exception("Failed to load tasks; starting with an empty list.")
            load_failed = True

    parser = CommandParser(aliases=getattr(settings, "command_aliases", None))
    on_change = None
    if store is not None:
        repo = store

        def on_change(current: Sequence[Task]) -> None:
            persist_tasks(repo, current)

    engine = TaskEngine(tasks, parser=parser, on_change=on_change)
    return AppState(settings=settings, engine=engine, task_store=store, load_failed=load_failed)


def save_state(state: AppState) -> None:
    if state.task_store is None:
        return
    if persist_tasks(state.task_store, state.engine.tasks):
        logger.info("Saved %d tasks.", len(state.engine))
