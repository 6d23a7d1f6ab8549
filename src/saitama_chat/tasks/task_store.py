# src/saitama_chat/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from collections.abc import Sequence
from pathlib import Path

from .task_models import Task, TaskKind, build_task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    SQLite task store.

    The task list is stored as a whole: `save_tasks` replaces every row in a
    single transaction, `position` keeps the display order.

    The schema is migration-safe:
    - create table if missing
    - use PRAGMA table_info to detect missing columns
    - add columns with ALTER TABLE only when needed

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        try:
            total = self.count_tasks()
        except sqlite3.Error:
            total = -1
        logger.info("TaskStore ready db=%s total=%s", self._db_path, total)

    @property
    def db_path(self) -> Path:
        return self._db_path

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()

            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    position INTEGER NOT NULL,
                    kind TEXT NOT NULL,
                    description TEXT NOT NULL,
                    marker TEXT,
                    done INTEGER NOT NULL DEFAULT 0,
                    updated_at REAL NOT NULL
                )
                """
            )

            # Migrations (safe): add missing columns.
            cur.execute("PRAGMA table_info(tasks)")
            cols = {row["name"] for row in cur.fetchall()}

            def add_col(name: str, decl: str) -> None:
                if name in cols:
                    return
                cur.execute(f"ALTER TABLE tasks ADD COLUMN {name} {decl}")
                logger.info("TaskStore migration: added column %s", name)

            add_col("position", "INTEGER NOT NULL DEFAULT 0")
            add_col("kind", "TEXT NOT NULL DEFAULT 'todo'")
            add_col("description", "TEXT NOT NULL DEFAULT ''")
            add_col("marker", "TEXT")
            add_col("done", "INTEGER NOT NULL DEFAULT 0")
            add_col("updated_at", "REAL NOT NULL DEFAULT 0")

            cur.execute("CREATE INDEX IF NOT EXISTS idx_tasks_position ON tasks(position)")

            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task | None:
        kind = TaskKind.from_db(row["kind"])
        if kind is None:
            logger.warning("Skipping stored task id=%s: unknown kind %r", row["id"], row["kind"])
            return None
        try:
            return build_task(
                kind,
                str(row["description"] or ""),
                row["marker"],
                done=bool(row["done"]),
            )
        except ValueError:
            logger.warning("Skipping stored task id=%s: empty description", row["id"])
            return None

    # ---- public API ----

    def count_tasks(self) -> int:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT COUNT(*) FROM tasks")
            (n,) = cur.fetchone()
            return int(n)
        finally:
            conn.close()

    def load_tasks(self) -> list[Task]:
        """Return stored tasks in display order."""
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT * FROM tasks ORDER BY position ASC, id ASC")
            rows = cur.fetchall()
        finally:
            conn.close()

        tasks = [t for t in (self._row_to_task(r) for r in rows) if t is not None]
        logger.debug("Loaded %d tasks (%d rows)", len(tasks), len(rows))
        return tasks

    def save_tasks(self, tasks: Sequence[Task]) -> None:
        """Replace the stored list with `tasks` (order preserved)."""
        now = time.time()
        conn = self._get_conn()
        try:
            with conn:
                conn.execute("DELETE FROM tasks")
                conn.executemany(
                    """
                    INSERT INTO tasks(position, kind, description, marker, done, updated_at)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    [
                        (pos, t.kind.value, t.description, t.marker, int(t.is_done()), now)
                        for pos, t in enumerate(tasks)
                    ],
                )
            logger.debug("Saved %d tasks to %s", len(tasks), self._db_path)
        finally:
            conn.close()
