# src/saitama_chat/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a safe default; nothing is required at import time.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .core.parser import Keyword

ENV_PREFIX = "SAITAMA"

logger = logging.getLogger(__name__)

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def parse_aliases(raw: str | None) -> dict[str, Keyword]:
    """
    Parse "ls=list, rm=delete" into {"ls": Keyword.LIST, "rm": Keyword.DELETE}.
    Malformed pairs and unknown keywords are skipped.
    """
    out: dict[str, Keyword] = {}
    if not raw:
        return out
    for pair in raw.replace(";", ",").split(","):
        pair = pair.strip()
        if not pair:
            continue
        alias, sep, target = pair.partition("=")
        alias, target = alias.strip(), target.strip().upper()
        if not sep or not alias or not target:
            logger.warning("Ignoring malformed alias entry %r", pair)
            continue
        try:
            out[alias] = Keyword(target)
        except ValueError:
            logger.warning("Ignoring alias %r: unknown command %r", alias, target)
    return out


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Persistence ----
    save_tasks: bool
    data_dir: Path
    tasks_db_path: Path

    # ---- Commands ----
    command_aliases: dict[str, Keyword]

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "Saitama").strip() or "Saitama"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        save_tasks = _env_bool(_k("SAVE_TASKS"), True)
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/saitama"))
        tasks_db_path = _env_path(_k("TASKS_DB_PATH"), data_dir / "tasks.sqlite3")

        command_aliases = parse_aliases(os.getenv(_k("COMMAND_ALIASES")))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            save_tasks=save_tasks,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
            command_aliases=command_aliases,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
