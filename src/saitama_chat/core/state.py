# src/saitama_chat/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from .engine import TaskEngine
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (config.Settings or a test double with the same attributes).
    settings: Any

    engine: TaskEngine
    task_store: TaskRepo | None = None

    # Set when stored tasks could not be loaded; the session starts with an empty list.
    load_failed: bool = False

    # Event-driven front-ends serialize calls into the engine with this lock.
    lock: threading.Lock = field(default_factory=threading.Lock)
