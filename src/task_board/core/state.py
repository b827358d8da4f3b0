# src/task_board/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (config.Settings or a test double with the same attributes).
    settings: object

    task_store: TaskRepo

    # Optional: hosts with more than one caller serialize store calls through this.
    lock: threading.Lock = field(default_factory=threading.Lock)
