# src/task_tracker/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (real Settings or a test SimpleNamespace).
    settings: Any

    registry: TaskRepo

    # Identity passed as `caller` to every registry call from this front end.
    caller: str

    lock: threading.RLock = field(default_factory=threading.RLock)
