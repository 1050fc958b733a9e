# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.core.state import AppState
from task_tracker.tasks.task_registry import TaskRegistry

USER_A = "ST1234..."
USER_B = "ST5678..."


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI layer.

    A SimpleNamespace keeps unit tests isolated from the process environment.
    """
    return SimpleNamespace(
        app_name="task-tracker-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        max_tasks=1000,
        console_enabled=True,
        default_caller=USER_A,
    )


@pytest.fixture()
def registry() -> TaskRegistry:
    return TaskRegistry()


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return AppState(
        settings=settings,
        registry=TaskRegistry(max_tasks=settings.max_tasks),
        caller=settings.default_caller,
    )
