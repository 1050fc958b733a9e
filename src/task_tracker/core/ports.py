# src/task_tracker/core/ports.py

"""
Ports (interfaces) used by the front end.

Commands and the dispatch API depend on this Protocol rather than on
TaskRegistry directly, which keeps them easy to test with fakes.
"""

from __future__ import annotations

from typing import Protocol

from ..tasks.task_models import Task, TaskId


class TaskRepo(Protocol):
    @property
    def max_tasks(self) -> int: ...

    def count_tasks(self) -> int: ...

    def create_task(
            self,
            title: str,
            description: str | None,
            deadline: int,
            caller: str,
    ) -> TaskId: ...

    def complete_task(self, task_id: TaskId, caller: str) -> bool: ...
    def get_task(self, task_id: TaskId) -> Task | None: ...
    def get_user_tasks(self, caller: str) -> list[TaskId]: ...
