# src/task_tracker/tasks/task_errors.py

from __future__ import annotations

from .task_models import TaskId


class TaskError(Exception):
    """Base class for expected registry rejections. State is unchanged when raised."""

    code: int = 400


class CapacityExceeded(TaskError):
    code = 500

    def __init__(self, capacity: int) -> None:
        super().__init__(f"task limit reached ({capacity})")
        self.capacity = capacity


class NotFound(TaskError):
    code = 404

    def __init__(self, task_id: TaskId) -> None:
        super().__init__(f"task {task_id} not found")
        self.task_id = task_id


class Forbidden(TaskError):
    code = 403

    def __init__(self, task_id: TaskId, caller: str) -> None:
        super().__init__(f"only the creator can complete task {task_id}")
        self.task_id = task_id
        self.caller = caller
