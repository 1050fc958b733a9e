# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass

TaskId = int


@dataclass(slots=True)
class Task:
    """
    A unit of work owned by its creator.

    Notes:
    - creator is fixed at creation time
    - completed only ever moves False -> True
    """

    title: str
    description: str | None
    deadline: int
    creator: str
    completed: bool = False
