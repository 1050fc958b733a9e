# src/task_tracker/tasks/task_registry.py

from __future__ import annotations

import logging
import threading
from dataclasses import replace

from .task_errors import CapacityExceeded, Forbidden, NotFound
from .task_models import Task, TaskId

logger = logging.getLogger(__name__)

DEFAULT_MAX_TASKS = 1000


class TaskRegistry:
    """
    Bounded in-memory task registry.

    State:
    - tasks: id -> Task, entries are never removed
    - next_id: next id to hand out (equals the number of successful creations)
    - order: ids in creation order, used for per-owner listing

    Thread-safety:
    - every operation runs under a single lock, so a mutation is either
      fully visible or not visible at all
    """

    def __init__(self, max_tasks: int = DEFAULT_MAX_TASKS) -> None:
        if max_tasks < 1:
            raise ValueError("max_tasks must be >= 1")
        self._max_tasks = int(max_tasks)
        self._tasks: dict[TaskId, Task] = {}
        self._order: list[TaskId] = []
        self._next_id: TaskId = 0
        self._lock = threading.Lock()
        logger.info("TaskRegistry ready max_tasks=%s", self._max_tasks)

    @property
    def max_tasks(self) -> int:
        return self._max_tasks

    @property
    def next_id(self) -> TaskId:
        with self._lock:
            return self._next_id

    def count_tasks(self) -> int:
        with self._lock:
            return len(self._order)

    # ---- public API ----

    def create_task(
        self,
        title: str,
        description: str | None,
        deadline: int,
        caller: str,
    ) -> TaskId:
        """Store a new open task owned by caller and return its id."""
        with self._lock:
            if len(self._order) >= self._max_tasks:
                logger.info("Task rejected: capacity %s reached caller=%s", self._max_tasks, caller)
                raise CapacityExceeded(self._max_tasks)

            task_id = self._next_id
            self._tasks[task_id] = Task(
                title=title,
                description=description,
                deadline=deadline,
                creator=caller,
            )
            self._order.append(task_id)
            self._next_id += 1

        logger.debug("Task added id=%s creator=%s deadline=%s", task_id, caller, deadline)
        return task_id

    def complete_task(self, task_id: TaskId, caller: str) -> bool:
        """
        Mark a task as completed.

        Existence is checked before ownership. Completing an already
        completed task again by its creator succeeds.
        """
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                logger.info("Complete rejected: task_id=%s not found", task_id)
                raise NotFound(task_id)
            if task.creator != caller:
                logger.info(
                    "Complete rejected: task_id=%s caller=%s is not creator", task_id, caller
                )
                raise Forbidden(task_id, caller)
            task.completed = True

        logger.debug("Task completed id=%s", task_id)
        return True

    def get_task(self, task_id: TaskId) -> Task | None:
        """Return a snapshot of the task, or None if it does not exist."""
        with self._lock:
            task = self._tasks.get(task_id)
            return replace(task) if task is not None else None

    def get_user_tasks(self, caller: str) -> list[TaskId]:
        """Ids created by caller, in creation order."""
        with self._lock:
            return [tid for tid in self._order if self._tasks[tid].creator == caller]
