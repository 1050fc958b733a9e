# src/task_tracker/tasks/task_api.py

"""
Contract-style helpers around TaskRegistry.

Every call returns a response dict:
- {"value": ...} on success
- {"error": code} on an expected rejection (500 capacity, 404 not found, 403 forbidden)

Input validation happens here, before the registry is touched.
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from ..core.ports import TaskRepo
from .task_errors import TaskError
from .task_models import Task, TaskId

logger = logging.getLogger(__name__)

Response = dict[str, Any]


def task_to_dict(task: Task) -> dict[str, Any]:
    return asdict(task)


def _require_caller(caller: str) -> str:
    if not isinstance(caller, str) or not caller.strip():
        raise ValueError("caller is required")
    return caller


def _require_task_id(task_id: int) -> TaskId:
    if isinstance(task_id, bool) or not isinstance(task_id, int) or task_id < 0:
        raise ValueError("task_id must be a non-negative integer")
    return task_id


def validate_new_task(
    title: str, description: str | None, deadline: int
) -> tuple[str, str | None, int]:
    """Reject malformed fields and return them normalized (stripped title)."""
    if not isinstance(title, str) or not title.strip():
        raise ValueError("title is required")
    if description is not None and not isinstance(description, str):
        raise ValueError("description must be a string or None")
    if isinstance(deadline, bool) or not isinstance(deadline, int) or deadline < 0:
        raise ValueError("deadline must be a non-negative integer timestamp")
    return title.strip(), description, deadline


def create_task(
    registry: TaskRepo,
    *,
    title: str,
    description: str | None,
    deadline: int,
    caller: str,
) -> Response:
    title, description, deadline = validate_new_task(title, description, deadline)
    caller = _require_caller(caller)
    try:
        return {"value": registry.create_task(title, description, deadline, caller)}
    except TaskError as e:
        return {"error": e.code}


def complete_task(registry: TaskRepo, task_id: int, caller: str) -> Response:
    task_id = _require_task_id(task_id)
    caller = _require_caller(caller)
    try:
        return {"value": registry.complete_task(task_id, caller)}
    except TaskError as e:
        return {"error": e.code}


def get_task(registry: TaskRepo, task_id: int) -> Response:
    task = registry.get_task(_require_task_id(task_id))
    return {"value": task_to_dict(task) if task is not None else None}


def get_user_tasks(registry: TaskRepo, caller: str) -> Response:
    return {"value": registry.get_user_tasks(_require_caller(caller))}
