# tests/test_task_registry.py

from __future__ import annotations

import threading

import pytest

from task_tracker.tasks.task_errors import CapacityExceeded, Forbidden, NotFound
from task_tracker.tasks.task_registry import TaskRegistry

from .conftest import USER_A, USER_B


def test_create_task_stores_fields_and_owner(registry: TaskRegistry) -> None:
    task_id = registry.create_task("Sample Task", "This is a task description", 1234567890, USER_A)
    assert task_id == 0

    task = registry.get_task(0)
    assert task is not None
    assert task.title == "Sample Task"
    assert task.description == "This is a task description"
    assert task.deadline == 1234567890
    assert task.creator == USER_A
    assert task.completed is False


def test_ids_are_sequential_without_gaps(registry: TaskRegistry) -> None:
    ids = [registry.create_task(f"Task {i}", None, 1, USER_A if i % 2 else USER_B) for i in range(25)]
    assert ids == list(range(25))
    assert registry.next_id == 25
    assert registry.count_tasks() == 25


def test_capacity_limit_rejects_1001st_task(registry: TaskRegistry) -> None:
    for i in range(1000):
        registry.create_task(f"Task {i}", None, 1234567890, USER_A)

    with pytest.raises(CapacityExceeded) as exc:
        registry.create_task("New Task", None, 1234567890, USER_A)

    assert exc.value.code == 500
    assert registry.count_tasks() == 1000
    assert registry.next_id == 1000
    assert registry.get_task(1000) is None


def test_custom_capacity() -> None:
    reg = TaskRegistry(max_tasks=2)
    reg.create_task("a", None, 0, USER_A)
    reg.create_task("b", None, 0, USER_A)
    with pytest.raises(CapacityExceeded):
        reg.create_task("c", None, 0, USER_B)
    assert reg.get_user_tasks(USER_B) == []


def test_invalid_capacity() -> None:
    with pytest.raises(ValueError):
        TaskRegistry(max_tasks=0)


def test_owner_can_complete_and_recomplete(registry: TaskRegistry) -> None:
    registry.create_task("Task 1", "Description 1", 1234567890, USER_A)

    assert registry.complete_task(0, USER_A) is True
    assert registry.get_task(0).completed is True

    # idempotent for the owner
    assert registry.complete_task(0, USER_A) is True
    assert registry.get_task(0).completed is True


def test_non_creator_cannot_complete(registry: TaskRegistry) -> None:
    registry.create_task("Task 1", "Description 1", 1234567890, USER_A)

    with pytest.raises(Forbidden) as exc:
        registry.complete_task(0, USER_B)

    assert exc.value.code == 403
    assert registry.get_task(0).completed is False


def test_complete_missing_task_is_not_found(registry: TaskRegistry) -> None:
    with pytest.raises(NotFound) as exc:
        registry.complete_task(9999, USER_A)
    assert exc.value.code == 404


def test_existence_checked_before_ownership(registry: TaskRegistry) -> None:
    registry.create_task("Task 1", None, 1, USER_A)
    with pytest.raises(NotFound):
        registry.complete_task(1, USER_B)


def test_get_missing_task_returns_none(registry: TaskRegistry) -> None:
    assert registry.get_task(9999) is None


def test_get_task_returns_snapshot(registry: TaskRegistry) -> None:
    registry.create_task("Task 1", None, 1, USER_A)
    snap = registry.get_task(0)
    snap.completed = True
    snap.creator = USER_B

    stored = registry.get_task(0)
    assert stored.completed is False
    assert stored.creator == USER_A


def test_user_tasks_in_creation_order(registry: TaskRegistry) -> None:
    registry.create_task("Task 1", "Description 1", 1234567890, USER_A)
    registry.create_task("Task 2", "Description 2", 1234567890, USER_B)
    registry.create_task("Task 3", "Description 3", 1234567890, USER_A)

    assert registry.get_user_tasks(USER_A) == [0, 2]
    assert registry.get_user_tasks(USER_B) == [1]
    assert registry.get_user_tasks("nobody") == []


def test_sample_scenario(registry: TaskRegistry) -> None:
    assert registry.create_task("Sample Task", "desc", 1234567890, USER_A) == 0
    task = registry.get_task(0)
    assert task.title == "Sample Task"
    assert task.creator == USER_A

    with pytest.raises(Forbidden):
        registry.complete_task(0, USER_B)

    assert registry.complete_task(0, USER_A) is True
    assert registry.get_task(0).completed is True


def test_concurrent_creation_respects_capacity() -> None:
    reg = TaskRegistry(max_tasks=100)
    rejected: list[int] = []
    lock = threading.Lock()

    def worker(n: int) -> None:
        for i in range(30):
            try:
                reg.create_task(f"w{n}-{i}", None, 0, f"user{n}")
            except CapacityExceeded:
                with lock:
                    rejected.append(n)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(5)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert reg.count_tasks() == 100
    assert reg.next_id == 100
    assert len(rejected) == 50
    all_ids = sorted(tid for n in range(5) for tid in reg.get_user_tasks(f"user{n}"))
    assert all_ids == list(range(100))
