# tests/test_in_memory_repository.py

from __future__ import annotations

import asyncio

import pytest

from task_api.domain.errors import TaskAlreadyExistsError, TaskNotFoundError
from task_api.domain.task import Task
from task_api.domain.value_objects import TaskId, TaskStatus, TaskTitle
from task_api.infrastructure.repositories.task_in_memory_repository import TaskInMemoryRepository

from .conftest import make_task


async def test_list_when_tasks_are_registered_then_returns_all(seeded_repository) -> None:
    tasks = await seeded_repository.list()
    assert len(tasks) == 3


async def test_list_when_empty_then_returns_empty_list(repository) -> None:
    assert await repository.list() == []


async def test_register_then_get_by_id_returns_equal_task(repository) -> None:
    task = make_task("DDD", "DDD", TaskStatus.DOING)

    registered = await repository.register(task)
    fetched = await repository.get_by_id(task.id)

    assert registered == task
    assert fetched == task


async def test_register_with_taken_id_fails(repository) -> None:
    task = make_task()
    await repository.register(task)

    with pytest.raises(TaskAlreadyExistsError):
        await repository.register(task.with_title(TaskTitle("dup")))

    # first write wins, nothing overwritten
    assert (await repository.get_by_id(task.id)).title.value == "AAA"


async def test_get_by_id_unknown_raises_not_found(seeded_repository) -> None:
    with pytest.raises(TaskNotFoundError):
        await seeded_repository.get_by_id(TaskId.new())


async def test_update_replaces_stored_task(seeded_repository, seeded_tasks: list[Task]) -> None:
    original = seeded_tasks[0]
    changed = original.with_title(TaskTitle("AAA2")).with_status(TaskStatus.DONE)

    updated = await seeded_repository.update(changed)

    assert updated == changed
    assert await seeded_repository.get_by_id(original.id) == changed


async def test_update_unknown_raises_not_found(repository) -> None:
    with pytest.raises(TaskNotFoundError):
        await repository.update(make_task())
    assert await repository.list() == []


async def test_delete_removes_task(seeded_repository, seeded_tasks: list[Task]) -> None:
    await seeded_repository.delete(seeded_tasks[0].id)

    assert len(await seeded_repository.list()) == 2
    with pytest.raises(TaskNotFoundError):
        await seeded_repository.get_by_id(seeded_tasks[0].id)


async def test_delete_unknown_raises_not_found(seeded_repository) -> None:
    with pytest.raises(TaskNotFoundError):
        await seeded_repository.delete(TaskId.new())
    assert len(await seeded_repository.list()) == 3


async def test_instances_do_not_share_state() -> None:
    first, second = TaskInMemoryRepository(), TaskInMemoryRepository()
    await first.register(make_task())
    assert await second.list() == []


async def test_concurrent_registers_are_all_stored(repository) -> None:
    tasks = [make_task(f"t{i}", f"d{i}") for i in range(50)]

    await asyncio.gather(*(repository.register(t) for t in tasks))

    assert {t.id for t in await repository.list()} == {t.id for t in tasks}
