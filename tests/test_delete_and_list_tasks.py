# tests/test_delete_and_list_tasks.py

from __future__ import annotations

import pytest

from task_api.domain.errors import TaskNotFoundError
from task_api.domain.value_objects import TaskId
from task_api.presentation.usecases.task_delete import DeleteTask, DeleteTaskError
from task_api.presentation.usecases.task_dto import DeleteTaskCommand, TaskResult
from task_api.presentation.usecases.task_list import ListTasks, ListTasksError

from .fakes import BrokenTaskRepository


async def test_delete_existing_task(seeded_repository, seeded_tasks) -> None:
    task_id = seeded_tasks[0].id

    assert await DeleteTask(seeded_repository).execute(DeleteTaskCommand(id=str(task_id))) is None

    with pytest.raises(TaskNotFoundError):
        await seeded_repository.get_by_id(task_id)


async def test_delete_unknown_id_is_not_an_error(seeded_repository) -> None:
    result = await DeleteTask(seeded_repository).execute(DeleteTaskCommand(id=str(TaskId.new())))

    assert result is None
    assert len(await seeded_repository.list()) == 3


async def test_delete_twice_is_idempotent(seeded_repository, seeded_tasks) -> None:
    use_case = DeleteTask(seeded_repository)
    command = DeleteTaskCommand(id=str(seeded_tasks[0].id))

    assert await use_case.execute(command) is None
    assert await use_case.execute(command) is None


async def test_delete_malformed_id_is_invalid_id(seeded_repository) -> None:
    result = await DeleteTask(seeded_repository).execute(DeleteTaskCommand(id="nope"))
    assert result is DeleteTaskError.INVALID_ID


async def test_delete_storage_failure_is_repository_error() -> None:
    result = await DeleteTask(BrokenTaskRepository()).execute(
        DeleteTaskCommand(id=str(TaskId.new()))
    )
    assert result is DeleteTaskError.REPOSITORY_ERROR


async def test_list_returns_results_for_all_tasks(seeded_repository, seeded_tasks) -> None:
    result = await ListTasks(seeded_repository).execute()

    expected = {TaskResult.from_task(t) for t in seeded_tasks}
    assert set(result) == expected


async def test_list_storage_failure_is_repository_error() -> None:
    assert await ListTasks(BrokenTaskRepository()).execute() is ListTasksError.REPOSITORY_ERROR
