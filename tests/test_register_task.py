# tests/test_register_task.py

from __future__ import annotations

from uuid import UUID

import pytest

from task_api.domain.errors import TaskAlreadyExistsError
from task_api.domain.task import Task
from task_api.domain.value_objects import TaskId
from task_api.infrastructure.repositories.task_in_memory_repository import TaskInMemoryRepository
from task_api.presentation.usecases.task_dto import RegisterTaskCommand, TaskResult
from task_api.presentation.usecases.task_register import RegisterTask, RegisterTaskError

from .fakes import BrokenTaskRepository


async def test_register_returns_result_with_plain_fields(repository) -> None:
    result = await RegisterTask(repository).execute(
        RegisterTaskCommand(title="Task Title", description="Task Description", status=2)
    )

    assert isinstance(result, TaskResult)
    assert result.title == "Task Title"
    assert result.description == "Task Description"
    assert result.status == 2
    UUID(result.id)


async def test_registered_task_is_stored(repository) -> None:
    result = await RegisterTask(repository).execute(
        RegisterTaskCommand(title="  Trim me ", description="desc", status=1)
    )

    stored = await repository.get_by_id(TaskId.parse(result.id))
    assert TaskResult.from_task(stored) == result
    assert stored.title.value == "Trim me"


async def test_each_registration_gets_fresh_id(repository) -> None:
    use_case = RegisterTask(repository)
    command = RegisterTaskCommand(title="same", description="same", status=1)

    first = await use_case.execute(command)
    second = await use_case.execute(command)

    assert first.id != second.id
    assert len(await repository.list()) == 2


async def test_empty_title_is_invalid_title(repository) -> None:
    result = await RegisterTask(repository).execute(
        RegisterTaskCommand(title="", description="Task Description", status=2)
    )

    assert result is RegisterTaskError.INVALID_TITLE
    assert await repository.list() == []


async def test_unknown_status_is_invalid_status(repository) -> None:
    result = await RegisterTask(repository).execute(
        RegisterTaskCommand(title="Task Title", description="Task Description", status=5)
    )

    assert result is RegisterTaskError.INVALID_STATUS


async def test_too_long_description_is_invalid_description(repository) -> None:
    result = await RegisterTask(repository).execute(
        RegisterTaskCommand(title="Task Title", description="x" * 257, status=1)
    )

    assert result is RegisterTaskError.INVALID_DESCRIPTION


@pytest.mark.parametrize(
    "title, description, status, expected",
    [
        ("", "", 0, RegisterTaskError.INVALID_TITLE),
        ("ok", "", 0, RegisterTaskError.INVALID_DESCRIPTION),
        ("ok", "ok", 0, RegisterTaskError.INVALID_STATUS),
    ],
)
async def test_first_failing_field_is_reported(repository, title, description, status, expected) -> None:
    result = await RegisterTask(repository).execute(
        RegisterTaskCommand(title=title, description=description, status=status)
    )
    assert result is expected


async def test_storage_failure_is_repository_error() -> None:
    repo = BrokenTaskRepository()

    result = await RegisterTask(repo).execute(
        RegisterTaskCommand(title="Task Title", description="Task Description", status=1)
    )

    assert result is RegisterTaskError.REPOSITORY_ERROR
    assert repo.calls == ["register"]


class _CollidingRepository(TaskInMemoryRepository):
    async def register(self, task: Task) -> Task:
        raise TaskAlreadyExistsError(task.id)


async def test_id_collision_is_repository_error() -> None:
    result = await RegisterTask(_CollidingRepository()).execute(
        RegisterTaskCommand(title="Task Title", description="Task Description", status=1)
    )

    assert result is RegisterTaskError.REPOSITORY_ERROR
