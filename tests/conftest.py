# tests/conftest.py

from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from task_api.domain.task import Task
from task_api.domain.value_objects import TaskDescription, TaskId, TaskStatus, TaskTitle
from task_api.infrastructure.repositories.task_in_memory_repository import TaskInMemoryRepository
from task_api.presentation.http.app import create_app


def make_task(
    title: str = "AAA",
    description: str = "AAA",
    status: TaskStatus = TaskStatus.TODO,
) -> Task:
    return Task.create(
        TaskId.new(),
        TaskTitle(title),
        TaskDescription(description),
        status,
    )


@pytest.fixture()
def seeded_tasks() -> list[Task]:
    return [
        make_task("AAA", "AAA"),
        make_task("BBB", "BBB", TaskStatus.DOING),
        make_task("CCC", "CCC", TaskStatus.DONE),
    ]


@pytest.fixture()
def repository() -> TaskInMemoryRepository:
    """
    Fresh, isolated in-memory repository per test.
    """
    return TaskInMemoryRepository()


@pytest.fixture()
def seeded_repository(seeded_tasks: list[Task]) -> TaskInMemoryRepository:
    return TaskInMemoryRepository(seeded_tasks)


@pytest.fixture()
def client(repository: TaskInMemoryRepository) -> Iterator[TestClient]:
    """
    HTTP client over the real app, wired to the in-memory repository.
    """
    app = create_app(repository=repository)
    with TestClient(app) as test_client:
        yield test_client
