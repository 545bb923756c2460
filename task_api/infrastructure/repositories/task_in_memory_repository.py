from __future__ import annotations

import asyncio
from typing import Dict, Iterable, List, Optional

from task_api.domain.errors import TaskAlreadyExistsError, TaskNotFoundError
from task_api.domain.repositories.task_repository import TaskRepository
from task_api.domain.task import Task
from task_api.domain.value_objects import TaskId


class TaskInMemoryRepository(TaskRepository):
    """
    In-memory TaskRepository for tests and local development.

    Not durable: data lives as long as the instance. Every mutating call runs
    under one asyncio.Lock, so a single operation is atomic; a use case spanning
    several calls is not.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None) -> None:
        self._data: Dict[TaskId, Task] = {t.id: t for t in tasks or ()}
        self._lock = asyncio.Lock()

    async def list(self) -> List[Task]:
        async with self._lock:
            return list(self._data.values())

    async def get_by_id(self, task_id: TaskId) -> Task:
        async with self._lock:
            task = self._data.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    async def register(self, task: Task) -> Task:
        async with self._lock:
            if task.id in self._data:
                raise TaskAlreadyExistsError(task.id)
            self._data[task.id] = task
        return task

    async def update(self, task: Task) -> Task:
        async with self._lock:
            if task.id not in self._data:
                raise TaskNotFoundError(task.id)
            self._data[task.id] = task
        return task

    async def delete(self, task_id: TaskId) -> None:
        async with self._lock:
            if self._data.pop(task_id, None) is None:
                raise TaskNotFoundError(task_id)
