from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from task_api.domain.task import Task
from task_api.domain.value_objects import TaskId


class TaskRepository(ABC):
    """
    Абстракция над хранилищем задач.

    Ошибки (task_api.domain.errors):
    - TaskNotFoundError      — задачи с таким id нет (get_by_id / update / delete)
    - TaskAlreadyExistsError — коллизия id при register
    - TaskStorageError       — сбой самого хранилища, никогда не означает "не найдено"
    """

    @abstractmethod
    async def list(self) -> List[Task]:
        """
        Return all stored tasks. Order is unspecified.
        """
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, task_id: TaskId) -> Task:
        """
        Return task entity by id or raise TaskNotFoundError.
        """
        raise NotImplementedError

    @abstractmethod
    async def register(self, task: Task) -> Task:
        """
        Persist new task entity verbatim. Raises TaskAlreadyExistsError on id collision.
        """
        raise NotImplementedError

    @abstractmethod
    async def update(self, task: Task) -> Task:
        """
        Fully replace the stored task with the same id. Raises TaskNotFoundError.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete(self, task_id: TaskId) -> None:
        """
        Remove the task. Raises TaskNotFoundError when nothing was stored under task_id.
        """
        raise NotImplementedError
