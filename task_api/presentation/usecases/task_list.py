from __future__ import annotations

import logging
from enum import Enum
from typing import List, Union

from task_api.domain.errors import TaskRepositoryError
from task_api.domain.repositories.task_repository import TaskRepository
from task_api.presentation.usecases.task_dto import TaskResult

logger = logging.getLogger(__name__)


class ListTasksError(Enum):
    REPOSITORY_ERROR = "RepositoryError"


class ListTasks:
    """
    Возвращает все задачи. Порядок не гарантируется.
    """

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    async def execute(self) -> Union[List[TaskResult], ListTasksError]:
        try:
            tasks = await self._repository.list()
        except TaskRepositoryError as exc:
            logger.error("failed to list tasks: %s", exc)
            return ListTasksError.REPOSITORY_ERROR

        return [TaskResult.from_task(task) for task in tasks]
