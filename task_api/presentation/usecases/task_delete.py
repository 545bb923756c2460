from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from task_api.domain.errors import TaskIdError, TaskNotFoundError, TaskRepositoryError
from task_api.domain.repositories.task_repository import TaskRepository
from task_api.domain.value_objects import TaskId
from task_api.presentation.usecases.task_dto import DeleteTaskCommand

logger = logging.getLogger(__name__)


class DeleteTaskError(Enum):
    INVALID_ID = "InvalidID"
    REPOSITORY_ERROR = "RepositoryError"


class DeleteTask:
    """
    Удаление идемпотентно: отсутствие задачи — это и есть желаемый результат,
    поэтому TaskNotFoundError ошибкой use-case'а не считается.
    """

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    async def execute(self, command: DeleteTaskCommand) -> Optional[DeleteTaskError]:
        """
        Returns None on success, DeleteTaskError otherwise.
        """
        try:
            task_id = TaskId.parse(command.id)
        except TaskIdError as exc:
            logger.debug("delete rejected: %s", exc)
            return DeleteTaskError.INVALID_ID

        try:
            await self._repository.delete(task_id)
        except TaskNotFoundError:
            logger.debug("task %s already absent", task_id)
            return None
        except TaskRepositoryError as exc:
            logger.error("failed to delete task %s: %s", task_id, exc)
            return DeleteTaskError.REPOSITORY_ERROR

        logger.info("task deleted id=%s", task_id)
        return None
