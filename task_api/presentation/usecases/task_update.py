from __future__ import annotations

import logging
from enum import Enum
from typing import Union

from task_api.domain.errors import (
    TaskDescriptionError,
    TaskIdError,
    TaskNotFoundError,
    TaskRepositoryError,
    TaskStatusError,
    TaskTitleError,
)
from task_api.domain.repositories.task_repository import TaskRepository
from task_api.domain.value_objects import TaskDescription, TaskId, TaskStatus, TaskTitle
from task_api.presentation.usecases.task_dto import TaskResult, UpdateTaskCommand

logger = logging.getLogger(__name__)


class UpdateTaskError(Enum):
    INVALID_ID = "InvalidID"
    INVALID_TITLE = "InvalidTitle"
    INVALID_DESCRIPTION = "InvalidDescription"
    INVALID_STATUS = "InvalidStatus"
    TASK_NOT_FOUND = "TaskNotFound"
    REPOSITORY_ERROR = "RepositoryError"


class UpdateTask:
    """
    Частичное обновление задачи: меняются только переданные поля.

    Схема "прочитать -> заменить -> записать" без проверки версии: параллельный
    update между get_by_id и update будет перезаписан последним writer'ом.
    При ошибке валидации в хранилище ничего не пишется.
    """

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    async def execute(self, command: UpdateTaskCommand) -> Union[TaskResult, UpdateTaskError]:
        try:
            task_id = TaskId.parse(command.id)
        except TaskIdError as exc:
            logger.debug("update rejected: %s", exc)
            return UpdateTaskError.INVALID_ID

        try:
            task = await self._repository.get_by_id(task_id)
        except TaskNotFoundError:
            return UpdateTaskError.TASK_NOT_FOUND
        except TaskRepositoryError as exc:
            logger.error("failed to load task %s: %s", task_id, exc)
            return UpdateTaskError.REPOSITORY_ERROR

        if command.title is not None:
            try:
                task = task.with_title(TaskTitle(command.title))
            except TaskTitleError as exc:
                logger.debug("update rejected: %s", exc)
                return UpdateTaskError.INVALID_TITLE

        if command.description is not None:
            try:
                task = task.with_description(TaskDescription(command.description))
            except TaskDescriptionError as exc:
                logger.debug("update rejected: %s", exc)
                return UpdateTaskError.INVALID_DESCRIPTION

        if command.status is not None:
            try:
                task = task.with_status(TaskStatus.from_int(command.status))
            except TaskStatusError as exc:
                logger.debug("update rejected: %s", exc)
                return UpdateTaskError.INVALID_STATUS

        try:
            updated = await self._repository.update(task)
        except TaskNotFoundError:
            # deleted between get_by_id and update
            return UpdateTaskError.TASK_NOT_FOUND
        except TaskRepositoryError as exc:
            logger.error("failed to update task %s: %s", task_id, exc)
            return UpdateTaskError.REPOSITORY_ERROR

        logger.info("task updated id=%s", updated.id)
        return TaskResult.from_task(updated)
