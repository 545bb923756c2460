from __future__ import annotations

import logging
from enum import Enum
from typing import Union

from task_api.domain.errors import (
    TaskDescriptionError,
    TaskRepositoryError,
    TaskStatusError,
    TaskTitleError,
)
from task_api.domain.repositories.task_repository import TaskRepository
from task_api.domain.task import Task
from task_api.domain.value_objects import TaskDescription, TaskId, TaskStatus, TaskTitle
from task_api.presentation.usecases.task_dto import RegisterTaskCommand, TaskResult

logger = logging.getLogger(__name__)


class RegisterTaskError(Enum):
    INVALID_TITLE = "InvalidTitle"
    INVALID_DESCRIPTION = "InvalidDescription"
    INVALID_STATUS = "InvalidStatus"
    REPOSITORY_ERROR = "RepositoryError"


class RegisterTask:
    """
    Создаёт новую задачу.

    Поля проверяются строго по порядку title -> description -> status,
    вызывающая сторона видит первую ошибку. Ошибки возвращаются значением,
    исключения домена/репозитория наружу не выходят.
    """

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    async def execute(self, command: RegisterTaskCommand) -> Union[TaskResult, RegisterTaskError]:
        task_id = TaskId.new()

        try:
            title = TaskTitle(command.title)
        except TaskTitleError as exc:
            logger.debug("register rejected: %s", exc)
            return RegisterTaskError.INVALID_TITLE

        try:
            description = TaskDescription(command.description)
        except TaskDescriptionError as exc:
            logger.debug("register rejected: %s", exc)
            return RegisterTaskError.INVALID_DESCRIPTION

        try:
            status = TaskStatus.from_int(command.status)
        except TaskStatusError as exc:
            logger.debug("register rejected: %s", exc)
            return RegisterTaskError.INVALID_STATUS

        task = Task.create(task_id, title, description, status)

        try:
            registered = await self._repository.register(task)
        except TaskRepositoryError as exc:
            # includes TaskAlreadyExistsError: unlikely for a fresh uuid4, still surfaced
            logger.error("failed to register task %s: %s", task_id, exc)
            return RegisterTaskError.REPOSITORY_ERROR

        logger.info("task registered id=%s", registered.id)
        return TaskResult.from_task(registered)
