from __future__ import annotations

from enum import Enum


class DomainValidationError(ValueError):
    """
    Базовая ошибка валидации value object'ов.
    Верхние слои ловят конкретные подклассы и переводят их в свой словарь ошибок.
    """


class TextErrorKind(str, Enum):
    EMPTY = "EMPTY"
    TOO_LONG = "TOO_LONG"


class TaskTitleError(DomainValidationError):
    def __init__(self, kind: TextErrorKind) -> None:
        self.kind = kind
        super().__init__(f"invalid task title: {kind.value}")


class TaskDescriptionError(DomainValidationError):
    def __init__(self, kind: TextErrorKind) -> None:
        self.kind = kind
        super().__init__(f"invalid task description: {kind.value}")


class TaskStatusError(DomainValidationError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"invalid task status: {value!r}")


class TaskIdError(DomainValidationError):
    """
    Строка не является корректным UUID (InvalidIdString).
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"invalid task id string: {value!r}")


class TaskRepositoryError(Exception):
    """
    Base class for everything a TaskRepository implementation may raise.
    """


class TaskNotFoundError(TaskRepositoryError):
    def __init__(self, task_id: object) -> None:
        self.task_id = task_id
        super().__init__(f"task not found: {task_id}")


class TaskAlreadyExistsError(TaskRepositoryError):
    def __init__(self, task_id: object) -> None:
        self.task_id = task_id
        super().__init__(f"task already exists: {task_id}")


class TaskStorageError(TaskRepositoryError):
    """
    I/O failure of the backing store (connection loss, constraint violation, corrupt row).
    Never used to signal a missing or duplicate task.
    """

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"storage error: {detail}")
