from .errors import (
    DomainValidationError,
    TaskAlreadyExistsError,
    TaskDescriptionError,
    TaskIdError,
    TaskNotFoundError,
    TaskRepositoryError,
    TaskStatusError,
    TaskStorageError,
    TaskTitleError,
    TextErrorKind,
)
from .task import Task
from .value_objects import (
    TaskDescription,
    TaskId,
    TaskStatus,
    TaskTitle,
)

__all__ = [
    "Task",
    "TaskId",
    "TaskTitle",
    "TaskDescription",
    "TaskStatus",
    "TextErrorKind",
    "DomainValidationError",
    "TaskTitleError",
    "TaskDescriptionError",
    "TaskStatusError",
    "TaskIdError",
    "TaskRepositoryError",
    "TaskNotFoundError",
    "TaskAlreadyExistsError",
    "TaskStorageError",
]
