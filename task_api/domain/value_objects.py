from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from uuid import UUID, uuid4

from .errors import (
    TaskDescriptionError,
    TaskIdError,
    TaskStatusError,
    TaskTitleError,
    TextErrorKind,
)

TASK_TITLE_MAX_LENGTH = 64
TASK_DESCRIPTION_MAX_LENGTH = 256


@dataclass(frozen=True)
class TaskId:
    """
    Идентификатор задачи (UUID). Генерируется один раз при создании и больше не меняется.
    """
    value: UUID

    @classmethod
    def new(cls) -> "TaskId":
        return cls(uuid4())

    @classmethod
    def parse(cls, raw: str) -> "TaskId":
        if not isinstance(raw, str):
            raise TaskIdError(raw)
        try:
            return cls(UUID(raw))
        except ValueError as exc:
            raise TaskIdError(raw) from exc

    def __str__(self) -> str:
        return str(self.value)


def _validate_text(raw: str, max_length: int) -> tuple[str, TextErrorKind | None]:
    value = raw.strip()
    if not value:
        return value, TextErrorKind.EMPTY
    if len(value) > max_length:
        return value, TextErrorKind.TOO_LONG
    return value, None


@dataclass(frozen=True)
class TaskTitle:
    value: str

    def __post_init__(self) -> None:
        value, error = _validate_text(self.value, TASK_TITLE_MAX_LENGTH)
        if error is not None:
            raise TaskTitleError(error)
        # frozen dataclass: store the trimmed form
        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TaskDescription:
    value: str

    def __post_init__(self) -> None:
        value, error = _validate_text(self.value, TASK_DESCRIPTION_MAX_LENGTH)
        if error is not None:
            raise TaskDescriptionError(error)
        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return self.value


class TaskStatus(Enum):
    """
    Статус задачи. Целочисленный код — это формат хранения и передачи по сети,
    менять соответствие нельзя.
    """
    TODO = 1
    DOING = 2
    DONE = 3

    @classmethod
    def from_int(cls, raw: int) -> "TaskStatus":
        # bool is an int subclass, but True/False are not status codes
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise TaskStatusError(raw)
        try:
            return cls(raw)
        except ValueError as exc:
            raise TaskStatusError(raw) from exc

    def to_int(self) -> int:
        return self.value
