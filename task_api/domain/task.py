from __future__ import annotations

from dataclasses import dataclass, replace

from .value_objects import TaskDescription, TaskId, TaskStatus, TaskTitle


@dataclass(frozen=True)
class Task:
    """
    Задача пользователя.

    id          — неизменяемый идентификатор
    title       — заголовок (1..64 символа)
    description — описание (1..256 символов)
    status      — TODO / DOING / DONE

    Все поля — уже провалидированные value object'ы, поэтому сущность
    не может оказаться в невалидном состоянии. Изменение = новая копия.
    """
    id: TaskId
    title: TaskTitle
    description: TaskDescription
    status: TaskStatus

    @classmethod
    def create(
        cls,
        id: TaskId,
        title: TaskTitle,
        description: TaskDescription,
        status: TaskStatus,
    ) -> "Task":
        return cls(id=id, title=title, description=description, status=status)

    def with_title(self, title: TaskTitle) -> "Task":
        return replace(self, title=title)

    def with_description(self, description: TaskDescription) -> "Task":
        return replace(self, description=description)

    def with_status(self, status: TaskStatus) -> "Task":
        return replace(self, status=status)
