from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from task_api.domain.task import Task


@dataclass(frozen=True)
class RegisterTaskCommand:
    title: str
    description: str
    status: int


@dataclass(frozen=True)
class UpdateTaskCommand:
    """
    None означает "поле не передано" — оно останется как есть.
    """
    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[int] = None


@dataclass(frozen=True)
class DeleteTaskCommand:
    id: str


@dataclass(frozen=True)
class TaskResult:
    id: str
    title: str
    description: str
    status: int

    @classmethod
    def from_task(cls, task: Task) -> "TaskResult":
        return cls(
            id=str(task.id),
            title=task.title.value,
            description=task.description.value,
            status=task.status.to_int(),
        )
