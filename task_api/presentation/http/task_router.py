from __future__ import annotations

from typing import List, NoReturn, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field, StrictInt, StrictStr

from task_api.domain.repositories.task_repository import TaskRepository
from task_api.presentation.usecases.task_delete import DeleteTask, DeleteTaskError
from task_api.presentation.usecases.task_dto import (
    DeleteTaskCommand,
    RegisterTaskCommand,
    TaskResult,
    UpdateTaskCommand,
)
from task_api.presentation.usecases.task_list import ListTasks, ListTasksError
from task_api.presentation.usecases.task_register import RegisterTask, RegisterTaskError
from task_api.presentation.usecases.task_update import UpdateTask, UpdateTaskError

router = APIRouter(
    prefix="/api/v1/tasks",
    tags=["tasks"],
)


def get_task_repository(request: Request) -> TaskRepository:
    """
    Репозиторий создаётся один раз в lifespan приложения и живёт в app.state.
    """
    return request.app.state.task_repository


# ---------- Схемы (Swagger-модели) ----------


class TaskSchema(BaseModel):
    id: str = Field(
        ...,
        description="Идентификатор задачи (UUID)",
        examples=["0b7f6a0e-3c55-4a3e-9a53-2f6b9f0c1d11"],
    )
    title: str = Field(..., description="Заголовок", examples=["Task Title"])
    description: str = Field(..., description="Описание", examples=["Task Description"])
    status: int = Field(..., description="1 — Todo, 2 — Doing, 3 — Done", examples=[1])

    @classmethod
    def from_result(cls, result: TaskResult) -> "TaskSchema":
        return cls(
            id=result.id,
            title=result.title,
            description=result.description,
            status=result.status,
        )


class TaskResponse(BaseModel):
    data: TaskSchema


class TaskListResponse(BaseModel):
    data: List[TaskSchema]


class EmptyResponse(BaseModel):
    data: None = None


class RegisterTaskRequest(BaseModel):
    title: StrictStr = Field(..., description="Заголовок (1..64 символа)", examples=["Task Title"])
    description: StrictStr = Field(
        ...,
        description="Описание (1..256 символов)",
        examples=["Task Description"],
    )
    status: StrictInt = Field(..., description="1 — Todo, 2 — Doing, 3 — Done", examples=[1])


class UpdateTaskRequest(BaseModel):
    id: StrictStr = Field(..., description="Идентификатор задачи")
    title: Optional[StrictStr] = Field(None, description="Новый заголовок, если нужно изменить")
    description: Optional[StrictStr] = Field(None, description="Новое описание, если нужно изменить")
    status: Optional[StrictInt] = Field(None, description="Новый статус, если нужно изменить")


class DeleteTaskRequest(BaseModel):
    id: StrictStr = Field(..., description="Идентификатор задачи")


# ---------- Маппинг ошибок use-case'ов в HTTP ----------

_ERROR_RESPONSES = {
    RegisterTaskError.INVALID_TITLE: (400, "Invalid task title input"),
    RegisterTaskError.INVALID_DESCRIPTION: (400, "Invalid task description input"),
    RegisterTaskError.INVALID_STATUS: (400, "Invalid task status input"),
    RegisterTaskError.REPOSITORY_ERROR: (500, "Error occurred during saving task"),
    UpdateTaskError.INVALID_ID: (400, "Invalid task ID input"),
    UpdateTaskError.INVALID_TITLE: (400, "Invalid task title input"),
    UpdateTaskError.INVALID_DESCRIPTION: (400, "Invalid task description input"),
    UpdateTaskError.INVALID_STATUS: (400, "Invalid task status input"),
    UpdateTaskError.TASK_NOT_FOUND: (404, "Task not found"),
    UpdateTaskError.REPOSITORY_ERROR: (500, "Error occurred during updating task"),
    DeleteTaskError.INVALID_ID: (400, "Invalid task ID input"),
    DeleteTaskError.REPOSITORY_ERROR: (500, "Error occurred during deleting task"),
    ListTasksError.REPOSITORY_ERROR: (500, "Error occurred during loading tasks"),
}


def _raise_for(error) -> NoReturn:
    status_code, detail = _ERROR_RESPONSES[error]
    raise HTTPException(status_code=status_code, detail=detail)


# ---------- Эндпоинты ----------


@router.get(
    "",
    response_model=TaskListResponse,
    summary="Список задач",
)
async def list_tasks(
    repository: TaskRepository = Depends(get_task_repository),
) -> TaskListResponse:
    result = await ListTasks(repository).execute()
    if isinstance(result, ListTasksError):
        _raise_for(result)

    return TaskListResponse(data=[TaskSchema.from_result(r) for r in result])


@router.post(
    "",
    response_model=TaskResponse,
    summary="Создать задачу",
)
async def register_task(
    payload: RegisterTaskRequest,
    repository: TaskRepository = Depends(get_task_repository),
) -> TaskResponse:
    command = RegisterTaskCommand(
        title=payload.title,
        description=payload.description,
        status=payload.status,
    )
    result = await RegisterTask(repository).execute(command)
    if isinstance(result, RegisterTaskError):
        _raise_for(result)

    return TaskResponse(data=TaskSchema.from_result(result))


@router.patch(
    "",
    response_model=TaskResponse,
    summary="Частично обновить задачу",
    description="Меняются только переданные поля, остальные остаются прежними.",
)
async def update_task(
    payload: UpdateTaskRequest,
    repository: TaskRepository = Depends(get_task_repository),
) -> TaskResponse:
    command = UpdateTaskCommand(
        id=payload.id,
        title=payload.title,
        description=payload.description,
        status=payload.status,
    )
    result = await UpdateTask(repository).execute(command)
    if isinstance(result, UpdateTaskError):
        _raise_for(result)

    return TaskResponse(data=TaskSchema.from_result(result))


@router.delete(
    "",
    response_model=EmptyResponse,
    summary="Удалить задачу",
    description="Удаление несуществующей задачи не считается ошибкой.",
)
async def delete_task(
    payload: DeleteTaskRequest,
    repository: TaskRepository = Depends(get_task_repository),
) -> EmptyResponse:
    error = await DeleteTask(repository).execute(DeleteTaskCommand(id=payload.id))
    if error is not None:
        _raise_for(error)

    return EmptyResponse()
