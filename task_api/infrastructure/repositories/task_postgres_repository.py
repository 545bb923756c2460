from __future__ import annotations

import logging
from typing import List

import asyncpg
from asyncpg import Record

from task_api.domain.errors import (
    DomainValidationError,
    TaskAlreadyExistsError,
    TaskNotFoundError,
    TaskStorageError,
)
from task_api.domain.repositories.task_repository import TaskRepository
from task_api.domain.task import Task
from task_api.domain.value_objects import TaskDescription, TaskId, TaskStatus, TaskTitle
from task_api.infrastructure.db.postgres import PostgresDatabase

logger = logging.getLogger(__name__)

# asyncpg raises these for driver/connection problems; all of them become TaskStorageError
_STORAGE_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, RuntimeError)


def _affected_rows(status: str) -> int:
    """
    "UPDATE 1" -> 1, "DELETE 0" -> 0.
    """
    try:
        return int(status.rsplit(" ", 1)[-1])
    except (ValueError, AttributeError):
        raise TaskStorageError(f"unexpected command status: {status!r}")


class TaskPostgresRepository(TaskRepository):
    """
    PostgreSQL-based implementation of TaskRepository.

    Каждая операция — один SQL-запрос, атомарность обеспечивает сама БД.
    """

    def __init__(self, db: PostgresDatabase) -> None:
        self._db = db

    async def list(self) -> List[Task]:
        sql = """
        SELECT id, title, description, status
        FROM tasks;
        """
        try:
            rows = await self._db.fetch(sql)
        except _STORAGE_ERRORS as exc:
            raise TaskStorageError(str(exc)) from exc

        return [self._map_row_to_task(row) for row in rows]

    async def get_by_id(self, task_id: TaskId) -> Task:
        sql = """
        SELECT id, title, description, status
        FROM tasks
        WHERE id = $1;
        """
        try:
            row = await self._db.fetchrow(sql, task_id.value)
        except _STORAGE_ERRORS as exc:
            raise TaskStorageError(str(exc)) from exc

        if row is None:
            raise TaskNotFoundError(task_id)

        return self._map_row_to_task(row)

    async def register(self, task: Task) -> Task:
        """
        Inserts a new task row. Primary key violation means the id is already taken.
        """
        sql = """
        INSERT INTO tasks (id, title, description, status)
        VALUES ($1, $2, $3, $4);
        """
        try:
            await self._db.execute(
                sql,
                task.id.value,
                task.title.value,
                task.description.value,
                task.status.to_int(),
            )
        except asyncpg.UniqueViolationError as exc:
            raise TaskAlreadyExistsError(task.id) from exc
        except _STORAGE_ERRORS as exc:
            raise TaskStorageError(str(exc)) from exc

        return task

    async def update(self, task: Task) -> Task:
        sql = """
        UPDATE tasks
        SET title = $2, description = $3, status = $4
        WHERE id = $1;
        """
        try:
            status = await self._db.execute(
                sql,
                task.id.value,
                task.title.value,
                task.description.value,
                task.status.to_int(),
            )
        except _STORAGE_ERRORS as exc:
            raise TaskStorageError(str(exc)) from exc

        if _affected_rows(status) == 0:
            raise TaskNotFoundError(task.id)

        return task

    async def delete(self, task_id: TaskId) -> None:
        sql = """
        DELETE FROM tasks
        WHERE id = $1;
        """
        try:
            status = await self._db.execute(sql, task_id.value)
        except _STORAGE_ERRORS as exc:
            raise TaskStorageError(str(exc)) from exc

        if _affected_rows(status) == 0:
            raise TaskNotFoundError(task_id)

    @staticmethod
    def _map_row_to_task(row: Record) -> Task:
        """
        Maps DB row to Task domain model. A row that does not pass validation is corrupt data.
        """
        try:
            return Task.create(
                id=TaskId(row["id"]),
                title=TaskTitle(row["title"]),
                description=TaskDescription(row["description"]),
                status=TaskStatus.from_int(row["status"]),
            )
        except DomainValidationError as exc:
            logger.error("corrupt task row id=%s: %s", row["id"], exc)
            raise TaskStorageError(f"corrupt task row {row['id']}: {exc}") from exc
