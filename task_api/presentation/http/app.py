from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from task_api.config import AppConfig
from task_api.domain.repositories.task_repository import TaskRepository
from task_api.infrastructure.db.migrate import run_migrations
from task_api.infrastructure.db.postgres import PostgresDatabase, connect_with_retry
from task_api.infrastructure.repositories.task_in_memory_repository import TaskInMemoryRepository
from task_api.infrastructure.repositories.task_postgres_repository import TaskPostgresRepository
from task_api.presentation.http.task_router import router as task_router

logger = logging.getLogger(__name__)


async def _invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("invalid request body on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": "Invalid request body"})


def create_app(
    config: Optional[AppConfig] = None,
    repository: Optional[TaskRepository] = None,
) -> FastAPI:
    """
    Собирает FastAPI-приложение.

    repository — готовый репозиторий (тесты). Если не передан, он создаётся
    при старте по config.storage: "memory" или "postgres". Для postgres старт
    блокируется до подключения к БД (connect_with_retry); если БД так и не
    поднялась, исключение прерывает запуск сервера.
    """
    if repository is None and config is None:
        raise ValueError("either config or repository must be given")

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        db: Optional[PostgresDatabase] = None

        try:
            if repository is not None:
                app.state.task_repository = repository
            elif config.storage == "memory":
                logger.info("using in-memory task storage")
                app.state.task_repository = TaskInMemoryRepository()
            else:
                db = PostgresDatabase(config.db)
                await connect_with_retry(db)
                await run_migrations(db)
                app.state.task_repository = TaskPostgresRepository(db)

            yield
        finally:
            if db is not None:
                await db.close()
                logger.info("postgres pool closed")

    app = FastAPI(title="task-api", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, _invalid_body_handler)
    app.include_router(task_router)

    return app
