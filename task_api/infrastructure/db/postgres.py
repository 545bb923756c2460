from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

import asyncpg

logger = logging.getLogger(__name__)

CONNECT_ATTEMPTS = 10


@dataclass(frozen=True)
class PostgresConfig:
    host: str
    port: int
    database: str
    user: str
    password: str


class DatabaseUnavailableError(RuntimeError):
    """
    Не удалось подключиться к PostgreSQL после всех попыток. Фатально для старта сервиса.
    """

    def __init__(self, attempts: int, last_error: Optional[BaseException]) -> None:
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(
            f"failed to connect to postgres after {attempts} attempts: {last_error!r}"
        )


class PostgresDatabase:
    """
    Инфраструктурный класс работы с PostgreSQL через пул соединений.

    Репозитории зависят от этого класса, use-case'ы — только от абстракции TaskRepository.
    """

    def __init__(self, config: PostgresConfig) -> None:
        self._config = config
        self._pool: Optional[asyncpg.Pool] = None

    async def connect(self) -> None:
        if self._pool is not None:
            return

        self._pool = await asyncpg.create_pool(
            host=self._config.host,
            port=self._config.port,
            database=self._config.database,
            user=self._config.user,
            password=self._config.password,
            min_size=1,
            max_size=10,
        )

    async def close(self) -> None:
        if self._pool is not None:
            await self._pool.close()
            self._pool = None

    def _require_pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise RuntimeError("PostgresDatabase is not connected")
        return self._pool

    async def execute(self, query: str, *args: Any) -> str:
        """
        Выполнить запрос без возвращаемых строк (INSERT/UPDATE/DELETE/...).
        Возвращает статусную строку PostgreSQL, например "DELETE 1".
        """
        async with self._require_pool().acquire() as connection:
            return await connection.execute(query, *args)

    async def fetch(self, query: str, *args: Any) -> list[asyncpg.Record]:
        async with self._require_pool().acquire() as connection:
            rows = await connection.fetch(query, *args)
            return list(rows)

    async def fetchrow(self, query: str, *args: Any) -> Optional[asyncpg.Record]:
        async with self._require_pool().acquire() as connection:
            return await connection.fetchrow(query, *args)

    async def with_connection(
        self,
        func: Callable[[asyncpg.Connection], Awaitable[Any]],
    ) -> Any:
        """
        Даёт "сырое" соединение в функцию. Используется миграциями (транзакции).
        """
        async with self._require_pool().acquire() as connection:
            return await func(connection)


async def connect_with_retry(
    db: PostgresDatabase,
    attempts: int = CONNECT_ATTEMPTS,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
) -> None:
    """
    Подключается к БД при старте сервиса. База может ещё подниматься (docker compose),
    поэтому после неудачной попытки k ждём 2**k секунд и пробуем снова.
    Исчерпание попыток — DatabaseUnavailableError, сервис не стартует.
    """
    last_error: Optional[BaseException] = None

    for attempt in range(1, attempts + 1):
        try:
            await db.connect()
        except (OSError, asyncpg.PostgresError, asyncio.TimeoutError) as exc:
            last_error = exc
        else:
            logger.info("connected to postgres (attempt %d)", attempt)
            return

        if attempt == attempts:
            break

        backoff_sec = 2 ** attempt
        logger.warning(
            "waiting for postgres... attempt %d/%d, retry in %ds (%s)",
            attempt,
            attempts,
            backoff_sec,
            last_error,
        )
        await sleep(backoff_sec)

    logger.error("giving up on postgres after %d attempts: %s", attempts, last_error)
    raise DatabaseUnavailableError(attempts, last_error)
