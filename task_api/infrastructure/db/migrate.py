from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List, Set

from .postgres import PostgresDatabase, connect_with_retry

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).parent / "migrations"


async def _ensure_migrations_table(db: PostgresDatabase) -> None:
    """
    Создаёт служебную таблицу для учёта применённых миграций.
    Хранит только номер версии (001, 002, ...).
    """
    sql = """
    CREATE TABLE IF NOT EXISTS schema_migrations (
        version    TEXT PRIMARY KEY,
        applied_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    );
    """
    await db.execute(sql)


async def _get_applied_versions(db: PostgresDatabase) -> Set[str]:
    rows = await db.fetch("SELECT version FROM schema_migrations;")
    return {row["version"] for row in rows}


async def _apply_migration(db: PostgresDatabase, version: str, sql: str) -> None:
    """
    Применяет одну миграцию в транзакции и записывает её версию в schema_migrations.
    """
    async def _run(conn) -> None:
        async with conn.transaction():
            await conn.execute(sql)
            await conn.execute(
                "INSERT INTO schema_migrations (version) VALUES ($1);",
                version,
            )

    await db.with_connection(_run)


def migration_version(path: Path) -> str:
    # 001_create_tasks.sql -> "001"
    return path.stem.split("_", 1)[0]


async def run_migrations(db: PostgresDatabase, migrations_dir: Path = MIGRATIONS_DIR) -> List[str]:
    """
    Находит все *.sql в папке migrations, упорядочивает по имени,
    применяет те, что ещё не применены. Возвращает список применённых версий.
    """
    if not migrations_dir.exists():
        raise RuntimeError(f"Migrations directory does not exist: {migrations_dir}")

    await _ensure_migrations_table(db)
    applied_versions = await _get_applied_versions(db)

    applied_now: List[str] = []
    for path in sorted(migrations_dir.glob("*.sql")):
        version = migration_version(path)
        if version in applied_versions:
            continue

        logger.info("applying migration %s from %s", version, path.name)
        await _apply_migration(db, version, path.read_text(encoding="utf-8"))
        applied_now.append(version)

    if applied_now:
        logger.info("migrations completed: %s", ", ".join(applied_now))
    else:
        logger.info("schema is up to date")
    return applied_now


async def _main_cli() -> None:
    from task_api.config import load_config_from_env
    from task_api.logging_setup import setup_logging

    setup_logging()
    db = PostgresDatabase(load_config_from_env().db)
    await connect_with_retry(db)
    try:
        await run_migrations(db)
    finally:
        await db.close()


if __name__ == "__main__":
    asyncio.run(_main_cli())
