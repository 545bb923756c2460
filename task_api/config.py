from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal, Mapping, Optional

from dotenv import load_dotenv

from task_api.infrastructure.db.postgres import PostgresConfig

StorageKind = Literal["memory", "postgres"]
STORAGE_KINDS = ("memory", "postgres")


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ServerConfig:
    host: str
    port: int


@dataclass(frozen=True)
class AppConfig:
    server: ServerConfig
    db: PostgresConfig
    storage: StorageKind


def _int_var(env: Mapping[str, str], name: str, default: str) -> int:
    raw = env.get(name, default)
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


def load_config_from_env(env: Optional[Mapping[str, str]] = None) -> AppConfig:
    """
    Загружает конфиг сервиса из переменных окружения (и .env, если он есть).
    Вызывается один раз при старте процесса.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    storage = env.get("TASK_STORAGE", "postgres").strip().lower()
    if storage not in STORAGE_KINDS:
        raise ConfigError(
            f"TASK_STORAGE must be one of {', '.join(STORAGE_KINDS)}, got {storage!r}"
        )

    server = ServerConfig(
        host=env.get("APP_HOST", "127.0.0.1"),
        port=_int_var(env, "APP_PORT", "8080"),
    )

    # DB_USER_PASSWORD is the variable name the original Rust service read
    password = env.get("DB_PASSWORD", env.get("DB_USER_PASSWORD", "app_password"))

    db = PostgresConfig(
        host=env.get("DB_HOST", "localhost"),
        port=_int_var(env, "DB_PORT", "5432"),
        database=env.get("DB_NAME", "app_db"),
        user=env.get("DB_USER", "app_user"),
        password=password,
    )

    return AppConfig(server=server, db=db, storage=storage)  # type: ignore[arg-type]
