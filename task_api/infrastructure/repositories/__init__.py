from .task_in_memory_repository import TaskInMemoryRepository
from .task_postgres_repository import TaskPostgresRepository

__all__ = [
    "TaskInMemoryRepository",
    "TaskPostgresRepository",
]
