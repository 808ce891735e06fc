from .base import TaskRepository, UserRepository
from .sql import SqlTaskRepository, SqlUserRepository

__all__ = ["SqlTaskRepository", "SqlUserRepository", "TaskRepository", "UserRepository"]
