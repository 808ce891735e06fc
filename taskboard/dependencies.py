from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from .database import get_db
from .repositories import SqlTaskRepository, SqlUserRepository, TaskRepository, UserRepository
from .services import TaskService, UserService


def get_task_repository(db: AsyncSession = Depends(get_db)) -> TaskRepository:
    return SqlTaskRepository(db)


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return SqlUserRepository(db)


def get_task_service(
    tasks: TaskRepository = Depends(get_task_repository),
    users: UserRepository = Depends(get_user_repository),
) -> TaskService:
    return TaskService(tasks, users)


def get_user_service(
    users: UserRepository = Depends(get_user_repository),
    tasks: TaskRepository = Depends(get_task_repository),
) -> UserService:
    return UserService(users, tasks)
