# tests/conftest.py

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel.ext.asyncio.session import AsyncSession

from taskboard.database import create_tables
from taskboard.dependencies import get_task_repository, get_user_repository
from taskboard.main import app
from taskboard.services import TaskService, UserService

from .fakes import InMemoryTaskRepository, InMemoryUserRepository


@pytest.fixture()
def task_repo() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture()
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def task_service(task_repo, user_repo) -> TaskService:
    return TaskService(task_repo, user_repo)


@pytest.fixture()
def user_service(task_repo, user_repo) -> UserService:
    return UserService(user_repo, task_repo)


@pytest.fixture()
def client(task_repo, user_repo):
    """
    API client wired to the in-memory repositories.

    The app's lifespan is not entered, so no database is touched.
    """
    app.dependency_overrides[get_task_repository] = lambda: task_repo
    app.dependency_overrides[get_user_repository] = lambda: user_repo
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
async def sql_session():
    """AsyncSession on a private in-memory SQLite database with the tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_tables(engine)
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session
    await engine.dispose()
