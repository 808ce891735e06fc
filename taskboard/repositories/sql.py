from typing import List, Optional, Type, TypeVar
from uuid import uuid4

import structlog
from sqlalchemy.exc import IntegrityError
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..errors import ConflictError
from ..models import Task, TaskStatus, User
from .base import TaskRepository, UserRepository

logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=SQLModel)


class _SqlRepository:
    model: Type[SQLModel]

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _find_all(self, *criteria) -> list:
        statement = select(self.model)
        if criteria:
            statement = statement.where(*criteria)
        result = await self.db.exec(statement)
        return list(result.all())

    async def find_all(self) -> list:
        return await self._find_all()

    async def find_by_id(self, entity_id: str) -> Optional[SQLModel]:
        return await self.db.get(self.model, entity_id)

    async def exists_by_id(self, entity_id: str) -> bool:
        result = await self.db.exec(select(self.model.id).where(self.model.id == entity_id))
        return result.first() is not None

    async def save(self, entity: ModelT) -> ModelT:
        if entity.id is None:
            entity.id = str(uuid4())
        self.db.add(entity)
        try:
            await self.db.commit()
        except IntegrityError as exc:
            await self.db.rollback()
            logger.warning("integrity_violation", table=self.model.__tablename__, error=str(exc.orig))
            raise ConflictError(f"{self.model.__name__} violates a store constraint: {exc.orig}") from exc
        await self.db.refresh(entity)
        return entity

    async def delete(self, entity: SQLModel) -> None:
        await self.db.delete(entity)
        await self.db.commit()


class SqlTaskRepository(_SqlRepository, TaskRepository):
    model = Task

    async def find_all_by_status(self, status: TaskStatus) -> List[Task]:
        return await self._find_all(Task.status == status)

    async def find_all_by_assignee_id(self, assignee_id: str) -> List[Task]:
        return await self._find_all(Task.assignee_id == assignee_id)


class SqlUserRepository(_SqlRepository, UserRepository):
    model = User
