from typing import List

import structlog

from ..errors import NotFoundError
from ..mappers import merge_user, to_user_response, user_from_create
from ..models import User
from ..repositories import TaskRepository, UserRepository
from ..schemas import UserCreate, UserResponse, UserUpdate

logger = structlog.get_logger(__name__)


class UserService:
    def __init__(self, users: UserRepository, tasks: TaskRepository) -> None:
        self.users = users
        self.tasks = tasks

    async def _require_user(self, user_id: str) -> User:
        user = await self.users.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    async def _with_task_ids(self, user: User) -> UserResponse:
        tasks = await self.tasks.find_all_by_assignee_id(user.id)
        return to_user_response(user, (task.id for task in tasks))

    async def list_users(self) -> List[UserResponse]:
        # One lookup per user, awaited in turn: a session can't run them concurrently.
        return [await self._with_task_ids(user) for user in await self.users.find_all()]

    async def get_user(self, user_id: str) -> UserResponse:
        return await self._with_task_ids(await self._require_user(user_id))

    async def create_user(self, req: UserCreate) -> UserResponse:
        user = await self.users.save(user_from_create(req))
        logger.info("user_created", user_id=user.id)
        return await self._with_task_ids(user)

    async def update_user(self, user_id: str, req: UserUpdate) -> UserResponse:
        user = merge_user(await self._require_user(user_id), req)
        user = await self.users.save(user)
        logger.info("user_updated", user_id=user.id)
        return await self._with_task_ids(user)

    async def delete_user(self, user_id: str) -> None:
        """Remove a user. Tasks assigned to it keep their ``assignee_id``."""
        user = await self._require_user(user_id)
        await self.users.delete(user)
        logger.info("user_deleted", user_id=user_id)
