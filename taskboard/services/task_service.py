from datetime import datetime, timezone
from typing import List, Optional

import structlog

from ..errors import BadRequestError, NotFoundError
from ..mappers import merge_task, task_from_create, to_task_response
from ..models import Task, TaskStatus
from ..repositories import TaskRepository, UserRepository
from ..schemas import TaskCreate, TaskResponse, TaskUpdate

logger = structlog.get_logger(__name__)


class TaskService:
    """Task workflow: validation, partial updates and the assignment protocol."""

    def __init__(self, tasks: TaskRepository, users: UserRepository) -> None:
        self.tasks = tasks
        self.users = users

    async def _require_task(self, task_id: str) -> Task:
        task = await self.tasks.find_by_id(task_id)
        if task is None:
            raise NotFoundError("Task", task_id)
        return task

    async def list_tasks(self, status: Optional[TaskStatus] = None) -> List[TaskResponse]:
        if status is None:
            tasks = await self.tasks.find_all()
        else:
            tasks = await self.tasks.find_all_by_status(status)
        return [to_task_response(task) for task in tasks]

    async def get_task(self, task_id: str) -> TaskResponse:
        return to_task_response(await self._require_task(task_id))

    async def create_task(self, req: TaskCreate) -> TaskResponse:
        if req.title is None or not req.title.strip():
            raise BadRequestError("title is required")

        task = task_from_create(req)
        task.creation_date = datetime.now(timezone.utc)
        task = await self.tasks.save(task)
        logger.info("task_created", task_id=task.id, status=task.status.value)
        return to_task_response(task)

    async def update_task(self, task_id: str, req: TaskUpdate) -> TaskResponse:
        task = merge_task(await self._require_task(task_id), req)
        task = await self.tasks.save(task)
        logger.info("task_updated", task_id=task.id)
        return to_task_response(task)

    async def delete_task(self, task_id: str) -> None:
        task = await self._require_task(task_id)
        await self.tasks.delete(task)
        logger.info("task_deleted", task_id=task_id)

    async def assign(self, task_id: str, assignee_id: Optional[str]) -> TaskResponse:
        """Link a task to a user.

        The user is looked up before the task is read, so a missing user is
        reported even when the task is missing too.
        """
        if assignee_id is None or not assignee_id.strip():
            raise BadRequestError("assigneeId is required")

        if not await self.users.exists_by_id(assignee_id):
            raise NotFoundError("User", assignee_id)
        task = await self._require_task(task_id)

        task.assignee_id = assignee_id
        task = await self.tasks.save(task)
        logger.info("task_assigned", task_id=task.id, assignee_id=assignee_id)
        return to_task_response(task)

    async def unassign(self, task_id: str) -> TaskResponse:
        task = await self._require_task(task_id)
        task.assignee_id = None
        task = await self.tasks.save(task)
        logger.info("task_unassigned", task_id=task.id)
        return to_task_response(task)
