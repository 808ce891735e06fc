from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status

from ..dependencies import get_task_service
from ..models import TaskStatus
from ..schemas import AssigneeRequest, TaskCreate, TaskResponse, TaskUpdate
from ..services import TaskService

router = APIRouter()


@router.get("/tasks", response_model=List[TaskResponse])
async def list_tasks(
    status: Optional[TaskStatus] = None,
    service: TaskService = Depends(get_task_service),
):
    """List all tasks, optionally only those with the given status."""
    return await service.list_tasks(status)


@router.get("/tasks/{task_id}", response_model=TaskResponse)
async def get_task(task_id: str, service: TaskService = Depends(get_task_service)):
    return await service.get_task(task_id)


@router.post("/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(task: TaskCreate, service: TaskService = Depends(get_task_service)):
    """Create a new task.

    Unknown ``status`` values fall back to TODO.
    """
    return await service.create_task(task)


@router.put("/tasks/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str,
    task_update: TaskUpdate,
    service: TaskService = Depends(get_task_service),
):
    """Update a task. Fields that are absent or blank keep their stored value."""
    return await service.update_task(task_id, task_update)


@router.put("/tasks/{task_id}/assignee", response_model=TaskResponse)
async def assign_task(
    task_id: str,
    payload: AssigneeRequest,
    service: TaskService = Depends(get_task_service),
):
    """Assign a task to an existing user."""
    return await service.assign(task_id, payload.assignee_id)


@router.delete("/tasks/{task_id}/assignee", response_model=TaskResponse)
async def unassign_task(task_id: str, service: TaskService = Depends(get_task_service)):
    return await service.unassign(task_id)


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: str, service: TaskService = Depends(get_task_service)):
    await service.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
