"""Translation between wire schemas and stored documents."""
from typing import Iterable, Optional

from .models import Task, TaskStatus, User
from .schemas import TaskCreate, TaskResponse, TaskUpdate, UserCreate, UserResponse, UserUpdate


def _has_text(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


def parse_status_or_default(raw: Optional[str], default: TaskStatus) -> TaskStatus:
    """Parse a status name case-insensitively, returning ``default`` when it can't."""
    if not _has_text(raw):
        return default
    try:
        return TaskStatus[raw.strip().upper()]
    except KeyError:
        return default


def task_from_create(req: TaskCreate) -> Task:
    return Task(
        title=req.title,
        description=req.description,
        status=parse_status_or_default(req.status, TaskStatus.TODO),
        assignee_id=req.assignee_id if _has_text(req.assignee_id) else None,
    )


def merge_task(task: Task, req: TaskUpdate) -> Task:
    """Apply the non-blank fields of ``req`` onto ``task`` in place."""
    if _has_text(req.title):
        task.title = req.title
    if _has_text(req.description):
        task.description = req.description
    if _has_text(req.status):
        task.status = parse_status_or_default(req.status, task.status)
    return task


def to_task_response(task: Task) -> TaskResponse:
    return TaskResponse(
        id=task.id,
        title=task.title,
        description=task.description,
        status=task.status,
        assignee_id=task.assignee_id,
        creation_date=task.creation_date,
    )


def user_from_create(req: UserCreate) -> User:
    return User(name=req.name, email=req.email)


def merge_user(user: User, req: UserUpdate) -> User:
    """Apply the non-blank fields of ``req`` onto ``user`` in place."""
    if _has_text(req.name):
        user.name = req.name
    if _has_text(req.email):
        user.email = req.email
    return user


def to_user_response(user: User, task_ids: Iterable[str] = ()) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        task_ids=list(task_ids),
    )
