import enum
from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel, Field


class TaskStatus(str, enum.Enum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class Task(SQLModel, table=True):
    """Task document.

    ``id`` stays ``None`` until the repository persists the task.
    ``assignee_id`` is a plain reference to a user id, not a foreign key:
    deleting a user leaves it in place.
    """
    __tablename__ = "tasks"

    id: Optional[str] = Field(default=None, primary_key=True)
    title: str
    description: Optional[str] = None
    creation_date: Optional[datetime] = None
    status: TaskStatus = Field(default=TaskStatus.TODO)
    assignee_id: Optional[str] = Field(default=None, index=True)
