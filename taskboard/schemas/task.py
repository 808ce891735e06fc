from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..models import TaskStatus


class CamelModel(BaseModel):
    """Base schema exposing camelCase names on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class TaskCreate(CamelModel):
    """Schema for creating new tasks.

    ``title`` is checked by the task service so a blank title is reported the
    same way as a missing one. ``status`` stays a raw string: unknown values
    fall back to TODO instead of failing the request.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    assignee_id: Optional[str] = None


class TaskUpdate(CamelModel):
    """Schema for updating existing tasks. Absent or blank fields are kept."""
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None


class AssigneeRequest(CamelModel):
    """Body of ``PUT /tasks/{id}/assignee``."""
    assignee_id: Optional[str] = None


class TaskResponse(CamelModel):
    """Task representation returned by the API."""
    id: str
    title: str
    description: Optional[str] = None
    status: TaskStatus
    assignee_id: Optional[str] = None
    creation_date: Optional[datetime] = None
