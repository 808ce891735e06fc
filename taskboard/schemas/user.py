from typing import List, Optional

from pydantic import Field

from .task import CamelModel


class UserCreate(CamelModel):
    name: str
    email: str


class UserUpdate(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None


class UserResponse(CamelModel):
    """User representation; ``taskIds`` is joined from the tasks at read time."""
    id: str
    name: str
    email: str
    task_ids: List[str] = Field(default_factory=list)
