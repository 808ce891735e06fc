from .problem import ProblemDetail
from .task import AssigneeRequest, TaskCreate, TaskResponse, TaskUpdate
from .user import UserCreate, UserResponse, UserUpdate

__all__ = [
    "AssigneeRequest",
    "ProblemDetail",
    "TaskCreate",
    "TaskResponse",
    "TaskUpdate",
    "UserCreate",
    "UserResponse",
    "UserUpdate",
]
