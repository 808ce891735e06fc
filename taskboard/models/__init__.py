from .task import Task, TaskStatus
from .user import User

# Export all models for easy importing
__all__ = ["Task", "TaskStatus", "User"]
