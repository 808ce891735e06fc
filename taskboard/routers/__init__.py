from . import tasks, users

__all__ = ["tasks", "users"]
