"""Domain failures raised by the workflows and repositories.

The HTTP layer maps each of these to a problem response in
:mod:`taskboard.error_handlers`; nothing here knows about HTTP.
"""
from typing import Optional


class TaskboardError(Exception):
    """Base class for expected domain failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(TaskboardError):
    """Client input failed validation (blank title, blank assignee id...)."""


class NotFoundError(TaskboardError):
    """A task or user with the requested id does not exist."""

    def __init__(self, entity: str, entity_id: Optional[str] = None) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(TaskboardError):
    """The store rejected a write because of a uniqueness/integrity rule."""
