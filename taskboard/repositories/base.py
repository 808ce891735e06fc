from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import Task, TaskStatus, User


class TaskRepository(ABC):
    """Async store for task documents.

    ``save`` inserts when the task has no id yet (the store assigns one) and
    replaces the stored document otherwise.
    """

    @abstractmethod
    async def find_all(self) -> List[Task]: ...

    @abstractmethod
    async def find_by_id(self, task_id: str) -> Optional[Task]: ...

    @abstractmethod
    async def find_all_by_status(self, status: TaskStatus) -> List[Task]: ...

    @abstractmethod
    async def find_all_by_assignee_id(self, assignee_id: str) -> List[Task]: ...

    @abstractmethod
    async def exists_by_id(self, task_id: str) -> bool: ...

    @abstractmethod
    async def save(self, task: Task) -> Task: ...

    @abstractmethod
    async def delete(self, task: Task) -> None: ...


class UserRepository(ABC):
    """Async store for user documents. Same ``save`` contract as tasks."""

    @abstractmethod
    async def find_all(self) -> List[User]: ...

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]: ...

    @abstractmethod
    async def exists_by_id(self, user_id: str) -> bool: ...

    @abstractmethod
    async def save(self, user: User) -> User: ...

    @abstractmethod
    async def delete(self, user: User) -> None: ...
