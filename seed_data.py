"""Seed the configured database with a demo user and a task assigned to it."""
import asyncio

from taskboard.database import create_tables, get_session
from taskboard.errors import ConflictError
from taskboard.repositories import SqlTaskRepository, SqlUserRepository
from taskboard.schemas import TaskCreate, UserCreate
from taskboard.services import TaskService, UserService


async def seed() -> None:
    # Create tables if not exist
    await create_tables()

    async with get_session() as session:
        users = SqlUserRepository(session)
        tasks = SqlTaskRepository(session)

        try:
            user = await UserService(users, tasks).create_user(
                UserCreate(name="Ada Lovelace", email="ada@example.com")
            )
        except ConflictError:
            print("User already exists")
            return

        task_service = TaskService(tasks, users)
        task = await task_service.create_task(TaskCreate(title="Write the first program", status="IN_PROGRESS"))
        await task_service.assign(task.id, user.id)
        print(f"Demo user created: {user.email} ({user.id}) with task {task.id}")


if __name__ == "__main__":
    asyncio.run(seed())
