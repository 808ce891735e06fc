from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from .config import DATABASE_ECHO, DATABASE_URL

# Import all models to ensure they are registered with SQLModel metadata
from .models import Task, User  # noqa: F401


def _create_engine(url: str = DATABASE_URL):
    if url.startswith("sqlite"):
        return create_async_engine(
            url,
            echo=DATABASE_ECHO,
            connect_args={"check_same_thread": False},
        )

    # Postgres: disable pooling for serverless and enable pre-ping
    return create_async_engine(
        url,
        echo=DATABASE_ECHO,
        pool_pre_ping=True,
        poolclass=NullPool,
    )


engine = _create_engine()

SessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db():
    """Dependency to get database session."""
    async with SessionLocal() as db:
        yield db


@asynccontextmanager
async def get_session():
    """Get a database session (context manager style).

    This is a convenience function for use outside of FastAPI dependencies.
    Usage:
        async with get_session() as session:
            # do something with session
    """
    async with SessionLocal() as session:
        yield session


async def create_tables(bind=None):
    """Create all database tables."""
    async with (bind or engine).begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
