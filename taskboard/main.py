from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import CORS_ORIGINS, ENVIRONMENT
from .database import create_tables
from .error_handlers import register_error_handlers
from .logging_setup import configure_logging
from .middleware import RequestLoggingMiddleware
from .routers import tasks, users

configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create tables on startup
    await create_tables()
    logger.info("startup_complete", environment=ENVIRONMENT, version=__version__)
    yield


# Create FastAPI app
app = FastAPI(
    title="Taskboard API",
    description="Tasks, users and task assignment over an async document store",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

register_error_handlers(app)

# Include routers
app.include_router(tasks.router, tags=["tasks"])
app.include_router(users.router, tags=["users"])


@app.get("/")
def read_root():
    return {"message": "Taskboard API"}


@app.get("/health")
def health_check():
    return {"status": "healthy"}
