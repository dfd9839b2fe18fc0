import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.app.api.errors import register_exception_handlers
from src.app.api.v1 import clients
from src.app.containers import Container
from src.app.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def default_lifespan(app: FastAPI):
    """Default application lifespan manager - creates the schema on startup, releases the pool on shutdown."""
    container: Container = app.state.container
    logger.info("Starting Client Registry API...")

    db = container.database()
    await db.create_schema()
    logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down Client Registry API...")
    await db.dispose()


def create_app(container: Container, lifespan=default_lifespan) -> FastAPI:
    """
    Create and configure FastAPI application.

    Resolving the settings here makes a missing DATABASE_URL fail at startup
    rather than on the first request.

    Args:
        container: DI container providing settings, storage and the mediator.
        lifespan: Lifespan context manager. Defaults to default_lifespan.

    Returns:
        Configured FastAPI application.
    """
    config = container.config()
    configure_logging(config.log_level)

    container.wire(modules=["src.app.api.v1.clients"])
    # Build the handler table once, before the first request
    container.mediator()

    app = FastAPI(
        title=config.app_name,
        version=config.app_version,
        lifespan=lifespan,
    )

    # Attach container to app state for access in lifespan and routes
    app.state.container = container

    register_exception_handlers(app)
    app.include_router(clients.router, prefix="/api/v1")

    @app.get("/")
    async def root():
        return {"message": f"Welcome to {config.app_name}"}

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


def build_app() -> FastAPI:
    """Application factory for ASGI servers, e.g. ``uvicorn --factory src.app.main:build_app``."""
    return create_app(container=Container())
