"""Application lifecycle management.

This module handles application startup and shutdown, building the service
container when the application was created without one and releasing the
database engine on exit.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from structlog import get_logger

from inkwell.core.config.settings import Settings
from inkwell.core.container import build_container

logger = get_logger(__name__)


def create_lifespan_manager(settings: Settings):
    """Create the application lifespan manager.

    Returns:
        AsyncContextManager: The lifespan manager for the FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup: ensure a container, check the database, optionally create
        the schema. Shutdown: dispose the container if this lifespan built it.

        Raises:
            RuntimeError: If the database is unavailable during startup
        """
        owns_container = getattr(app.state, "container", None) is None
        if owns_container:
            app.state.container = build_container(settings)
        container = app.state.container

        if not await container.database.check_health():
            logger.error("database_unavailable_on_startup")
            raise RuntimeError("Database unavailable")
        if settings.DATABASE_CREATE_TABLES:
            await container.database.create_tables()
        logger.info("application_startup", env=settings.APP_ENV, version=settings.VERSION)

        yield

        if owns_container:
            await container.close()
            app.state.container = None
        logger.info("application_shutdown", env=settings.APP_ENV)

    return lifespan
