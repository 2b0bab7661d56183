"""Application factory for creating and configuring the FastAPI application.

This module provides a factory function to create a properly configured FastAPI
application with middleware, exception handlers and routers registered.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from inkwell.adapters.api.v1 import api_router
from inkwell.core.config.settings import Settings
from inkwell.core.container import ServiceContainer
from inkwell.core.handlers import register_exception_handlers
from inkwell.core.lifecycle import create_lifespan_manager
from inkwell.core.middleware import configure_middleware
from inkwell.core.ratelimiter import create_limiter


def create_application(
    settings: Optional[Settings] = None,
    container: Optional[ServiceContainer] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Configuration; defaults to the process-wide settings.
        container: Pre-built services shared with another frontend. When
            omitted, the lifespan builds one on startup.

    Returns:
        FastAPI: The configured FastAPI application instance
    """
    if settings is None:
        from inkwell.core.config.settings import settings

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Blog API: user registration, login and post management.",
        lifespan=create_lifespan_manager(settings),
        default_response_class=JSONResponse,
    )
    app.state.container = container
    app.state.limiter = create_limiter(
        enabled=settings.RATE_LIMIT_ENABLED,
        per_second=settings.RATE_LIMIT_PER_SECOND,
        burst=settings.RATE_LIMIT_BURST,
    )

    configure_middleware(app, settings.ALLOWED_ORIGINS, settings.CORS_MAX_AGE)
    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api/v1")

    return app
