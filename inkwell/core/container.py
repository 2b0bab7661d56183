"""Process-wide service wiring.

One :class:`ServiceContainer` is built at process start and handed to both
transport frontends, so the HTTP routes and the gRPC servicer call the very
same service instances. Nothing here is a module-level singleton; tests build
their own containers.
"""

from dataclasses import dataclass
from datetime import timedelta

import structlog

from inkwell.core.config.settings import Settings
from inkwell.domain.services.auth_service import AuthService
from inkwell.domain.services.blog_service import BlogService
from inkwell.infrastructure.database.database import Database
from inkwell.infrastructure.repositories.post_repository import PostRepository
from inkwell.infrastructure.repositories.user_repository import UserRepository
from inkwell.infrastructure.services.jwt_service import JwtService
from inkwell.utils.security import configure_password_hasher

logger = structlog.get_logger(__name__)


@dataclass
class ServiceContainer:
    database: Database
    jwt_service: JwtService
    auth_service: AuthService
    blog_service: BlogService
    default_page_limit: int = 10
    max_page_limit: int = 100

    async def close(self) -> None:
        await self.database.dispose()


def build_container(settings: Settings) -> ServiceContainer:
    """Create the database, repositories and services from ``settings``."""
    configure_password_hasher(
        memory_cost_kib=settings.ARGON2_MEMORY_COST_KIB,
        time_cost=settings.ARGON2_TIME_COST,
        parallelism=settings.ARGON2_PARALLELISM,
        hash_length=settings.ARGON2_HASH_LENGTH,
    )

    database = Database(
        settings.DATABASE_URL,
        echo=settings.DATABASE_ECHO,
        pool_size=settings.DATABASE_POOL_SIZE,
        max_overflow=settings.DATABASE_MAX_OVERFLOW,
        pool_timeout=settings.DATABASE_POOL_TIMEOUT,
    )
    jwt_service = JwtService(
        secret=settings.JWT_SECRET.get_secret_value(),
        ttl=timedelta(hours=settings.JWT_EXPIRE_HOURS),
    )
    container = ServiceContainer(
        database=database,
        jwt_service=jwt_service,
        auth_service=AuthService(UserRepository(database.session_factory), jwt_service),
        blog_service=BlogService(PostRepository(database.session_factory)),
        default_page_limit=settings.PAGINATION_DEFAULT_LIMIT,
        max_page_limit=settings.PAGINATION_MAX_LIMIT,
    )
    logger.info(
        "service_container_built",
        database_backend=database.url.get_backend_name(),
        jwt_ttl_hours=settings.JWT_EXPIRE_HOURS,
    )
    return container
