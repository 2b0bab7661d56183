"""
Asynchronous Database Module

This module owns the SQLAlchemy async engine and session factory shared by the
HTTP and gRPC frontends. A single :class:`Database` is created per process by
the service container; repositories receive its session factory.

**Security Note**: Never log the connection URL; it usually carries the
database password. Use ``?ssl=require`` on the asyncpg URL when connecting over
an untrusted network.

Key Components:
    - Database: engine + session factory, health check, schema creation, disposal.
    - translate_db_errors: context manager turning SQLAlchemy failures into
      :class:`~inkwell.core.exceptions.DatabaseError`.
"""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import DBAPIError, OperationalError, SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from structlog import get_logger
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from inkwell.core.exceptions import DatabaseError

# Registers the tables on SQLModel.metadata.
from inkwell.infrastructure.database import models  # noqa: F401

logger = get_logger(__name__)

RETRYABLE_ERRORS = (OperationalError, PoolTimeoutError, TimeoutError, ConnectionError)


def is_retryable(exc: BaseException) -> bool:
    """Connectivity problems and timeouts may succeed on a later attempt."""
    if isinstance(exc, RETRYABLE_ERRORS):
        return True
    return isinstance(exc, DBAPIError) and exc.connection_invalidated


@contextmanager
def translate_db_errors(operation: str) -> Iterator[None]:
    """Convert store exceptions raised inside the block into `DatabaseError`.

    The original exception is logged server-side and chained; its text is not
    copied into the raised error's public message.
    """
    try:
        yield
    except (SQLAlchemyError, TimeoutError, ConnectionError) as exc:
        retryable = is_retryable(exc)
        logger.error(
            "database_operation_failed",
            operation=operation,
            error_type=type(exc).__name__,
            error=str(exc),
            retryable=retryable,
        )
        raise DatabaseError(f"{operation} failed", retryable=retryable) from exc


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Async engine and session factory for one database URL.

    SQLite URLs (used by tests and local runs) get a single shared connection
    for in-memory databases and have foreign keys switched on; other backends
    use a bounded connection pool with pre-ping.
    """

    def __init__(
        self,
        url: str,
        *,
        echo: bool = False,
        pool_size: int = 10,
        max_overflow: int = 20,
        pool_timeout: float = 5.0,
    ):
        self.url = make_url(url)
        self.engine: AsyncEngine = self._create_engine(
            echo=echo, pool_size=pool_size, max_overflow=max_overflow, pool_timeout=pool_timeout
        )
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine, expire_on_commit=False
        )

    @property
    def is_sqlite(self) -> bool:
        return self.url.get_backend_name() == "sqlite"

    def _create_engine(self, *, echo, pool_size, max_overflow, pool_timeout) -> AsyncEngine:
        if self.is_sqlite:
            kwargs = {"connect_args": {"check_same_thread": False}}
            if self.url.database in (None, "", ":memory:"):
                kwargs["poolclass"] = StaticPool
            engine = create_async_engine(self.url, echo=echo, **kwargs)
            event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
            return engine

        return create_async_engine(
            self.url,
            echo=echo,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_timeout=pool_timeout,
            pool_pre_ping=True,
        )

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
        retry=retry_if_exception_type(RETRYABLE_ERRORS),
        reraise=True,
    )
    async def _ping(self) -> None:
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def check_health(self) -> bool:
        """
        Check database connectivity, retrying transient failures.

        Returns:
            bool: True if ``SELECT 1`` succeeded within three attempts.
        """
        try:
            await self._ping()
            logger.debug("database_health_check_passed")
            return True
        except (SQLAlchemyError, TimeoutError, ConnectionError, OSError) as exc:
            logger.error("database_health_check_failed", error=str(exc))
            return False

    async def create_tables(self) -> None:
        """Create all tables registered on ``SQLModel.metadata`` if missing."""
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("database_tables_created")

    async def drop_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.drop_all)

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("database_engine_disposed")
