"""User Repository implementation using SQLAlchemy.

Each operation opens a short-lived session from the shared factory and issues
a single statement. Uniqueness is enforced by the ``users`` table constraints;
a violation surfaces as :class:`UserAlreadyExistsError`.
"""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from structlog import get_logger

from inkwell.core.exceptions import UserAlreadyExistsError
from inkwell.core.logging import mask_email
from inkwell.domain.entities.user import User
from inkwell.domain.interfaces.repositories import IUserRepository
from inkwell.domain.value_objects.password import Password
from inkwell.infrastructure.database.database import translate_db_errors
from inkwell.infrastructure.database.models import as_utc, users_table, utcnow

logger = get_logger(__name__)


def _to_user(row) -> User:
    data = row._mapping
    return User(
        id=data["id"],
        username=data["username"],
        email=data["email"],
        password_hash=Password.from_hash(data["password_hash"]),
        created_at=as_utc(data["created_at"]),
    )


class UserRepository(IUserRepository):
    """SQLAlchemy implementation of :class:`IUserRepository`."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def create(self, username: str, email: str, password_hash: str) -> User:
        stmt = (
            insert(users_table)
            .values(
                username=username,
                email=email,
                password_hash=password_hash,
                created_at=utcnow(),
            )
            .returning(users_table)
        )
        async with self._session_factory() as session:
            with translate_db_errors("create_user"):
                try:
                    result = await session.execute(stmt)
                    row = result.one()
                    await session.commit()
                except IntegrityError:
                    await session.rollback()
                    logger.debug(
                        "User insert violated a unique constraint",
                        username=username,
                        email=mask_email(email),
                    )
                    raise UserAlreadyExistsError() from None
        user = _to_user(row)
        logger.debug("User created", user_id=user.id)
        return user

    async def find_by_email(self, email: str) -> Optional[User]:
        return await self._find_one("find_user_by_email", users_table.c.email == email)

    async def find_by_id(self, user_id: int) -> Optional[User]:
        return await self._find_one("find_user_by_id", users_table.c.id == user_id)

    async def find_by_username(self, username: str) -> Optional[User]:
        return await self._find_one("find_user_by_username", users_table.c.username == username)

    async def _find_one(self, operation: str, condition) -> Optional[User]:
        async with self._session_factory() as session:
            with translate_db_errors(operation):
                result = await session.execute(select(users_table).where(condition))
                row = result.first()
        return _to_user(row) if row is not None else None
