"""Post Repository implementation using SQLAlchemy.

Every method is one statement. Ownership-scoped mutations put both the post id
and the author id in the ``WHERE`` clause, so a successful update or delete
never races with a concurrent change of ownership or deletion.
"""

from typing import List, Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from structlog import get_logger

from inkwell.domain.entities.post import Post
from inkwell.domain.interfaces.repositories import IPostRepository
from inkwell.infrastructure.database.database import translate_db_errors
from inkwell.infrastructure.database.models import as_utc, posts_table, users_table, utcnow

logger = get_logger(__name__)

_joined_posts = select(
    posts_table, users_table.c.username.label("author_username")
).join_from(posts_table, users_table, users_table.c.id == posts_table.c.author_id)


def _to_post(row) -> Post:
    data = row._mapping
    return Post(
        id=data["id"],
        title=data["title"],
        content=data["content"],
        author_id=data["author_id"],
        created_at=as_utc(data["created_at"]),
        updated_at=as_utc(data["updated_at"]),
        author_username=data.get("author_username"),
    )


class PostRepository(IPostRepository):
    """SQLAlchemy implementation of :class:`IPostRepository`."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def create(self, title: str, content: str, author_id: int) -> Post:
        now = utcnow()
        stmt = (
            insert(posts_table)
            .values(title=title, content=content, author_id=author_id, created_at=now, updated_at=now)
            .returning(posts_table)
        )
        async with self._session_factory() as session:
            with translate_db_errors("create_post"):
                result = await session.execute(stmt)
                row = result.one()
                await session.commit()
        return _to_post(row)

    async def find_by_id(self, post_id: int) -> Optional[Post]:
        async with self._session_factory() as session:
            with translate_db_errors("find_post_by_id"):
                result = await session.execute(_joined_posts.where(posts_table.c.id == post_id))
                row = result.first()
        return _to_post(row) if row is not None else None

    async def update_by_author(
        self, post_id: int, author_id: int, title: str, content: str
    ) -> Optional[Post]:
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id, posts_table.c.author_id == author_id)
            .values(title=title, content=content, updated_at=utcnow())
            .returning(posts_table)
        )
        async with self._session_factory() as session:
            with translate_db_errors("update_post"):
                result = await session.execute(stmt)
                row = result.first()
                await session.commit()
        if row is None:
            logger.debug("Conditional post update matched no row", post_id=post_id, author_id=author_id)
            return None
        return _to_post(row)

    async def delete_by_author(self, post_id: int, author_id: int) -> bool:
        stmt = delete(posts_table).where(
            posts_table.c.id == post_id, posts_table.c.author_id == author_id
        )
        async with self._session_factory() as session:
            with translate_db_errors("delete_post"):
                result = await session.execute(stmt)
                await session.commit()
        return result.rowcount > 0

    async def list(self, limit: int, offset: int) -> List[Post]:
        stmt = (
            _joined_posts.order_by(posts_table.c.created_at.desc(), posts_table.c.id.desc())
            .limit(limit)
            .offset(offset)
        )
        async with self._session_factory() as session:
            with translate_db_errors("list_posts"):
                result = await session.execute(stmt)
                rows = result.all()
        return [_to_post(row) for row in rows]

    async def count(self) -> int:
        async with self._session_factory() as session:
            with translate_db_errors("count_posts"):
                result = await session.execute(select(func.count()).select_from(posts_table))
                return result.scalar_one()
