"""Blog Domain Service.

Post CRUD with ownership enforcement. Mutations use a conditional statement
scoped by both the post id and the caller's id; only when that statement
matches nothing is a second read issued, and only to tell the caller whether
the post is missing or belongs to someone else.
"""

import structlog

from inkwell.core.exceptions import ForbiddenError, PostNotFoundError
from inkwell.domain.commands import CreatePostCommand, UpdatePostCommand
from inkwell.domain.entities.post import Post
from inkwell.domain.interfaces.repositories import IPostRepository
from inkwell.domain.value_objects.pagination import Page, PageRequest

logger = structlog.get_logger(__name__)


class BlogService:
    """Domain service for post operations.

    The ``author_id`` passed to every mutation must come from verified token
    claims, never from client input.
    """

    def __init__(self, post_repository: IPostRepository):
        self._post_repository = post_repository

    async def create_post(self, author_id: int, cmd: CreatePostCommand) -> Post:
        post = await self._post_repository.create(cmd.title, cmd.content, author_id)
        logger.info("Post created", post_id=post.id, author_id=author_id)
        return post

    async def get_post(self, post_id: int) -> Post:
        post = await self._post_repository.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError()
        return post

    async def update_post(self, post_id: int, author_id: int, cmd: UpdatePostCommand) -> Post:
        """Update a post owned by ``author_id``.

        Raises:
            ForbiddenError: If the post exists but has another author.
            PostNotFoundError: If the post does not exist, including when it was
                deleted between the update and the classification read.
        """
        post = await self._post_repository.update_by_author(
            post_id, author_id, cmd.title, cmd.content
        )
        if post is not None:
            logger.info("Post updated", post_id=post_id, author_id=author_id)
            return post
        raise await self._classify_failure(post_id, author_id, "update")

    async def delete_post(self, post_id: int, author_id: int) -> None:
        """Delete a post owned by ``author_id``.

        Raises:
            ForbiddenError: If the post exists but has another author.
            PostNotFoundError: If the post does not exist.
        """
        if await self._post_repository.delete_by_author(post_id, author_id):
            logger.info("Post deleted", post_id=post_id, author_id=author_id)
            return
        raise await self._classify_failure(post_id, author_id, "delete")

    async def list_posts(self, page: PageRequest) -> Page[Post]:
        """Return one window of posts, newest first, with the overall count.

        The total is a separate count, not derived from the page length.
        """
        posts = await self._post_repository.list(page.limit, page.offset)
        total = await self._post_repository.count()
        return Page(items=posts, total=total, limit=page.limit, offset=page.offset)

    async def _classify_failure(self, post_id: int, author_id: int, action: str) -> Exception:
        existing = await self._post_repository.find_by_id(post_id)
        if existing is None:
            logger.info(f"Post {action} failed - not found", post_id=post_id, author_id=author_id)
            return PostNotFoundError()
        logger.warning(
            f"Post {action} forbidden",
            post_id=post_id,
            author_id=author_id,
            owner_id=existing.author_id,
        )
        return ForbiddenError()
