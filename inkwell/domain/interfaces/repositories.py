"""Repository interfaces for abstracting data persistence in the domain layer.

The services depend only on these abstract base classes. Concrete
implementations live in ``inkwell.infrastructure.repositories`` and translate
store failures into :mod:`inkwell.core.exceptions` types, so no raw driver or
SQLAlchemy exception crosses this boundary.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from inkwell.domain.entities.post import Post
from inkwell.domain.entities.user import User


class IUserRepository(ABC):
    """Contract for user persistence operations."""

    @abstractmethod
    async def create(self, username: str, email: str, password_hash: str) -> User:
        """Inserts a new user row in a single statement.

        Args:
            username: Already-validated username.
            email: Already-normalized email.
            password_hash: Encoded password hash.

        Returns:
            The stored `User`, including its store-assigned id and timestamp.

        Raises:
            UserAlreadyExistsError: If the username or email is taken. The
                error does not say which one.
            DatabaseError: On any other store failure.
        """
        raise NotImplementedError

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Retrieves a user by their (normalized) email address."""
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Retrieves a user by their unique identifier."""
        raise NotImplementedError

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Retrieves a user by their username."""
        raise NotImplementedError


class IPostRepository(ABC):
    """Contract for post persistence operations.

    Each method maps to exactly one store statement.
    """

    @abstractmethod
    async def create(self, title: str, content: str, author_id: int) -> Post:
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, post_id: int) -> Optional[Post]:
        """Retrieves a post joined with its author's username, or None."""
        raise NotImplementedError

    @abstractmethod
    async def update_by_author(
        self, post_id: int, author_id: int, title: str, content: str
    ) -> Optional[Post]:
        """Updates a post only if both the id and the author match.

        Returns:
            The updated post with a fresh `updated_at`, or None when no row
            matched. None does not say whether the post is missing or owned by
            someone else.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete_by_author(self, post_id: int, author_id: int) -> bool:
        """Deletes a post only if both the id and the author match.

        Returns:
            True if a row was deleted.
        """
        raise NotImplementedError

    @abstractmethod
    async def list(self, limit: int, offset: int) -> List[Post]:
        """Returns one page of posts, newest first, joined with author usernames."""
        raise NotImplementedError

    @abstractmethod
    async def count(self) -> int:
        """Returns the total number of posts."""
        raise NotImplementedError
