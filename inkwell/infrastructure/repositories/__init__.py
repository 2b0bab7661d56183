from .post_repository import PostRepository
from .user_repository import UserRepository

__all__ = ["PostRepository", "UserRepository"]
