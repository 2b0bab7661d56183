from .post import Post
from .user import AuthResult, User

__all__ = ["AuthResult", "Post", "User"]
