from .auth_service import AuthService
from .blog_service import BlogService

__all__ = ["AuthService", "BlogService"]
