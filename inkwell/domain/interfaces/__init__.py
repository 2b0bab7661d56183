from .repositories import IPostRepository, IUserRepository
from .services import ITokenService

__all__ = ["IPostRepository", "ITokenService", "IUserRepository"]
