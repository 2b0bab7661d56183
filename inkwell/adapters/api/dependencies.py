"""FastAPI dependencies shared by the v1 routes.

Services come from the container on ``app.state``; the caller's identity comes
only from a verified bearer token.
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from inkwell.core.container import ServiceContainer
from inkwell.core.exceptions import AuthenticationError
from inkwell.domain.services.auth_service import AuthService
from inkwell.domain.services.blog_service import BlogService
from inkwell.domain.value_objects.claims import Claims

bearer_scheme = HTTPBearer(auto_error=False)


def get_container(request: Request) -> ServiceContainer:
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError("Service container is not initialised")
    return container


def get_auth_service(container: ServiceContainer = Depends(get_container)) -> AuthService:
    return container.auth_service


def get_blog_service(container: ServiceContainer = Depends(get_container)) -> BlogService:
    return container.blog_service


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> Claims:
    """Resolve ``Authorization: Bearer <token>`` to verified claims.

    Raises:
        AuthenticationError: If the header is missing, uses another scheme, or
            carries a token that fails verification.
    """
    if credentials is None:
        raise AuthenticationError("Missing authorization token")
    return auth_service.authenticate(credentials.credentials)
