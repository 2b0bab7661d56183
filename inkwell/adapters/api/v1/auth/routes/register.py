from __future__ import annotations

"""/auth/register route module."""

import structlog
from fastapi import APIRouter, Depends, status

from inkwell.adapters.api.dependencies import get_auth_service
from inkwell.adapters.api.v1.auth.schemas import AuthResponse, RegisterRequest
from inkwell.core.logging import mask_email
from inkwell.domain.commands import RegisterCommand
from inkwell.domain.services.auth_service import AuthService

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="Creates an account and returns a bearer token for it.",
)
async def register_user(
    payload: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Register a new user with the provided credentials.

    Raises:
        ValidationError: Malformed username, email or password (400).
        UserAlreadyExistsError: Username or email taken (409).
    """
    logger.debug(
        "Registration attempt",
        username=payload.username,
        email=mask_email(payload.email),
    )
    cmd = RegisterCommand(
        username=payload.username, email=payload.email, password=payload.password
    )
    result = await auth_service.register(cmd)
    return AuthResponse.from_result(result)
