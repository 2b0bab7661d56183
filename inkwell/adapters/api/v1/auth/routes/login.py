from __future__ import annotations

"""/auth/login route module."""

from fastapi import APIRouter, Depends, status

from inkwell.adapters.api.dependencies import get_auth_service
from inkwell.adapters.api.v1.auth.schemas import AuthResponse, LoginRequest
from inkwell.domain.commands import LoginCommand
from inkwell.domain.services.auth_service import AuthService

router = APIRouter()


@router.post(
    "",
    response_model=AuthResponse,
    status_code=status.HTTP_200_OK,
    summary="Log in with email and password",
)
async def login_user(
    payload: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Authenticate by email and return a fresh bearer token.

    A wrong password and an unknown email produce the same 401 response.
    """
    result = await auth_service.login(LoginCommand(email=payload.email, password=payload.password))
    return AuthResponse.from_result(result)
