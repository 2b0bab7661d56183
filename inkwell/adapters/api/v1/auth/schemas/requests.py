from __future__ import annotations

"""Request-payload Pydantic models for authentication endpoints.

Only the JSON shape is checked here; field rules (lengths, email form) are
enforced by the domain commands so both transports reject the same inputs.
"""

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Payload expected by ``POST /auth/register``."""

    username: str = Field(..., examples=["alice"])
    email: str = Field(..., examples=["alice@example.com"])
    password: str = Field(..., examples=["pw123456"])


class LoginRequest(BaseModel):
    """Payload expected by ``POST /auth/login``."""

    email: str = Field(..., examples=["alice@example.com"])
    password: str = Field(..., examples=["pw123456"])
