from __future__ import annotations

"""Response Pydantic models for authentication endpoints."""

from datetime import datetime

from pydantic import BaseModel

from inkwell.domain.entities.user import AuthResult, User


class UserOut(BaseModel):
    """Public view of a user. The password hash is never serialized."""

    id: int
    username: str
    email: str
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserOut":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            created_at=user.created_at,
        )


class AuthResponse(BaseModel):
    """Response returned by register & login endpoints."""

    token: str
    user: UserOut

    @classmethod
    def from_result(cls, result: AuthResult) -> "AuthResponse":
        return cls(token=result.token, user=UserOut.from_entity(result.user))
