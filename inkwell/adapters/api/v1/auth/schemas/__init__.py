"""Authentication API schemas package."""

# flake8: noqa: F401 – re-export

from .requests import LoginRequest, RegisterRequest
from .responses import AuthResponse, UserOut

__all__ = ["RegisterRequest", "LoginRequest", "UserOut", "AuthResponse"]
