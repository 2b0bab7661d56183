"""Re-export factory functions for generating fake test data."""

# flake8: noqa: F401 – re-export

from .post import create_fake_post
from .user import create_fake_registration, create_fake_user

__all__ = [
    "create_fake_post",
    "create_fake_registration",
    "create_fake_user",
]
