"""User domain entity.

A user is created once by registration and never mutated afterwards. Username
and email are each globally unique; the store's unique constraints enforce it.
"""

from dataclasses import dataclass
from datetime import datetime

from inkwell.domain.value_objects.password import Password


@dataclass(frozen=True)
class User:
    """Registered account.

    Attributes:
        id: Store-assigned identifier, immutable.
        username: Unique display name, immutable after creation.
        email: Unique login key, stored lower-cased.
        password_hash: Hashed credential; its repr is masked.
        created_at: Creation timestamp (UTC).
    """

    id: int
    username: str
    email: str
    password_hash: Password
    created_at: datetime


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a successful registration or login. Never persisted."""

    token: str
    user: User
