"""Factories for fake users and registration payloads."""

from datetime import datetime, timezone
from typing import Optional

from faker import Faker

from inkwell.domain.entities.user import User
from inkwell.domain.value_objects.password import Password

fake = Faker()


def create_fake_user(
    id: Optional[int] = None,
    username: Optional[str] = None,
    email: Optional[str] = None,
    password: Optional[str] = None,
    created_at: Optional[datetime] = None,
) -> User:
    """Create a fake User entity.

    Args:
        id: User ID, defaults to a random integer.
        username: Username, defaults to a fake username.
        email: Email, defaults to a fake lower-case email.
        password: Plaintext to hash into the entity, defaults to a random one.
        created_at: Creation timestamp, defaults to now.

    Returns:
        User: A fake User entity with a real Argon2id hash.
    """
    return User(
        id=id if id is not None else fake.random_int(min=1, max=10000),
        username=username if username is not None else fake.unique.user_name(),
        email=email if email is not None else fake.unique.email().lower(),
        password_hash=Password.hash(password if password is not None else fake.password(length=12)),
        created_at=created_at if created_at is not None else datetime.now(timezone.utc),
    )


def create_fake_registration(password: Optional[str] = None) -> dict:
    """JSON body for ``POST /auth/register`` with unique username and email."""
    return {
        "username": fake.unique.user_name(),
        "email": fake.unique.email().lower(),
        "password": password if password is not None else fake.password(length=12),
    }
