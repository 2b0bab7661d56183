"""Command value objects handed from the transport adapters to the services.

Each command is fully built and validated at the transport boundary, so
services never see a half-filled or malformed input. Validation failures raise
:class:`~inkwell.core.exceptions.ValidationError`.
"""

from dataclasses import dataclass
from typing import ClassVar

from inkwell.core.exceptions import ValidationError

MAX_TEXT_LENGTH = 255

# Ids are signed 64-bit in storage.
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


def _normalize_username(value: str) -> str:
    username = (value or "").strip()
    if not username:
        raise ValidationError("Username cannot be empty")
    if len(username) > MAX_TEXT_LENGTH:
        raise ValidationError(f"Username must not exceed {MAX_TEXT_LENGTH} characters")
    return username


def _normalize_email(value: str) -> str:
    email = (value or "").strip().lower()
    if len(email) > MAX_TEXT_LENGTH:
        raise ValidationError(f"Email must not exceed {MAX_TEXT_LENGTH} characters")
    local, sep, domain = email.partition("@")
    if not sep or not local or not domain or "@" in domain or any(c.isspace() for c in email):
        raise ValidationError("Invalid email address")
    return email


@dataclass(frozen=True)
class RegisterCommand:
    username: str
    email: str
    password: str

    MIN_PASSWORD_LENGTH: ClassVar[int] = 8
    MAX_PASSWORD_LENGTH: ClassVar[int] = 128

    def __post_init__(self) -> None:
        object.__setattr__(self, "username", _normalize_username(self.username))
        object.__setattr__(self, "email", _normalize_email(self.email))
        password = self.password or ""
        if len(password) < self.MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {self.MIN_PASSWORD_LENGTH} characters long"
            )
        if len(password) > self.MAX_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must not exceed {self.MAX_PASSWORD_LENGTH} characters"
            )

    def __repr__(self) -> str:
        return f"RegisterCommand(username={self.username!r}, email={self.email!r}, password='********')"


@dataclass(frozen=True)
class LoginCommand:
    """Login is keyed by email; the password is only checked for presence here."""

    email: str
    password: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "email", _normalize_email(self.email))
        if not self.password:
            raise ValidationError("Password cannot be empty")

    def __repr__(self) -> str:
        return f"LoginCommand(email={self.email!r}, password='********')"


@dataclass(frozen=True)
class _PostContent:
    title: str
    content: str

    def __post_init__(self) -> None:
        title = (self.title or "").strip()
        if not title:
            raise ValidationError("Title cannot be empty")
        if len(title) > MAX_TEXT_LENGTH:
            raise ValidationError(f"Title must not exceed {MAX_TEXT_LENGTH} characters")
        object.__setattr__(self, "title", title)
        object.__setattr__(self, "content", self.content or "")


@dataclass(frozen=True)
class CreatePostCommand(_PostContent):
    pass


@dataclass(frozen=True)
class UpdatePostCommand(_PostContent):
    pass
