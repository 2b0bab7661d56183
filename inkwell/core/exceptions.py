from __future__ import annotations

"""Centralized, structured exception hierarchy for Inkwell.

Every error raised by the domain and application layers derives from
:class:`InkwellError` and belongs to exactly one :class:`ErrorKind`. The kind
set is closed: each transport adapter owns a table keyed by it (see
``inkwell.core.handlers`` for HTTP and ``inkwell.adapters.rpc.errors`` for
gRPC) and the test suite checks that both tables cover every member.

Each error carries a machine-readable ``code`` and a human-readable
``message``. Messages of internal kinds (database, hashing, signing) are meant
for server-side logs only; adapters replace them with a generic text.
"""

import enum
from typing import Final

__all__: Final = [
    "ErrorKind",
    "InkwellError",
    "UserNotFoundError",
    "UserAlreadyExistsError",
    "InvalidCredentialsError",
    "AuthenticationError",
    "PostNotFoundError",
    "ForbiddenError",
    "ValidationError",
    "DatabaseError",
    "PasswordHashError",
    "JwtError",
    "INTERNAL_ERROR_MESSAGE",
]

INTERNAL_ERROR_MESSAGE: Final = "Internal server error"


class ErrorKind(str, enum.Enum):
    """Closed set of failure categories shared by every layer."""

    USER_NOT_FOUND = "user_not_found"
    USER_ALREADY_EXISTS = "user_already_exists"
    INVALID_CREDENTIALS = "invalid_credentials"
    UNAUTHENTICATED = "unauthenticated"
    POST_NOT_FOUND = "post_not_found"
    FORBIDDEN = "forbidden"
    VALIDATION = "validation_error"
    DATABASE = "database_error"
    PASSWORD_HASH = "password_hash_error"
    JWT = "jwt_error"

    @property
    def is_internal(self) -> bool:
        """True for kinds whose message must not reach a client."""
        return self in (ErrorKind.DATABASE, ErrorKind.PASSWORD_HASH, ErrorKind.JWT)


class InkwellError(Exception):
    """Base exception class for all custom errors in the Inkwell application.

    Attributes:
        message (str): A human-readable error message, suitable for logging.
        code (str): A unique, machine-readable error code.
        kind (ErrorKind): The taxonomy entry transports map to a wire status.
    """

    kind: ErrorKind = ErrorKind.VALIDATION
    default_message: str = "Application error"

    def __init__(self, message: str | None = None, code: str | None = None):
        self.message = message or self.default_message
        self.code = code or self.kind.value
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message

    @property
    def public_message(self) -> str:
        """Message safe to send to a client."""
        return INTERNAL_ERROR_MESSAGE if self.kind.is_internal else self.message


# ---------------------------------------------------------------------------
# Auth-related errors
# ---------------------------------------------------------------------------


class UserNotFoundError(InkwellError):
    kind = ErrorKind.USER_NOT_FOUND
    default_message = "User not found"


class UserAlreadyExistsError(InkwellError):
    """Raised when the store rejects a user insert on a uniqueness constraint.

    The message never says whether the username or the email collided.
    """

    kind = ErrorKind.USER_ALREADY_EXISTS
    default_message = "User already exists"


class InvalidCredentialsError(InkwellError):
    """Raised for an unknown email and for a wrong password alike."""

    kind = ErrorKind.INVALID_CREDENTIALS
    default_message = "Invalid credentials"


class AuthenticationError(InkwellError):
    """Raised at a transport boundary when a bearer token is missing or rejected."""

    kind = ErrorKind.UNAUTHENTICATED
    default_message = "Invalid or expired token"


# ---------------------------------------------------------------------------
# Post-related errors
# ---------------------------------------------------------------------------


class PostNotFoundError(InkwellError):
    kind = ErrorKind.POST_NOT_FOUND
    default_message = "Post not found"


class ForbiddenError(InkwellError):
    kind = ErrorKind.FORBIDDEN
    default_message = "Forbidden: you don't have permission to perform this action"


# ---------------------------------------------------------------------------
# Input and infrastructure errors
# ---------------------------------------------------------------------------


class ValidationError(InkwellError):
    kind = ErrorKind.VALIDATION
    default_message = "Validation error"


class DatabaseError(InkwellError):
    """Opaque store failure.

    ``retryable`` is True for connectivity problems and timeouts, where the same
    request may succeed later, and False for everything else.
    """

    kind = ErrorKind.DATABASE
    default_message = "Database error"

    def __init__(self, message: str | None = None, *, retryable: bool = False):
        super().__init__(message)
        self.retryable = retryable


class PasswordHashError(InkwellError):
    kind = ErrorKind.PASSWORD_HASH
    default_message = "Password hashing failed"


class JwtError(InkwellError):
    kind = ErrorKind.JWT
    default_message = "Token error"
