"""Security utilities for password hashing and verification.

This module owns the process-wide Argon2id hasher. The defaults match the
production configuration (64 MiB memory, 1 pass, 4 lanes, 32-byte digest);
``configure_password_hasher`` replaces them from settings at startup.
"""

from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHashError, VerificationError

SALT_LENGTH = 16

_password_hasher = PasswordHasher(
    time_cost=1,
    memory_cost=65536,
    parallelism=4,
    hash_len=32,
    salt_len=SALT_LENGTH,
    type=Type.ID,
)


def configure_password_hasher(
    memory_cost_kib: int = 65536,
    time_cost: int = 1,
    parallelism: int = 4,
    hash_length: int = 32,
) -> PasswordHasher:
    """Replace the process-wide hasher with one using the given Argon2id cost.

    Returns:
        PasswordHasher: The newly installed hasher.
    """
    global _password_hasher
    _password_hasher = PasswordHasher(
        time_cost=time_cost,
        memory_cost=memory_cost_kib,
        parallelism=parallelism,
        hash_len=hash_length,
        salt_len=SALT_LENGTH,
        type=Type.ID,
    )
    return _password_hasher


def get_password_hasher() -> PasswordHasher:
    return _password_hasher


def hash_password(password: str) -> str:
    """Hash a password with Argon2id and a fresh random salt.

    Args:
        password: Plain text password to hash

    Returns:
        str: PHC-encoded hash (``$argon2id$v=19$m=...,t=...,p=...$salt$digest``)
    """
    return _password_hasher.hash(password)


def verify_password(password: str, hashed_password: str) -> bool:
    """Verify a password against its encoded hash.

    The cost parameters are read from the encoded hash, so hashes produced
    under an older configuration keep verifying.

    Returns:
        bool: True if password matches hash, False on mismatch or on a
        malformed hash.
    """
    try:
        return _password_hasher.verify(hashed_password, password)
    except (VerificationError, InvalidHashError, UnicodeEncodeError):
        return False
