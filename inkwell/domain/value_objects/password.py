"""Password value object.

A :class:`Password` only ever holds the encoded Argon2id hash. It is built
either by hashing a plaintext (registration) or by wrapping a hash loaded from
the store, and its textual representation is always masked.
"""

import asyncio
from dataclasses import dataclass, field

from argon2.exceptions import HashingError

from inkwell.core.exceptions import PasswordHashError
from inkwell.utils.security import hash_password, verify_password

MASKED = "********"


@dataclass(frozen=True)
class Password:
    """Hashed password value object.

    Attributes:
        hashed_value: PHC-encoded Argon2id hash. Excluded from ``repr`` and
            compared only through :meth:`verify`.
    """

    hashed_value: str = field(repr=False)

    @classmethod
    def hash(cls, plaintext: str) -> "Password":
        """Derive a new hash from ``plaintext`` with a fresh random salt.

        Hashing the same plaintext twice yields two different encoded values.

        Raises:
            PasswordHashError: If the underlying library rejects the input or
                the configured parameters.
        """
        try:
            return cls(hash_password(plaintext))
        except (HashingError, TypeError, ValueError) as exc:
            raise PasswordHashError(f"Password hashing failed: {exc}") from exc

    @classmethod
    async def hash_async(cls, plaintext: str) -> "Password":
        """Same as :meth:`hash`, run in a worker thread.

        Argon2id deliberately burns CPU and memory, so request handlers must
        not run it on the event loop.
        """
        return await asyncio.to_thread(cls.hash, plaintext)

    @classmethod
    def from_hash(cls, stored: str) -> "Password":
        """Wrap an already-encoded hash without rehashing it."""
        return cls(stored)

    def verify(self, plaintext: str) -> bool:
        """Check ``plaintext`` against the stored hash.

        Never raises for a malformed stored hash; returns False instead.
        """
        return verify_password(plaintext, self.hashed_value)

    async def verify_async(self, plaintext: str) -> bool:
        return await asyncio.to_thread(self.verify, plaintext)

    def __repr__(self) -> str:
        return f'Password("{MASKED}")'

    def __str__(self) -> str:
        return repr(self)
