"""Authentication settings: token signing and password hashing parameters.
"""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings


class AuthSettings(BaseSettings):
    """Defines settings for JWT issuance and Argon2id password hashing.

    Security Note:
        - JWT_SECRET signs every token with HS256. It must be a random string of
          at least 32 characters and must never be logged or committed.
        - Lowering the Argon2 cost parameters weakens offline brute-force
          resistance; the small values are only meant for test runs.
    """

    JWT_SECRET: SecretStr = Field(..., min_length=32)
    JWT_EXPIRE_HOURS: int = Field(ge=1, default=24)

    ARGON2_MEMORY_COST_KIB: int = Field(ge=8, default=65536)
    ARGON2_TIME_COST: int = Field(ge=1, default=1)
    ARGON2_PARALLELISM: int = Field(ge=1, default=4)
    ARGON2_HASH_LENGTH: int = Field(ge=16, default=32)
