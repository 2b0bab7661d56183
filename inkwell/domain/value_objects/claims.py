"""Decoded token payload."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Claims:
    """Identity and timing fields carried inside a signed token.

    Produced by the token service and consumed by the authorization step of
    each transport adapter. Never persisted.
    """

    user_id: int
    username: str
    issued_at: datetime
    expires_at: datetime
