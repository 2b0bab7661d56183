"""Post domain entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Post:
    """Blog post.

    ``author_id`` is fixed at creation. ``author_username`` is only populated by
    reads that join the author row and is None otherwise.
    """

    id: int
    title: str
    content: str
    author_id: int
    created_at: datetime
    updated_at: datetime
    author_username: Optional[str] = None
