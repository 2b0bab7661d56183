"""Factory for fake post entities."""

from datetime import datetime, timezone
from typing import Optional

from faker import Faker

from inkwell.domain.entities.post import Post

fake = Faker()


def create_fake_post(
    id: Optional[int] = None,
    author_id: Optional[int] = None,
    title: Optional[str] = None,
    content: Optional[str] = None,
    author_username: Optional[str] = None,
) -> Post:
    now = datetime.now(timezone.utc)
    return Post(
        id=id if id is not None else fake.random_int(min=1, max=10000),
        title=title if title is not None else fake.sentence(nb_words=4),
        content=content if content is not None else fake.paragraph(),
        author_id=author_id if author_id is not None else fake.random_int(min=1, max=10000),
        created_at=now,
        updated_at=now,
        author_username=author_username,
    )
