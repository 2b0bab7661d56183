from __future__ import annotations

"""Request and response Pydantic models for post endpoints."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from inkwell.domain.entities.post import Post
from inkwell.domain.value_objects.pagination import Page


class PostRequest(BaseModel):
    """Payload expected by ``POST /posts`` and ``PUT /posts/{id}``."""

    title: str = Field(..., examples=["Hello"])
    content: str = Field(..., examples=["First post"])


class PostOut(BaseModel):
    id: int
    title: str
    content: str
    author_id: int
    author_username: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, post: Post) -> "PostOut":
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            author_id=post.author_id,
            author_username=post.author_username,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class PostListResponse(BaseModel):
    """One page of posts. ``limit`` and ``offset`` echo the effective values
    after server-side clamping."""

    posts: List[PostOut]
    total: int
    limit: int
    offset: int

    @classmethod
    def from_page(cls, page: Page[Post]) -> "PostListResponse":
        return cls(
            posts=[PostOut.from_entity(p) for p in page.items],
            total=page.total,
            limit=page.limit,
            offset=page.offset,
        )
