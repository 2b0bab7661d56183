"""Transport-neutral result models returned by the blog client."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, field_validator


class UserInfo(BaseModel):
    id: int
    username: str
    email: str
    created_at: datetime


class AuthInfo(BaseModel):
    token: str
    user: UserInfo


class PostInfo(BaseModel):
    id: int
    title: str
    content: str
    author_id: int
    author_username: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @field_validator("author_username", mode="before")
    @classmethod
    def empty_username_is_none(cls, v: Optional[str]) -> Optional[str]:
        # gRPC has no null string; the server sends "" when the author is unknown.
        return v or None


class PostList(BaseModel):
    posts: List[PostInfo]
    total: int
    limit: int
    offset: int
