"""SQLModel table definitions for the relational store.

These records are persistence shapes only; repositories convert them into the
frozen domain entities in :mod:`inkwell.domain.entities`.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import BigInteger, DateTime, ForeignKey, Integer, Text, func
from sqlmodel import Column, Field, Index, SQLModel, String

# BIGINT on PostgreSQL; SQLite only auto-increments an INTEGER primary key.
IdType = BigInteger().with_variant(Integer(), "sqlite")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes returned by drivers without tz support."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class UserRecord(SQLModel, table=True):
    """Row in the ``users`` table.

    Attributes:
        id: Store-assigned primary key.
        username: Unique, indexed.
        email: Unique, indexed, stored lower-cased.
        password_hash: PHC-encoded Argon2id hash.
        created_at: Insert time.
    """

    __tablename__ = "users"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
    )
    username: str = Field(
        sa_column=Column(String(255), unique=True, index=True, nullable=False),
    )
    email: str = Field(
        sa_column=Column(String(255), unique=True, index=True, nullable=False),
    )
    password_hash: str = Field(sa_column=Column(String(255), nullable=False))
    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False, server_default=func.now()),
    )


class PostRecord(SQLModel, table=True):
    """Row in the ``posts`` table. Deleting a user cascades to their posts."""

    __tablename__ = "posts"
    __table_args__ = (Index("idx_posts_created_at", "created_at"),)

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
    )
    title: str = Field(sa_column=Column(String(255), nullable=False))
    content: str = Field(sa_column=Column(Text, nullable=False))
    author_id: int = Field(
        sa_column=Column(
            IdType,
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
    )
    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False, server_default=func.now()),
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False, server_default=func.now()),
    )


users_table = UserRecord.__table__
posts_table = PostRecord.__table__
