"""Pagination value objects.

Clients and the REST API speak ``(limit, offset)``; the gRPC wire format speaks
``(page, page_size)`` with a 1-based page. Both are normalized into a
:class:`PageRequest` with server-side bounds applied.
"""

from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True)
class PageRequest:
    """A normalized ``(limit, offset)`` window.

    Use :meth:`clamped` or :meth:`from_page` rather than the constructor when
    the values come from a client.
    """

    limit: int = DEFAULT_LIMIT
    offset: int = 0

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError("limit must be at least 1")
        if self.offset < 0:
            raise ValueError("offset must not be negative")

    @classmethod
    def clamped(
        cls,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ) -> "PageRequest":
        """Build a request from client-supplied limit/offset.

        A missing limit falls back to ``default_limit``; the limit is then
        clamped to ``[1, max_limit]``. A missing or negative offset becomes 0.
        """
        effective_limit = default_limit if limit is None else limit
        effective_limit = max(1, min(effective_limit, max_limit))
        effective_offset = max(0, offset or 0)
        return cls(limit=effective_limit, offset=effective_offset)

    @classmethod
    def from_page(
        cls,
        page: int,
        page_size: int,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ) -> "PageRequest":
        """Build a request from a 1-based page number and a page size.

        Pages below 1 are treated as page 1 and a non-positive page size as
        the default; ``offset = (page - 1) * page_size``.
        """
        page = max(page, 1)
        size = default_limit if page_size <= 0 else page_size
        size = max(1, min(size, max_limit))
        return cls(limit=size, offset=(page - 1) * size)

    @property
    def page(self) -> int:
        """1-based page number containing ``offset``."""
        return self.offset // self.limit + 1


@dataclass(frozen=True)
class Page(Generic[T]):
    """One window of results plus the total number of matching rows."""

    items: List[T] = field(default_factory=list)
    total: int = 0
    limit: int = DEFAULT_LIMIT
    offset: int = 0

    @property
    def page(self) -> int:
        return self.offset // self.limit + 1

    @property
    def has_more(self) -> bool:
        return self.offset + len(self.items) < self.total
