"""Unified blog client.

:class:`BlogClient` exposes one API over either the REST or the gRPC
frontend. The transport is picked once at construction; callers are otherwise
unaware of it::

    async with BlogClient(Transport.http("http://localhost:3000")) as client:
        await client.login("a@x.com", "pw123456")
        post = await client.create_post("Hello", "First post")
"""

from dataclasses import dataclass
from typing import Optional, Union

import grpc
import httpx

from inkwell.client.errors import (
    ClientError,
    ConflictError,
    ForbiddenError,
    InvalidRequestError,
    NoTokenError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    TransportError,
    UnauthorizedError,
)
from inkwell.client.grpc_client import GrpcBlogClient
from inkwell.client.http_client import HttpBlogClient
from inkwell.client.models import AuthInfo, PostInfo, PostList, UserInfo

__all__ = [
    "AuthInfo",
    "BlogClient",
    "ClientError",
    "ConflictError",
    "ForbiddenError",
    "InvalidRequestError",
    "NoTokenError",
    "NotFoundError",
    "PostInfo",
    "PostList",
    "RateLimitedError",
    "ServerError",
    "Transport",
    "TransportError",
    "UnauthorizedError",
    "UserInfo",
]

HTTP = "http"
GRPC = "grpc"


@dataclass(frozen=True)
class Transport:
    """Which frontend to talk to, and where."""

    kind: str
    address: str

    @classmethod
    def http(cls, base_url: str) -> "Transport":
        return cls(HTTP, base_url)

    @classmethod
    def grpc(cls, endpoint: str) -> "Transport":
        return cls(GRPC, endpoint)


class BlogClient:
    """Transport-agnostic blog client.

    The client keeps the current token: register and login store it, and every
    later call that needs authentication attaches it. ``get_token``,
    ``set_token`` and ``clear_token`` let callers persist it between runs.

    Args:
        transport: Selected frontend.
        http_transport: Optional httpx transport for the REST frontend.
        grpc_channel: Optional channel for the gRPC frontend.
        timeout: Per-call timeout in seconds.
    """

    def __init__(
        self,
        transport: Transport,
        *,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
        grpc_channel: Optional[grpc.aio.Channel] = None,
        timeout: float = 10.0,
    ):
        self.transport = transport
        self._backend: Union[HttpBlogClient, GrpcBlogClient]
        if transport.kind == HTTP:
            self._backend = HttpBlogClient(transport.address, transport=http_transport, timeout=timeout)
        elif transport.kind == GRPC:
            self._backend = GrpcBlogClient(transport.address, channel=grpc_channel, timeout=timeout)
        else:
            raise ValueError(f"Unknown transport: {transport.kind!r}")

    async def __aenter__(self) -> "BlogClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self._backend.close()

    def get_token(self) -> Optional[str]:
        return self._backend.token

    def set_token(self, token: str) -> None:
        self._backend.token = token

    def clear_token(self) -> None:
        self._backend.token = None

    async def register(self, username: str, email: str, password: str) -> AuthInfo:
        result = await self._backend.register(username, email, password)
        self.set_token(result.token)
        return result

    async def login(self, email: str, password: str) -> AuthInfo:
        result = await self._backend.login(email, password)
        self.set_token(result.token)
        return result

    async def create_post(self, title: str, content: str) -> PostInfo:
        return await self._backend.create_post(title, content)

    async def get_post(self, post_id: int) -> PostInfo:
        return await self._backend.get_post(post_id)

    async def update_post(self, post_id: int, title: str, content: str) -> PostInfo:
        return await self._backend.update_post(post_id, title, content)

    async def delete_post(self, post_id: int) -> None:
        await self._backend.delete_post(post_id)

    async def list_posts(self, limit: int = 10, offset: int = 0) -> PostList:
        return await self._backend.list_posts(limit, offset)
