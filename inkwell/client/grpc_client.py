"""Blog client over the gRPC API, built on a ``grpc.aio`` channel."""

import logging
from typing import Optional

import grpc

from inkwell.adapters.rpc import messages as pb
from inkwell.client.errors import NoTokenError, error_for_grpc_status
from inkwell.client.models import AuthInfo, PostInfo, PostList, UserInfo

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


def grpc_target(endpoint: str) -> str:
    """Strip an ``http://``/``https://`` scheme; grpc targets are ``host:port``."""
    for scheme in ("http://", "https://"):
        if endpoint.startswith(scheme):
            return endpoint[len(scheme):].rstrip("/")
    return endpoint


def _user(message) -> UserInfo:
    return UserInfo(
        id=message.id,
        username=message.username,
        email=message.email,
        created_at=message.created_at,
    )


def _post(message) -> PostInfo:
    return PostInfo(
        id=message.id,
        title=message.title,
        content=message.content,
        author_id=message.author_id,
        author_username=message.author_username,
        created_at=message.created_at,
        updated_at=message.updated_at,
    )


def _auth(response) -> AuthInfo:
    return AuthInfo(token=response.token, user=_user(response.user))


class GrpcBlogClient:
    """gRPC transport for :class:`inkwell.client.BlogClient`.

    Args:
        endpoint: ``host:port`` or ``http://host:port``.
        channel: Optional pre-built channel, mostly for tests.
        timeout: Per-call deadline in seconds.
    """

    def __init__(
        self,
        endpoint: str,
        channel: Optional[grpc.aio.Channel] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.endpoint = grpc_target(endpoint)
        self.token: Optional[str] = None
        self.timeout = timeout
        self._channel = channel or grpc.aio.insecure_channel(self.endpoint)
        self._calls = {
            method: self._channel.unary_unary(
                pb.method_path(method),
                request_serializer=request_cls.SerializeToString,
                response_deserializer=response_cls.FromString,
            )
            for method, (request_cls, response_cls) in pb.METHODS.items()
        }

    async def close(self) -> None:
        await self._channel.close()

    async def _call(self, method: str, request, auth: bool = False):
        metadata = None
        if auth:
            if not self.token:
                raise NoTokenError()
            metadata = (("authorization", f"Bearer {self.token}"),)
        try:
            return await self._calls[method](request, metadata=metadata, timeout=self.timeout)
        except grpc.aio.AioRpcError as exc:
            logger.debug("gRPC %s failed: %s %s", method, exc.code(), exc.details())
            raise error_for_grpc_status(exc.code(), exc.details() or exc.code().name) from exc

    async def register(self, username: str, email: str, password: str) -> AuthInfo:
        response = await self._call(
            "Register", pb.RegisterRequest(username=username, email=email, password=password)
        )
        return _auth(response)

    async def login(self, email: str, password: str) -> AuthInfo:
        response = await self._call("Login", pb.LoginRequest(email=email, password=password))
        return _auth(response)

    async def create_post(self, title: str, content: str) -> PostInfo:
        response = await self._call(
            "CreatePost", pb.CreatePostRequest(title=title, content=content), auth=True
        )
        return _post(response.post)

    async def get_post(self, post_id: int) -> PostInfo:
        response = await self._call("GetPost", pb.GetPostRequest(id=str(post_id)))
        return _post(response.post)

    async def update_post(self, post_id: int, title: str, content: str) -> PostInfo:
        response = await self._call(
            "UpdatePost",
            pb.UpdatePostRequest(id=str(post_id), title=title, content=content),
            auth=True,
        )
        return _post(response.post)

    async def delete_post(self, post_id: int) -> None:
        await self._call("DeletePost", pb.DeletePostRequest(id=str(post_id)), auth=True)

    async def list_posts(self, limit: int = 10, offset: int = 0) -> PostList:
        """List posts using the page-based wire format.

        ``offset`` is rounded down to a multiple of ``limit``; the returned
        ``PostList.offset`` is the offset the server actually used.
        """
        page_size = max(limit, 1)
        page = max(offset, 0) // page_size + 1
        response = await self._call(
            "ListPosts", pb.ListPostsRequest(page=page, page_size=page_size)
        )
        return PostList(
            posts=[_post(p) for p in response.posts],
            total=response.total_count,
            limit=response.page_size,
            offset=(response.page - 1) * response.page_size,
        )
