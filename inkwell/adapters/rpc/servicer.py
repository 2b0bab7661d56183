"""gRPC implementation of ``blog.BlogService``.

The servicer holds the same ``AuthService`` and ``BlogService`` instances as
the HTTP routes. It converts wire messages into domain commands, and domain
results and errors back into messages and status codes.
"""

import functools
import re
from datetime import datetime
from typing import Optional

import grpc
import structlog

from inkwell.adapters.rpc import messages as pb
from inkwell.adapters.rpc.errors import grpc_status_for
from inkwell.core.exceptions import (
    INTERNAL_ERROR_MESSAGE,
    AuthenticationError,
    InkwellError,
    ValidationError,
)
from inkwell.domain.commands import (
    MAX_ID,
    MIN_ID,
    CreatePostCommand,
    LoginCommand,
    RegisterCommand,
    UpdatePostCommand,
)
from inkwell.domain.entities.post import Post
from inkwell.domain.entities.user import AuthResult, User
from inkwell.domain.services.auth_service import AuthService
from inkwell.domain.services.blog_service import BlogService
from inkwell.domain.value_objects.claims import Claims
from inkwell.domain.value_objects.pagination import PageRequest

logger = structlog.get_logger(__name__)

AUTHORIZATION_KEY = "authorization"
BEARER_PREFIX = "Bearer "
_ID_PATTERN = re.compile(r"-?\d{1,19}")


def _timestamp(value: datetime) -> str:
    return value.isoformat()


def _user_message(user: User):
    return pb.User(
        id=str(user.id),
        username=user.username,
        email=user.email,
        created_at=_timestamp(user.created_at),
    )


def _post_message(post: Post):
    return pb.Post(
        id=str(post.id),
        title=post.title,
        content=post.content,
        author_id=str(post.author_id),
        author_username=post.author_username or "",
        created_at=_timestamp(post.created_at),
        updated_at=_timestamp(post.updated_at),
    )


def _auth_response(result: AuthResult):
    return pb.AuthResponse(token=result.token, user=_user_message(result.user))


def parse_id(value: str, what: str = "post") -> int:
    """Parse a decimal-string id from the wire.

    Raises:
        ValidationError: If ``value`` is not a decimal integer that fits in
            a signed 64-bit id.
    """
    if not _ID_PATTERN.fullmatch(value or ""):
        raise ValidationError(f"Invalid {what} ID")
    parsed = int(value)
    if not MIN_ID <= parsed <= MAX_ID:
        raise ValidationError(f"Invalid {what} ID")
    return parsed


def bearer_token(context: grpc.aio.ServicerContext) -> Optional[str]:
    """Extract the token from ``authorization: Bearer <token>`` metadata.

    Raises:
        AuthenticationError: If the entry exists but is not a bearer value.
    """
    for key, value in context.invocation_metadata() or ():
        if key.lower() != AUTHORIZATION_KEY:
            continue
        if isinstance(value, bytes):
            value = value.decode("utf-8", errors="replace")
        if not value.startswith(BEARER_PREFIX):
            raise AuthenticationError("Invalid authorization header format")
        return value[len(BEARER_PREFIX):]
    return None


def translate_errors(method):
    """Abort the call with the mapped status when an error escapes.

    Domain errors use the kind's status. Anything else is INTERNAL with the
    generic message; its text only reaches the log.
    """

    @functools.wraps(method)
    async def wrapper(self, request, context: grpc.aio.ServicerContext):
        try:
            return await method(self, request, context)
        except InkwellError as exc:
            code = grpc_status_for(exc.kind)
            if exc.kind.is_internal:
                logger.error("RPC failed", method=method.__name__, error=exc.code, detail=exc.message)
            else:
                logger.info("RPC rejected", method=method.__name__, error=exc.code, status=code.name)
            await context.abort(code, exc.public_message)
        except Exception as exc:
            logger.exception("Unhandled RPC error", method=method.__name__, error_type=type(exc).__name__)
            await context.abort(grpc.StatusCode.INTERNAL, INTERNAL_ERROR_MESSAGE)

    return wrapper


class BlogServicer:
    """Unary handlers for every ``blog.BlogService`` method."""

    def __init__(
        self,
        auth_service: AuthService,
        blog_service: BlogService,
        default_page_limit: int = 10,
        max_page_limit: int = 100,
    ):
        self._auth_service = auth_service
        self._blog_service = blog_service
        self._default_page_limit = default_page_limit
        self._max_page_limit = max_page_limit

    def _authenticate(self, context: grpc.aio.ServicerContext) -> Claims:
        return self._auth_service.authenticate(bearer_token(context))

    @translate_errors
    async def Register(self, request, context):
        cmd = RegisterCommand(
            username=request.username, email=request.email, password=request.password
        )
        return _auth_response(await self._auth_service.register(cmd))

    @translate_errors
    async def Login(self, request, context):
        cmd = LoginCommand(email=request.email, password=request.password)
        return _auth_response(await self._auth_service.login(cmd))

    @translate_errors
    async def CreatePost(self, request, context):
        claims = self._authenticate(context)
        cmd = CreatePostCommand(title=request.title, content=request.content)
        post = await self._blog_service.create_post(claims.user_id, cmd)
        return pb.PostResponse(post=_post_message(post))

    @translate_errors
    async def GetPost(self, request, context):
        post = await self._blog_service.get_post(parse_id(request.id))
        return pb.PostResponse(post=_post_message(post))

    @translate_errors
    async def UpdatePost(self, request, context):
        claims = self._authenticate(context)
        post_id = parse_id(request.id)
        cmd = UpdatePostCommand(title=request.title, content=request.content)
        post = await self._blog_service.update_post(post_id, claims.user_id, cmd)
        return pb.PostResponse(post=_post_message(post))

    @translate_errors
    async def DeletePost(self, request, context):
        claims = self._authenticate(context)
        await self._blog_service.delete_post(parse_id(request.id), claims.user_id)
        return pb.DeleteResponse(success=True, message="Post deleted successfully")

    @translate_errors
    async def ListPosts(self, request, context):
        page_request = PageRequest.from_page(
            request.page,
            request.page_size,
            default_limit=self._default_page_limit,
            max_limit=self._max_page_limit,
        )
        page = await self._blog_service.list_posts(page_request)
        return pb.ListPostsResponse(
            posts=[_post_message(post) for post in page.items],
            total_count=page.total,
            page=page_request.page,
            page_size=page_request.limit,
        )
