"""Errors raised by the blog client, independent of the transport in use."""

from typing import Dict, Optional, Type

import grpc


class ClientError(Exception):
    """Base class for every client-side failure.

    Attributes:
        message: Server-provided detail, or a local description.
        status: HTTP status or gRPC status name, when the server answered.
    """

    def __init__(self, message: str, status: Optional[object] = None):
        super().__init__(message)
        self.message = message
        self.status = status

    def __str__(self) -> str:
        return self.message


class NotFoundError(ClientError):
    pass


class UnauthorizedError(ClientError):
    pass


class ForbiddenError(ClientError):
    pass


class ConflictError(ClientError):
    pass


class InvalidRequestError(ClientError):
    pass


class RateLimitedError(ClientError):
    pass


class ServerError(ClientError):
    pass


class TransportError(ClientError):
    """The server could not be reached or the connection failed mid-call."""


class NoTokenError(ClientError):
    """An authenticated call was attempted before register/login/set_token."""

    def __init__(self, message: str = "Not authenticated: log in or register first"):
        super().__init__(message)


ERROR_BY_HTTP_STATUS: Dict[int, Type[ClientError]] = {
    400: InvalidRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: InvalidRequestError,
    429: RateLimitedError,
}

ERROR_BY_GRPC_STATUS: Dict[grpc.StatusCode, Type[ClientError]] = {
    grpc.StatusCode.INVALID_ARGUMENT: InvalidRequestError,
    grpc.StatusCode.UNAUTHENTICATED: UnauthorizedError,
    grpc.StatusCode.PERMISSION_DENIED: ForbiddenError,
    grpc.StatusCode.NOT_FOUND: NotFoundError,
    grpc.StatusCode.ALREADY_EXISTS: ConflictError,
    grpc.StatusCode.RESOURCE_EXHAUSTED: RateLimitedError,
    grpc.StatusCode.UNAVAILABLE: TransportError,
    grpc.StatusCode.DEADLINE_EXCEEDED: TransportError,
}


def error_for_http_status(status: int, message: str) -> ClientError:
    error_cls = ERROR_BY_HTTP_STATUS.get(status, ServerError if status >= 500 else ClientError)
    return error_cls(message, status=status)


def error_for_grpc_status(code: grpc.StatusCode, message: str) -> ClientError:
    error_cls = ERROR_BY_GRPC_STATUS.get(code, ServerError)
    return error_cls(message, status=code.name)
