import grpc
import pytest

from inkwell.client import Transport
from inkwell.client.errors import (
    ClientError,
    ConflictError,
    ForbiddenError,
    InvalidRequestError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    TransportError,
    UnauthorizedError,
    error_for_grpc_status,
    error_for_http_status,
)
from inkwell.client.grpc_client import grpc_target


@pytest.mark.parametrize(
    "status, expected",
    [
        (400, InvalidRequestError),
        (401, UnauthorizedError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (409, ConflictError),
        (429, RateLimitedError),
        (500, ServerError),
        (503, ServerError),
        (418, ClientError),
    ],
)
def test_http_status_mapping(status, expected):
    error = error_for_http_status(status, "detail")
    assert type(error) is expected
    assert error.status == status
    assert error.message == "detail"


@pytest.mark.parametrize(
    "code, expected",
    [
        (grpc.StatusCode.INVALID_ARGUMENT, InvalidRequestError),
        (grpc.StatusCode.UNAUTHENTICATED, UnauthorizedError),
        (grpc.StatusCode.PERMISSION_DENIED, ForbiddenError),
        (grpc.StatusCode.NOT_FOUND, NotFoundError),
        (grpc.StatusCode.ALREADY_EXISTS, ConflictError),
        (grpc.StatusCode.UNAVAILABLE, TransportError),
        (grpc.StatusCode.INTERNAL, ServerError),
    ],
)
def test_grpc_status_mapping(code, expected):
    error = error_for_grpc_status(code, "detail")
    assert type(error) is expected
    assert error.status == code.name


@pytest.mark.parametrize(
    "endpoint, target",
    [
        ("http://localhost:50051", "localhost:50051"),
        ("https://blog.example.com:443/", "blog.example.com:443"),
        ("127.0.0.1:50051", "127.0.0.1:50051"),
    ],
)
def test_grpc_target(endpoint, target):
    assert grpc_target(endpoint) == target


def test_transport_constructors():
    assert Transport.http("http://x").kind == "http"
    assert Transport.grpc("x:1").kind == "grpc"
