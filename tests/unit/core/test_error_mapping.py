"""Both transports must map every error kind, and agree on the category."""

import grpc
import pytest
from starlette import status

from inkwell.adapters.rpc.errors import GRPC_STATUS_BY_KIND, grpc_status_for
from inkwell.core.exceptions import (
    INTERNAL_ERROR_MESSAGE,
    AuthenticationError,
    DatabaseError,
    ErrorKind,
    ForbiddenError,
    InkwellError,
    InvalidCredentialsError,
    JwtError,
    PasswordHashError,
    PostNotFoundError,
    UserAlreadyExistsError,
    UserNotFoundError,
    ValidationError,
)
from inkwell.core.handlers import HTTP_STATUS_BY_KIND, http_status_for

ALL_ERRORS = [
    UserNotFoundError,
    UserAlreadyExistsError,
    InvalidCredentialsError,
    AuthenticationError,
    PostNotFoundError,
    ForbiddenError,
    ValidationError,
    DatabaseError,
    PasswordHashError,
    JwtError,
]


def test_http_table_covers_every_kind():
    assert set(HTTP_STATUS_BY_KIND) == set(ErrorKind)


def test_grpc_table_covers_every_kind():
    assert set(GRPC_STATUS_BY_KIND) == set(ErrorKind)


def test_every_kind_has_an_error_class():
    assert {cls.kind for cls in ALL_ERRORS} == set(ErrorKind)


@pytest.mark.parametrize(
    "kind, http_status, grpc_status",
    [
        (ErrorKind.USER_NOT_FOUND, status.HTTP_404_NOT_FOUND, grpc.StatusCode.NOT_FOUND),
        (ErrorKind.POST_NOT_FOUND, status.HTTP_404_NOT_FOUND, grpc.StatusCode.NOT_FOUND),
        (ErrorKind.USER_ALREADY_EXISTS, status.HTTP_409_CONFLICT, grpc.StatusCode.ALREADY_EXISTS),
        (ErrorKind.INVALID_CREDENTIALS, status.HTTP_401_UNAUTHORIZED, grpc.StatusCode.UNAUTHENTICATED),
        (ErrorKind.UNAUTHENTICATED, status.HTTP_401_UNAUTHORIZED, grpc.StatusCode.UNAUTHENTICATED),
        (ErrorKind.FORBIDDEN, status.HTTP_403_FORBIDDEN, grpc.StatusCode.PERMISSION_DENIED),
        (ErrorKind.VALIDATION, status.HTTP_400_BAD_REQUEST, grpc.StatusCode.INVALID_ARGUMENT),
        (ErrorKind.DATABASE, status.HTTP_500_INTERNAL_SERVER_ERROR, grpc.StatusCode.INTERNAL),
        (ErrorKind.PASSWORD_HASH, status.HTTP_500_INTERNAL_SERVER_ERROR, grpc.StatusCode.INTERNAL),
        (ErrorKind.JWT, status.HTTP_500_INTERNAL_SERVER_ERROR, grpc.StatusCode.INTERNAL),
    ],
)
def test_mapping(kind, http_status, grpc_status):
    assert http_status_for(kind) == http_status
    assert grpc_status_for(kind) == grpc_status


@pytest.mark.parametrize("error_cls", [DatabaseError, PasswordHashError, JwtError])
def test_internal_messages_are_hidden(error_cls):
    error = error_cls("connection to 10.0.0.5 refused")
    assert error.message == "connection to 10.0.0.5 refused"
    assert error.public_message == INTERNAL_ERROR_MESSAGE


def test_client_facing_messages_pass_through():
    assert PostNotFoundError().public_message == "Post not found"
    assert ValidationError("Title cannot be empty").public_message == "Title cannot be empty"


def test_code_defaults_to_kind_value():
    error = ForbiddenError()
    assert isinstance(error, InkwellError)
    assert error.code == "forbidden"
    assert str(error) == "Forbidden: you don't have permission to perform this action"


def test_database_error_retryable_flag():
    assert DatabaseError("pool timeout", retryable=True).retryable
    assert not DatabaseError().retryable
