"""Domain error to gRPC status mapping."""

from typing import Dict

import grpc

from inkwell.core.exceptions import ErrorKind

GRPC_STATUS_BY_KIND: Dict[ErrorKind, grpc.StatusCode] = {
    ErrorKind.USER_NOT_FOUND: grpc.StatusCode.NOT_FOUND,
    ErrorKind.POST_NOT_FOUND: grpc.StatusCode.NOT_FOUND,
    ErrorKind.USER_ALREADY_EXISTS: grpc.StatusCode.ALREADY_EXISTS,
    ErrorKind.INVALID_CREDENTIALS: grpc.StatusCode.UNAUTHENTICATED,
    ErrorKind.UNAUTHENTICATED: grpc.StatusCode.UNAUTHENTICATED,
    ErrorKind.FORBIDDEN: grpc.StatusCode.PERMISSION_DENIED,
    ErrorKind.VALIDATION: grpc.StatusCode.INVALID_ARGUMENT,
    ErrorKind.DATABASE: grpc.StatusCode.INTERNAL,
    ErrorKind.PASSWORD_HASH: grpc.StatusCode.INTERNAL,
    ErrorKind.JWT: grpc.StatusCode.INTERNAL,
}


def grpc_status_for(kind: ErrorKind) -> grpc.StatusCode:
    return GRPC_STATUS_BY_KIND[kind]
