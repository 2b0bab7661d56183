"""``grpc.aio`` server wiring for the blog service."""

from typing import Tuple

import grpc
import structlog

from inkwell.adapters.rpc import messages as pb
from inkwell.adapters.rpc.servicer import BlogServicer
from inkwell.core.container import ServiceContainer

logger = structlog.get_logger(__name__)


def build_generic_handler(servicer: BlogServicer) -> grpc.GenericRpcHandler:
    """Route every ``blog.BlogService`` method to the matching servicer coroutine."""
    handlers = {
        method: grpc.unary_unary_rpc_method_handler(
            getattr(servicer, method),
            request_deserializer=request_cls.FromString,
            response_serializer=response_cls.SerializeToString,
        )
        for method, (request_cls, response_cls) in pb.METHODS.items()
    }
    return grpc.method_handlers_generic_handler(pb.SERVICE_NAME, handlers)


def create_rpc_server(container: ServiceContainer, address: str) -> Tuple[grpc.aio.Server, int]:
    """Create (but do not start) a gRPC server bound to ``address``.

    Returns:
        The server and the bound port, which differs from the requested one
        when ``address`` ends in ``:0``.
    """
    servicer = BlogServicer(
        container.auth_service,
        container.blog_service,
        default_page_limit=container.default_page_limit,
        max_page_limit=container.max_page_limit,
    )
    server = grpc.aio.server()
    server.add_generic_rpc_handlers((build_generic_handler(servicer),))
    port = server.add_insecure_port(address)
    logger.info("grpc_server_bound", address=address, port=port)
    return server, port
