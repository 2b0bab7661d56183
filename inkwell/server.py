"""Process entry point running the HTTP and gRPC frontends together.

Both frontends share one :class:`~inkwell.core.container.ServiceContainer`, so
they call the same services over the same connection pool.
"""

import asyncio

import structlog
import uvicorn

from inkwell.adapters.rpc.server import create_rpc_server
from inkwell.core.application import create_application
from inkwell.core.config.settings import Settings
from inkwell.core.container import build_container
from inkwell.core.initialization import initialize_application

logger = structlog.get_logger(__name__)

GRPC_SHUTDOWN_GRACE_SECONDS = 5


async def serve(settings: Settings) -> None:
    """Serve until uvicorn receives a shutdown signal, then stop gRPC and
    release the database engine."""
    container = build_container(settings)
    app = create_application(settings, container=container)

    http_server = uvicorn.Server(
        uvicorn.Config(
            app,
            host=settings.HTTP_HOST,
            port=settings.HTTP_PORT,
            log_config=None,
        )
    )
    grpc_server, grpc_port = create_rpc_server(container, settings.grpc_address)

    await grpc_server.start()
    logger.info("grpc_server_started", port=grpc_port)
    try:
        await http_server.serve()
    finally:
        await grpc_server.stop(GRPC_SHUTDOWN_GRACE_SECONDS)
        await container.close()
        logger.info("servers_stopped")


def main() -> None:
    initialize_application()
    from inkwell.core.config.settings import settings

    logger.info(
        "starting_servers",
        http=settings.http_address,
        grpc=settings.grpc_address,
        env=settings.APP_ENV,
    )
    asyncio.run(serve(settings))


if __name__ == "__main__":
    main()
