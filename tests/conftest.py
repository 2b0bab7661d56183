import os

# Settings are read from the environment on import, so these must be set first.
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("JWT_SECRET", "inkwell-test-secret-key-0123456789abcdef")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ARGON2_MEMORY_COST_KIB", "1024")
os.environ.setdefault("ARGON2_PARALLELISM", "1")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from inkwell.adapters.rpc.server import create_rpc_server
from inkwell.core.application import create_application
from inkwell.core.config.settings import Settings
from inkwell.core.container import build_container
from inkwell.utils.security import configure_password_hasher


@pytest.fixture(scope="session", autouse=True)
def fast_password_hasher():
    """Cheap Argon2id parameters for every test, including pure unit tests."""
    configure_password_hasher(memory_cost_kib=1024, time_cost=1, parallelism=1)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None)


@pytest_asyncio.fixture
async def container(test_settings):
    """Fresh in-memory database with the schema created, wired to real services."""
    container = build_container(test_settings)
    await container.database.create_tables()
    yield container
    await container.close()


@pytest.fixture
def app(test_settings, container):
    return create_application(settings=test_settings, container=container)


@pytest_asyncio.fixture
async def async_client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def rpc_address(container):
    """Start a gRPC server on an ephemeral port sharing ``container`` with HTTP."""
    server, port = create_rpc_server(container, "127.0.0.1:0")
    await server.start()
    yield f"127.0.0.1:{port}"
    await server.stop(None)


@pytest.fixture
def auth_header():
    def _header(token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}

    return _header
