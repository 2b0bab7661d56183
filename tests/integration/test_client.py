"""The unified client behaves the same over both transports."""

import pytest
import pytest_asyncio
from httpx import ASGITransport

from inkwell.client import (
    BlogClient,
    ConflictError,
    ForbiddenError,
    InvalidRequestError,
    NoTokenError,
    NotFoundError,
    Transport,
    UnauthorizedError,
)

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


@pytest.fixture(params=["http", "grpc"])
def transport_kind(request):
    return request.param


@pytest_asyncio.fixture
async def make_client(transport_kind, app, rpc_address):
    clients = []

    def _make() -> BlogClient:
        if transport_kind == "http":
            client = BlogClient(Transport.http("http://test"), http_transport=ASGITransport(app=app))
        else:
            client = BlogClient(Transport.grpc(f"http://{rpc_address}"))
        clients.append(client)
        return client

    yield _make
    for client in clients:
        await client.close()


async def test_register_sets_token(make_client):
    client = make_client()
    assert client.get_token() is None

    result = await client.register("alice", "alice@example.com", "pw123456")

    assert client.get_token() == result.token
    assert result.user.username == "alice"
    post = await client.create_post("Hello", "First post")
    assert post.author_id == result.user.id


async def test_authenticated_call_without_token(make_client):
    client = make_client()
    with pytest.raises(NoTokenError):
        await client.create_post("Hello", "body")
    with pytest.raises(NoTokenError):
        await client.delete_post(1)


async def test_error_mapping(make_client):
    alice = make_client()
    bob = make_client()
    await alice.register("alice", "alice@example.com", "pw123456")
    await bob.register("bob", "bob@example.com", "pw123456")
    post = await alice.create_post("Hello", "body")

    with pytest.raises(ForbiddenError):
        await bob.update_post(post.id, "Mine", "x")
    with pytest.raises(NotFoundError) as exc_info:
        await alice.get_post(post.id + 1000)
    assert exc_info.value.message == "Post not found"
    with pytest.raises(ConflictError):
        await make_client().register("alice", "new@example.com", "pw123456")
    with pytest.raises(InvalidRequestError):
        await alice.create_post("", "body")
    with pytest.raises(UnauthorizedError):
        await make_client().login("alice@example.com", "wrong-password")


async def test_login_then_crud(make_client):
    await make_client().register("alice", "alice@example.com", "pw123456")
    client = make_client()
    await client.login("alice@example.com", "pw123456")

    post = await client.create_post("Hello", "body")
    updated = await client.update_post(post.id, "Edited", "new body")
    assert updated.title == "Edited"
    assert (await client.get_post(post.id)).author_username == "alice"

    await client.delete_post(post.id)
    with pytest.raises(NotFoundError):
        await client.get_post(post.id)


async def test_list_posts(make_client):
    client = make_client()
    await client.register("alice", "alice@example.com", "pw123456")
    for i in range(5):
        await client.create_post(f"Post {i}", "body")

    page = await client.list_posts(limit=2, offset=2)
    assert page.total == 5
    assert page.limit == 2
    assert page.offset == 2
    assert [p.title for p in page.posts] == ["Post 2", "Post 1"]


async def test_clear_token(make_client):
    client = make_client()
    await client.register("alice", "alice@example.com", "pw123456")
    client.clear_token()
    with pytest.raises(NoTokenError):
        await client.create_post("Hello", "body")


@pytest.mark.parametrize("transport_kind", ["grpc"])
async def test_grpc_offset_rounds_down_to_page(make_client):
    client = make_client()
    await client.register("alice", "alice@example.com", "pw123456")
    for i in range(5):
        await client.create_post(f"Post {i}", "body")

    page = await client.list_posts(limit=2, offset=3)
    assert page.offset == 2
    assert [p.title for p in page.posts] == ["Post 2", "Post 1"]
