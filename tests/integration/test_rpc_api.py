"""Tests of the gRPC frontend against a real ``grpc.aio`` server."""

import grpc
import pytest
import pytest_asyncio

from inkwell.adapters.rpc import messages as pb

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


class RawStub:
    """Calls ``blog.BlogService`` methods with hand-built requests and metadata."""

    def __init__(self, channel: grpc.aio.Channel):
        self._calls = {
            method: channel.unary_unary(
                pb.method_path(method),
                request_serializer=request_cls.SerializeToString,
                response_deserializer=response_cls.FromString,
            )
            for method, (request_cls, response_cls) in pb.METHODS.items()
        }

    async def __call__(self, method, request, token=None, metadata=None):
        if token is not None:
            metadata = (("authorization", f"Bearer {token}"),)
        return await self._calls[method](request, metadata=metadata, timeout=5)


@pytest_asyncio.fixture
async def stub(rpc_address):
    async with grpc.aio.insecure_channel(rpc_address) as channel:
        yield RawStub(channel)


async def register(stub, username="alice", email="alice@example.com", password="pw123456"):
    return await stub("Register", pb.RegisterRequest(username=username, email=email, password=password))


async def test_register_and_login(stub):
    registered = await register(stub)
    assert registered.token
    assert registered.user.username == "alice"
    assert registered.user.id.isdigit()

    logged_in = await stub("Login", pb.LoginRequest(email="alice@example.com", password="pw123456"))
    assert logged_in.user.id == registered.user.id


async def test_duplicate_registration(stub):
    await register(stub)
    with pytest.raises(grpc.aio.AioRpcError) as exc_info:
        await register(stub, email="other@example.com")
    assert exc_info.value.code() == grpc.StatusCode.ALREADY_EXISTS
    assert exc_info.value.details() == "User already exists"


async def test_bad_login(stub):
    await register(stub)
    with pytest.raises(grpc.aio.AioRpcError) as exc_info:
        await stub("Login", pb.LoginRequest(email="alice@example.com", password="wrong-password"))
    assert exc_info.value.code() == grpc.StatusCode.UNAUTHENTICATED
    assert exc_info.value.details() == "Invalid credentials"


async def test_validation_maps_to_invalid_argument(stub):
    with pytest.raises(grpc.aio.AioRpcError) as exc_info:
        await register(stub, password="short")
    assert exc_info.value.code() == grpc.StatusCode.INVALID_ARGUMENT


class TestAuthorization:
    async def test_missing_metadata(self, stub):
        with pytest.raises(grpc.aio.AioRpcError) as exc_info:
            await stub("CreatePost", pb.CreatePostRequest(title="t", content="c"))
        assert exc_info.value.code() == grpc.StatusCode.UNAUTHENTICATED

    async def test_non_bearer_metadata(self, stub):
        token = (await register(stub)).token
        with pytest.raises(grpc.aio.AioRpcError) as exc_info:
            await stub(
                "CreatePost",
                pb.CreatePostRequest(title="t", content="c"),
                metadata=(("authorization", f"Token {token}"),),
            )
        assert exc_info.value.code() == grpc.StatusCode.UNAUTHENTICATED
        assert exc_info.value.details() == "Invalid authorization header format"

    async def test_garbage_token(self, stub):
        with pytest.raises(grpc.aio.AioRpcError) as exc_info:
            await stub("CreatePost", pb.CreatePostRequest(title="t", content="c"), token="garbage")
        assert exc_info.value.code() == grpc.StatusCode.UNAUTHENTICATED
        assert exc_info.value.details() == "Invalid or expired token"


class TestPosts:
    async def test_ownership_lifecycle(self, stub):
        alice = (await register(stub)).token
        bob = (await register(stub, username="bob", email="bob@example.com")).token

        created = await stub("CreatePost", pb.CreatePostRequest(title="Hello", content="First"), token=alice)
        post_id = created.post.id

        fetched = await stub("GetPost", pb.GetPostRequest(id=post_id))
        assert fetched.post.author_username == "alice"

        for method, request in [
            ("UpdatePost", pb.UpdatePostRequest(id=post_id, title="Mine", content="x")),
            ("DeletePost", pb.DeletePostRequest(id=post_id)),
        ]:
            with pytest.raises(grpc.aio.AioRpcError) as exc_info:
                await stub(method, request, token=bob)
            assert exc_info.value.code() == grpc.StatusCode.PERMISSION_DENIED

        updated = await stub(
            "UpdatePost", pb.UpdatePostRequest(id=post_id, title="Edited", content="y"), token=alice
        )
        assert updated.post.title == "Edited"

        deleted = await stub("DeletePost", pb.DeletePostRequest(id=post_id), token=alice)
        assert deleted.success is True
        assert deleted.message == "Post deleted successfully"

        with pytest.raises(grpc.aio.AioRpcError) as exc_info:
            await stub("DeletePost", pb.DeletePostRequest(id=post_id), token=alice)
        assert exc_info.value.code() == grpc.StatusCode.NOT_FOUND

    @pytest.mark.parametrize("post_id", ["abc", "", "1.5", "9999999999999999999", "-9223372036854775809"])
    async def test_invalid_id(self, stub, post_id):
        with pytest.raises(grpc.aio.AioRpcError) as exc_info:
            await stub("GetPost", pb.GetPostRequest(id=post_id))
        assert exc_info.value.code() == grpc.StatusCode.INVALID_ARGUMENT
        assert exc_info.value.details() == "Invalid post ID"

    async def test_list_pages(self, stub):
        token = (await register(stub)).token
        for i in range(25):
            await stub("CreatePost", pb.CreatePostRequest(title=f"Post {i}", content="c"), token=token)

        first = await stub("ListPosts", pb.ListPostsRequest(page=1, page_size=10))
        assert first.total_count == 25
        assert (first.page, first.page_size) == (1, 10)
        assert first.posts[0].title == "Post 24"

        third = await stub("ListPosts", pb.ListPostsRequest(page=3, page_size=10))
        assert len(third.posts) == 5

        defaults = await stub("ListPosts", pb.ListPostsRequest())
        assert (defaults.page, defaults.page_size) == (1, 10)


async def test_both_frontends_share_state(stub, async_client):
    token = (await register(stub)).token
    await stub("CreatePost", pb.CreatePostRequest(title="From gRPC", content="c"), token=token)

    body = (await async_client.get("/api/v1/posts")).json()
    assert [p["title"] for p in body["posts"]] == ["From gRPC"]

    response = await async_client.post(
        "/api/v1/auth/login", json={"email": "alice@example.com", "password": "pw123456"}
    )
    assert response.status_code == 200
