"""Tests for the command-line client with the network layer mocked out."""

import stat
import sys
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from inkwell import cli
from inkwell.client import AuthInfo, NotFoundError, PostInfo, PostList, UserInfo

NOW = datetime(2024, 3, 1, 9, 30, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def token_file(tmp_path, monkeypatch):
    path = tmp_path / "token"
    monkeypatch.setenv("INKWELL_TOKEN_FILE", str(path))
    return path


def _post(**overrides) -> PostInfo:
    data = dict(
        id=1,
        title="Hello",
        content="First post",
        author_id=7,
        author_username="alice",
        created_at=NOW,
        updated_at=NOW,
    )
    data.update(overrides)
    return PostInfo(**data)


def _parse(*argv):
    return cli.build_parser().parse_args(list(argv))


def test_parser_defaults():
    args = _parse("list")
    assert args.grpc is False
    assert args.server is None
    assert (args.limit, args.offset) == (10, 0)


def test_parser_global_flags():
    args = _parse("--grpc", "--server", "http://h:1", "get", "--id", "5")
    assert args.grpc is True
    assert args.server == "http://h:1"
    assert args.id == 5


def test_token_file_round_trip(token_file):
    assert cli.load_token() is None
    cli.save_token("abc.def.ghi")
    assert token_file.read_text() == "abc.def.ghi"
    assert cli.load_token() == "abc.def.ghi"


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX file modes")
def test_token_file_created_owner_only(token_file, mocker):
    spy = mocker.spy(cli.os, "open")

    cli.save_token("abc.def.ghi")

    spy.assert_called_once()
    assert spy.call_args.args[2] == 0o600
    assert stat.S_IMODE(token_file.stat().st_mode) == 0o600


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX file modes")
def test_existing_token_file_is_tightened(token_file):
    token_file.write_text("old-token-that-is-longer")
    token_file.chmod(0o644)

    cli.save_token("new")

    assert stat.S_IMODE(token_file.stat().st_mode) == 0o600
    assert token_file.read_text() == "new"


def test_logout_removes_token(token_file, capsys):
    token_file.write_text("tok")
    assert cli.main(["logout"]) == 0
    assert not token_file.exists()


@pytest.mark.asyncio
async def test_register_saves_token(token_file, capsys):
    client = AsyncMock()
    client.register.return_value = AuthInfo(
        token="new-token",
        user=UserInfo(id=7, username="alice", email="alice@example.com", created_at=NOW),
    )

    await cli.run_command(client, _parse("register", "--username", "alice", "--email", "alice@example.com", "--password", "pw123456"))

    assert token_file.read_text() == "new-token"
    out = capsys.readouterr().out
    assert "Registration successful!" in out
    assert "Username: alice" in out


@pytest.mark.asyncio
async def test_get_prints_post(capsys):
    client = AsyncMock()
    client.get_post.return_value = _post(author_username=None)

    await cli.run_command(client, _parse("get", "--id", "1"))

    out = capsys.readouterr().out
    assert "Author: unknown (ID: 7)" in out
    assert "Created: 2024-03-01 09:30:00" in out


@pytest.mark.asyncio
async def test_list_output(capsys):
    client = AsyncMock()
    client.list_posts.return_value = PostList(posts=[_post(id=3, title="Third")], total=3, limit=1, offset=0)

    await cli.run_command(client, _parse("list", "--limit", "1"))

    client.list_posts.assert_awaited_once_with(1, 0)
    out = capsys.readouterr().out
    assert "Posts (1-1 of 3):" in out
    assert "[3] Third (by alice)" in out


@pytest.mark.asyncio
async def test_empty_list(capsys):
    client = AsyncMock()
    client.list_posts.return_value = PostList(posts=[], total=0, limit=10, offset=0)

    await cli.run_command(client, _parse("list"))

    assert "No posts found." in capsys.readouterr().out


def test_client_error_exits_with_status_one(mocker, capsys):
    mocker.patch.object(cli, "run_command", AsyncMock(side_effect=NotFoundError("Post not found", status=404)))

    assert cli.main(["get", "--id", "99"]) == 1
    assert "Post not found" in capsys.readouterr().err


def test_saved_token_is_attached(token_file, mocker):
    token_file.write_text("saved-token")
    run = mocker.patch.object(cli, "run_command", AsyncMock())

    assert cli.main(["delete", "--id", "1"]) == 0
    client = run.await_args.args[0]
    assert client.get_token() == "saved-token"
