"""Command-line client for the blog API.

Talks to either frontend through :class:`inkwell.client.BlogClient`. The
token from ``register``/``login`` is stored in ``~/.blog_token`` (or
``$INKWELL_TOKEN_FILE``) and sent with later commands.
"""

import argparse
import asyncio
import os
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from inkwell.client import BlogClient, ClientError, PostInfo, Transport

DEFAULT_HTTP_SERVER = "http://localhost:3000"
DEFAULT_GRPC_SERVER = "http://localhost:50051"
TOKEN_FILE = ".blog_token"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

console = Console()
err_console = Console(stderr=True)


def token_path() -> Path:
    override = os.environ.get("INKWELL_TOKEN_FILE")
    if override:
        return Path(override)
    return Path.home() / TOKEN_FILE


def load_token() -> Optional[str]:
    path = token_path()
    if not path.exists():
        return None
    token = path.read_text().strip()
    return token or None


def save_token(token: str) -> Path:
    """Write the token to a file only the current user can read."""
    path = token_path()
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w") as fh:
        # An existing file keeps its old mode through os.open.
        os.chmod(path, 0o600)
        fh.write(token)
    return path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="inkwell-cli", description="CLI client for the blog API")
    parser.add_argument("--grpc", action="store_true", help="Use gRPC transport instead of HTTP")
    parser.add_argument(
        "--server",
        help=f"Server address (default: {DEFAULT_HTTP_SERVER} for HTTP, "
        f"{DEFAULT_GRPC_SERVER} for gRPC)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    register = sub.add_parser("register", help="Register a new user")
    register.add_argument("--username", required=True)
    register.add_argument("--email", required=True)
    register.add_argument("--password", required=True)

    login = sub.add_parser("login", help="Login with existing credentials")
    login.add_argument("--email", required=True)
    login.add_argument("--password", required=True)

    create = sub.add_parser("create", help="Create a new post")
    create.add_argument("--title", required=True)
    create.add_argument("--content", required=True)

    get = sub.add_parser("get", help="Get a post by ID")
    get.add_argument("--id", type=int, required=True)

    update = sub.add_parser("update", help="Update a post")
    update.add_argument("--id", type=int, required=True)
    update.add_argument("--title", required=True)
    update.add_argument("--content", required=True)

    delete = sub.add_parser("delete", help="Delete a post")
    delete.add_argument("--id", type=int, required=True)

    listing = sub.add_parser("list", help="List posts with pagination")
    listing.add_argument("--limit", type=int, default=10)
    listing.add_argument("--offset", type=int, default=0)

    sub.add_parser("logout", help="Forget the saved token")
    return parser


def print_post(post: PostInfo) -> None:
    console.print(f"[bold]ID:[/bold] {post.id}")
    console.print(f"[bold]Title:[/bold] {escape(post.title)}")
    console.print(f"[bold]Content:[/bold] {escape(post.content)}")
    console.print(f"[bold]Author:[/bold] {escape(post.author_username or 'unknown')} (ID: {post.author_id})")
    console.print(f"[bold]Created:[/bold] {post.created_at.strftime(TIMESTAMP_FORMAT)}")
    console.print(f"[bold]Updated:[/bold] {post.updated_at.strftime(TIMESTAMP_FORMAT)}")


async def run_command(client: BlogClient, args: argparse.Namespace) -> None:
    if args.command == "register":
        result = await client.register(args.username, args.email, args.password)
        path = save_token(result.token)
        console.print("[green]Registration successful![/green]")
        console.print(f"User ID: {result.user.id}")
        console.print(f"Username: {result.user.username}")
        console.print(f"Email: {result.user.email}")
        console.print(f"[dim]Token saved to {path}[/dim]")

    elif args.command == "login":
        result = await client.login(args.email, args.password)
        path = save_token(result.token)
        console.print("[green]Login successful![/green]")
        console.print(f"User ID: {result.user.id}")
        console.print(f"Username: {result.user.username}")
        console.print(f"[dim]Token saved to {path}[/dim]")

    elif args.command == "create":
        post = await client.create_post(args.title, args.content)
        console.print("[green]Post created successfully![/green]")
        print_post(post)

    elif args.command == "get":
        print_post(await client.get_post(args.id))

    elif args.command == "update":
        post = await client.update_post(args.id, args.title, args.content)
        console.print("[green]Post updated successfully![/green]")
        print_post(post)

    elif args.command == "delete":
        await client.delete_post(args.id)
        console.print(f"[green]Post {args.id} deleted successfully![/green]")

    elif args.command == "list":
        posts = await client.list_posts(args.limit, args.offset)
        end = min(posts.offset + len(posts.posts), posts.total)
        console.print(f"[bold]Posts ({posts.offset + 1}-{end} of {posts.total}):[/bold]")
        console.print("-" * 60)
        for post in posts.posts:
            console.print(f"[{post.id}] {post.title} (by {post.author_username or 'unknown'})", markup=False)
        if not posts.posts:
            console.print("No posts found.")


async def _run(args: argparse.Namespace) -> None:
    server = args.server or (DEFAULT_GRPC_SERVER if args.grpc else DEFAULT_HTTP_SERVER)
    transport = Transport.grpc(server) if args.grpc else Transport.http(server)
    async with BlogClient(transport) as client:
        token = load_token()
        if token:
            client.set_token(token)
        await run_command(client, args)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "logout":
        path = token_path()
        if path.exists():
            path.unlink()
        console.print("Logged out.")
        return 0

    try:
        asyncio.run(_run(args))
    except ClientError as e:
        err_console.print(f"[red]Error:[/red] {escape(e.message)}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
