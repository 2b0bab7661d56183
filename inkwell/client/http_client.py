"""Blog client over the REST API, built on ``httpx.AsyncClient``."""

import logging
from typing import Any, Dict, Optional

import httpx

from inkwell.client.errors import NoTokenError, TransportError, error_for_http_status
from inkwell.client.models import AuthInfo, PostInfo, PostList

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"
DEFAULT_TIMEOUT = 10.0


class HttpBlogClient:
    """REST transport for :class:`inkwell.client.BlogClient`.

    Args:
        base_url: Server root, e.g. ``http://localhost:3000``.
        transport: Optional httpx transport; tests pass an ``ASGITransport``
            to talk to the application in-process.
        timeout: Per-request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self.token: Optional[str] = None
        self._client = httpx.AsyncClient(
            base_url=self.base_url + API_PREFIX,
            transport=transport,
            timeout=timeout,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        auth: bool = False,
    ) -> Any:
        headers = {}
        if auth:
            if not self.token:
                raise NoTokenError()
            headers["Authorization"] = f"Bearer {self.token}"

        try:
            response = await self._client.request(
                method, path, json=json, params=params, headers=headers
            )
        except httpx.HTTPError as exc:
            logger.warning("HTTP request to %s%s failed: %s", self.base_url, path, exc)
            raise TransportError(f"Request failed: {exc}") from exc

        if response.is_error:
            raise error_for_http_status(response.status_code, _error_detail(response))
        if response.status_code == httpx.codes.NO_CONTENT or not response.content:
            return None
        return response.json()

    async def register(self, username: str, email: str, password: str) -> AuthInfo:
        data = await self._request(
            "POST",
            "/auth/register",
            json={"username": username, "email": email, "password": password},
        )
        return AuthInfo.model_validate(data)

    async def login(self, email: str, password: str) -> AuthInfo:
        data = await self._request(
            "POST", "/auth/login", json={"email": email, "password": password}
        )
        return AuthInfo.model_validate(data)

    async def create_post(self, title: str, content: str) -> PostInfo:
        data = await self._request(
            "POST", "/posts", json={"title": title, "content": content}, auth=True
        )
        return PostInfo.model_validate(data)

    async def get_post(self, post_id: int) -> PostInfo:
        return PostInfo.model_validate(await self._request("GET", f"/posts/{post_id}"))

    async def update_post(self, post_id: int, title: str, content: str) -> PostInfo:
        data = await self._request(
            "PUT", f"/posts/{post_id}", json={"title": title, "content": content}, auth=True
        )
        return PostInfo.model_validate(data)

    async def delete_post(self, post_id: int) -> None:
        await self._request("DELETE", f"/posts/{post_id}", auth=True)

    async def list_posts(self, limit: int = 10, offset: int = 0) -> PostList:
        data = await self._request("GET", "/posts", params={"limit": limit, "offset": offset})
        return PostList.model_validate(data)


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict):
        detail = body.get("detail") or body.get("error")
        if detail:
            return str(detail)
    return response.reason_phrase
