"""Test client for switchback routers.

Drives the real ASGI adapter in-process and hands back the same
``Response`` type handlers produce. No HTTP involved.
"""

import json as json_module
from collections.abc import Awaitable
from typing import Any
from urllib.parse import unquote

import anyio

from switchback.http.response import Response
from switchback.routing.router import Router
from switchback.server.asgi import ASGIApp


class TestClient:
    """Async test client for a ``Router`` (or an ``ASGIApp``).

    Usage::

        async with TestClient(router) as client:
            response = await client.get("/hello")
            assert response.status == 200
    """

    __test__ = False  # Tell pytest this is not a test class

    __slots__ = ("app",)

    def __init__(self, app: Router[Any] | ASGIApp) -> None:
        self.app = app.asgi() if isinstance(app, Router) else app

    async def __aenter__(self) -> "TestClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        pass

    async def get(self, path: str, *, headers: dict[str, str] | None = None) -> Response:
        """Send a GET request."""
        return await self.request("GET", path, headers=headers)

    async def head(self, path: str, *, headers: dict[str, str] | None = None) -> Response:
        """Send a HEAD request."""
        return await self.request("HEAD", path, headers=headers)

    async def options(self, path: str, *, headers: dict[str, str] | None = None) -> Response:
        """Send an OPTIONS request."""
        return await self.request("OPTIONS", path, headers=headers)

    async def delete(self, path: str, *, headers: dict[str, str] | None = None) -> Response:
        """Send a DELETE request."""
        return await self.request("DELETE", path, headers=headers)

    async def post(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        json: Any = None,
    ) -> Response:
        """Send a POST request, optionally with a JSON body."""
        return await self._with_body("POST", path, headers, body, json)

    async def put(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        json: Any = None,
    ) -> Response:
        """Send a PUT request, optionally with a JSON body."""
        return await self._with_body("PUT", path, headers, body, json)

    async def patch(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        json: Any = None,
    ) -> Response:
        """Send a PATCH request, optionally with a JSON body."""
        return await self._with_body("PATCH", path, headers, body, json)

    async def _with_body(
        self,
        method: str,
        path: str,
        headers: dict[str, str] | None,
        body: bytes | None,
        json: Any,
    ) -> Response:
        merged = dict(headers or {})
        if json is not None:
            body = json_module.dumps(json).encode("utf-8")
            merged.setdefault("content-type", "application/json")
        return await self.request(method, path, headers=merged, body=body)

    async def gather(self, *calls: Awaitable[Response]) -> list[Response]:
        """Run request coroutines concurrently; responses keep call order."""
        results: list[Response | None] = [None] * len(calls)

        async def run_one(index: int, call: Awaitable[Response]) -> None:
            results[index] = await call

        async with anyio.create_task_group() as tg:
            for index, call in enumerate(calls):
                tg.start_soon(run_one, index, call)

        assert all(result is not None for result in results), "a request produced no response"
        return results  # type: ignore[return-value]

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
    ) -> Response:
        """Send an arbitrary request through the ASGI app."""
        path_part, _, query_string = path.partition("?")

        raw_headers = [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in (headers or {}).items()
        ]

        scope: dict[str, Any] = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": method.upper(),
            "scheme": "http",
            "path": unquote(path_part),
            "raw_path": path_part.encode("latin-1"),
            "query_string": query_string.encode("latin-1"),
            "root_path": "",
            "headers": raw_headers,
            "server": ("testserver", 80),
            "client": ("127.0.0.1", 0),
        }

        request_body = body or b""
        body_sent = False

        async def receive() -> dict[str, Any]:
            nonlocal body_sent
            if not body_sent:
                body_sent = True
                return {"type": "http.request", "body": request_body, "more_body": False}
            return {"type": "http.disconnect"}

        status = 200
        response_headers: list[tuple[bytes, bytes]] = []
        body_parts: list[bytes] = []

        async def send(message: dict[str, Any]) -> None:
            nonlocal status, response_headers
            if message["type"] == "http.response.start":
                status = message["status"]
                response_headers = list(message.get("headers", []))
            elif message["type"] == "http.response.body":
                body_parts.append(message.get("body", b""))

        await self.app(scope, receive, send)

        content_type = "text/plain; charset=utf-8"
        extra_headers: list[tuple[str, str]] = []
        for name_b, value_b in response_headers:
            name = name_b.decode("latin-1")
            value = value_b.decode("latin-1")
            if name == "content-type":
                content_type = value
            else:
                extra_headers.append((name, value))

        return Response(
            body=b"".join(body_parts),
            status=status,
            content_type=content_type,
            headers=tuple(extra_headers),
        )
