"""Immutable HTTP request.

Frozen metadata with async body access. The router reads only
``method`` and ``url()``; everything else is for handlers.
"""

from __future__ import annotations

import json as json_module
import re
from collections.abc import AsyncGenerator
from dataclasses import dataclass, field, replace
from typing import Any
from urllib.parse import SplitResult, quote, urlsplit

from switchback._internal.asgi import Receive, Scope
from switchback.errors import URLParseError
from switchback.http.headers import Headers
from switchback.http.query import QueryParams

# Characters a request target may never contain once on the wire
_INVALID_TARGET = re.compile(r"[\x00-\x20\x7f]")

# Host values that would bleed into the path, query, or userinfo
_INVALID_HOST = re.compile(r"[\x00-\x20\x7f/?#@\\]")

# Characters left untouched when re-encoding a decoded path
_PATH_SAFE = "/!$&'()*+,;=:@-._~%"


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``path`` is the percent-decoded path, ``raw_path`` the path exactly
    as received. ``path_params`` holds the bindings captured by the
    matched route; the router fills it in before calling the handler.
    """

    method: str
    path: str
    raw_path: str = ""
    headers: Headers = field(default_factory=Headers)
    query: QueryParams = field(default_factory=QueryParams)
    path_params: dict[str, str] = field(default_factory=dict)
    http_version: str = "1.1"
    scheme: str = "http"
    server: tuple[str, int] | None = None
    client: tuple[str, int] | None = None

    # Private: ASGI receive callable for body streaming
    _receive: Receive | None = field(default=None, repr=False, compare=False)

    # Private: body cache, shared by copies made with with_path_params()
    _cache: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def target(self) -> str:
        """The request target: encoded path plus query string."""
        path = self.raw_path or quote(self.path, safe=_PATH_SAFE)
        if self.query.raw:
            return f"{path}?{self.query.raw}"
        return path

    @property
    def host(self) -> str:
        """Host from the ``Host`` header, falling back to the server address."""
        value = self.headers.get("host")
        if value:
            return value
        if self.server is not None:
            host, port = self.server
            return f"{host}:{port}"
        return "localhost"

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get("content-type")

    def url(self) -> SplitResult:
        """Parse the full request URL.

        Raises ``URLParseError`` if the target is not an absolute path,
        contains whitespace or control characters, or the host is not a
        bare ``host[:port]``. The path is taken from the target only.
        """
        target = self.target
        if not target.startswith("/"):
            raise URLParseError(target, "path must start with '/'")
        if _INVALID_TARGET.search(target):
            raise URLParseError(target, "contains whitespace or control characters")
        host = self.host
        if _INVALID_HOST.search(host):
            raise URLParseError(target, f"invalid Host {host!r}")
        try:
            urlsplit(f"//{host}")
        except ValueError as exc:
            raise URLParseError(target, f"invalid Host {host!r}: {exc}") from exc
        # Path and query come from the target alone, never from the Host
        path, _, query = target.partition("?")
        return SplitResult(self.scheme, host, path, query, "")

    def with_path_params(self, params: dict[str, str]) -> Request:
        """Return a copy of this request carrying *params*."""
        return replace(self, path_params=dict(params))

    # -- Async body access --

    async def body(self) -> bytes:
        """Read the full request body.

        The receive channel is consumed once; later calls return the
        cached bytes.
        """
        if "body" not in self._cache:
            self._cache["body"] = b"".join([chunk async for chunk in self.stream()])
        return self._cache["body"]

    async def stream(self) -> AsyncGenerator[bytes, None]:
        """Stream the request body in chunks."""
        if self._receive is None:
            return
        while True:
            message = await self._receive()
            if message["type"] == "http.disconnect":
                break
            chunk = message.get("body", b"")
            if chunk:
                yield chunk
            if not message.get("more_body", False):
                break

    async def text(self) -> str:
        """Read the body as UTF-8 text."""
        return (await self.body()).decode("utf-8")

    async def json(self) -> Any:
        """Parse the body as JSON."""
        return json_module.loads(await self.body())

    # -- Factory --

    @classmethod
    def from_asgi(cls, scope: Scope, receive: Receive | None = None) -> Request:
        """Create a Request from an ASGI HTTP scope and receive callable."""
        server = scope.get("server")
        client = scope.get("client")
        raw_path = scope.get("raw_path") or b""
        return cls(
            method=scope["method"].upper(),
            path=scope["path"],
            raw_path=raw_path.decode("latin-1"),
            headers=Headers(scope.get("headers", ())),
            query=QueryParams(scope.get("query_string", b"")),
            http_version=scope.get("http_version", "1.1"),
            scheme=scope.get("scheme", "http"),
            server=tuple(server) if server else None,
            client=tuple(client) if client else None,
            _receive=receive,
        )
