"""Shared type aliases used across switchback modules."""

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from switchback.http.request import Request
    from switchback.http.response import Response

# Route handler: (request, shared state) -> response, usually a coroutine
Handler: TypeAlias = Callable[["Request", Any], "Awaitable[Response] | Response"]
