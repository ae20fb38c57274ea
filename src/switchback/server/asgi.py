"""ASGI application wrapping a Router.

The only component that touches raw ASGI directly. Converts HTTP scopes
to ``Request`` objects, awaits ``Router.run``, and sends the resulting
``Response`` back through ``send``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from switchback._internal.asgi import Receive, Scope, Send
from switchback.http.method import Method
from switchback.http.request import Request
from switchback.server.errors import handle_dispatch_error
from switchback.server.sender import send_response

if TYPE_CHECKING:
    from switchback.routing.router import Router

logger = logging.getLogger("switchback.server")


class ASGIApp:
    """ASGI 3 callable serving one router.

    Usage::

        app = Router.new_with_state(state).get("/hello", hello).asgi()
        # uvicorn module:app, hypercorn module:app, ...
    """

    __slots__ = ("router",)

    def __init__(self, router: Router[Any]) -> None:
        self.router = router

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await self._lifespan(receive, send)
            return
        if scope["type"] != "http":
            return

        request = Request.from_asgi(scope, receive)
        try:
            response = await self.router.run(request)
        except Exception as exc:
            response = handle_dispatch_error(exc, request, debug=self.router.config.debug)

        await send_response(response, send, include_body=request.method != Method.HEAD)

    async def _lifespan(self, receive: Receive, send: Send) -> None:
        """Acknowledge startup and shutdown; the router needs neither."""
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                self.router.freeze()
                logger.info("Serving %d route(s)", len(self.router))
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
