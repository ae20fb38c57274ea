"""Failure translation at the hosting boundary.

The router propagates every failure; this is where they become
responses. URL problems are the client's fault (400), anything else
is logged and answered with a 500.
"""

import logging

from switchback.errors import URLParseError
from switchback.http.request import Request
from switchback.http.response import Response

logger = logging.getLogger("switchback.server")


def handle_dispatch_error(exc: Exception, request: Request, *, debug: bool = False) -> Response:
    """Map an exception raised by ``Router.run`` to a response."""
    if isinstance(exc, URLParseError):
        logger.info("Rejected %s request with unparseable URL: %s", request.method, exc)
        body = f"bad request: {exc}" if debug else "bad request"
        return Response.error(body, 400)

    logger.exception("Unhandled error while serving %s %s", request.method, request.path)
    body = "internal server error"
    if debug:
        body = f"{body}: {type(exc).__name__}: {exc}"
    return Response.error(body, 500)
