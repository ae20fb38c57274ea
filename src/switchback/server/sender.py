"""ASGI response sending — translates a Response into ASGI messages."""

from switchback._internal.asgi import Send
from switchback.http.headers import Headers
from switchback.http.response import Response


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC 9110: 1xx, 204, and 304 responses carry no message body.
    return not (100 <= status < 200 or status in {204, 304})


async def send_response(response: Response, send: Send, *, include_body: bool = True) -> None:
    """Emit *response* as ``http.response.start`` + ``http.response.body``.

    With ``include_body=False`` (HEAD requests) the Content-Length still
    describes the body that a GET would have produced.
    """
    raw_headers: list[tuple[bytes, bytes]] = [
        (b"content-type", response.content_type.encode("latin-1")),
    ]
    raw_headers.extend(Headers(response.headers).raw())

    body = response.body_bytes if _body_allowed(response.status) else b""
    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body if include_body else b"",
        }
    )
