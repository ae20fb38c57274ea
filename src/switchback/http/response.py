"""HTTP response with chainable .with_*() transformation API.

Each transformation returns a new Response. Immutable by convention,
built incrementally by design.
"""

import json as json_module
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

TEXT_PLAIN = "text/plain; charset=utf-8"
APPLICATION_JSON = "application/json"


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    Construct with a body, or through ``ok()`` / ``error()`` / ``json()``,
    then chain ``.with_*()`` calls to set status and headers::

        Response.ok("created").with_status(201).with_header("Location", "/users/7")
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = TEXT_PLAIN
    headers: tuple[tuple[str, str], ...] = ()

    # -- Constructors --

    @classmethod
    def ok(cls, body: str | bytes = "") -> "Response":
        """A 200 response with a plain-text body."""
        return cls(body=body)

    @classmethod
    def error(cls, message: str, status: int) -> "Response":
        """An error response with *message* as its plain-text body."""
        if not 400 <= status < 600:
            msg = f"error status must be 4xx or 5xx, got {status}"
            raise ValueError(msg)
        return cls(body=message, status=status)

    @classmethod
    def json(cls, data: Any, status: int = 200) -> "Response":
        """A response with *data* serialized as JSON."""
        return cls(body=json_module.dumps(data), status=status, content_type=APPLICATION_JSON)

    # -- Chainable transformations --

    def with_status(self, status: int) -> "Response":
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> "Response":
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> "Response":
        """Return a new Response with additional headers."""
        return replace(self, headers=(*self.headers, *headers.items()))

    def with_content_type(self, content_type: str) -> "Response":
        """Return a new Response with a different content type."""
        return replace(self, content_type=content_type)

    # -- Body helpers --

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body
