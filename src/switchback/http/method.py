"""HTTP request methods."""

from enum import StrEnum


class Method(StrEnum):
    """The standard HTTP verbs a route can be registered for.

    Members compare equal to their upper-case string value, so a route
    method can be checked directly against ``request.method``.
    """

    HEAD = "HEAD"
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    CONNECT = "CONNECT"
    TRACE = "TRACE"

    @classmethod
    def parse(cls, value: "str | Method") -> "Method | None":
        """Return the member for *value* (case-insensitive), or None."""
        if isinstance(value, Method):
            return value
        try:
            return cls(value.upper())
        except ValueError:
            return None
