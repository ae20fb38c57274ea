"""Switchback exception hierarchy.

Shared across the pattern compiler, Router, request model, and ASGI
adapter so every module raises and catches the same types.
"""


class SwitchbackError(Exception):
    """Base for all switchback-specific errors."""


class ConfigurationError(SwitchbackError):
    """Raised when route registration input is invalid.

    Always raised while the router is being built, never while serving.
    """


class PatternError(ConfigurationError):
    """A path template could not be compiled.

    Carries the offending ``template`` and a short ``reason`` so the
    message points at the exact registration that failed.
    """

    def __init__(self, template: str, reason: str) -> None:
        self.template = template
        self.reason = reason
        super().__init__(f"failed to parse route pattern {template!r}: {reason}")


class URLParseError(SwitchbackError):
    """The request URL could not be parsed.

    Raised during dispatch before any route is tried. It is never
    converted into a 404.
    """

    def __init__(self, url: str, reason: str = "") -> None:
        self.url = url
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"invalid request URL {url!r}{detail}")
