"""Switchback — a small asynchronous HTTP router.

Routes are matched in registration order; the first route whose method
and path pattern both match handles the request. Every handler receives
the request and one shared application state object.

Basic usage::

    from switchback import Response, Router, path

    async def get_hello(request, state):
        return Response.ok("hello")

    router = Router.new_with_state(AppState()).get(path("/hello"), get_hello)
    response = await router.run(request)

Serving under any ASGI server::

    app = router.asgi()
"""

__version__ = "0.1.0"
__all__ = [
    "ASGIApp",
    "ConfigurationError",
    "Method",
    "Pattern",
    "PatternError",
    "Request",
    "Response",
    "Route",
    "Router",
    "RouterConfig",
    "SwitchbackError",
    "URLParseError",
    "compile_path",
    "path",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import switchback`` fast while providing a flat top-level API.
    """
    if name in ("Router", "Route", "Pattern", "compile_path", "path"):
        import switchback.routing as routing

        return getattr(routing, name)

    if name in ("Request", "Response", "Method"):
        import switchback.http as http

        return getattr(http, name)

    if name == "RouterConfig":
        from switchback.config import RouterConfig

        return RouterConfig

    if name == "ASGIApp":
        from switchback.server.asgi import ASGIApp

        return ASGIApp

    if name in ("SwitchbackError", "ConfigurationError", "PatternError", "URLParseError"):
        import switchback.errors as errors

        return getattr(errors, name)

    msg = f"module 'switchback' has no attribute {name!r}"
    raise AttributeError(msg)
