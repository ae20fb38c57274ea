"""Ordered router with first-match-wins dispatch.

Routes are kept in registration order, which is also their priority
order. Dispatch is a linear scan: cheap method comparison first, then
pattern evaluation. Route tables are small, so there is no index.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Generic, Self, TypeVar

from switchback._internal.invoke import invoke
from switchback._internal.types import Handler
from switchback.config import RouterConfig
from switchback.errors import ConfigurationError
from switchback.http.method import Method
from switchback.http.request import Request
from switchback.http.response import Response
from switchback.routing.pattern import Pattern, compile_path
from switchback.routing.route import Route, RouteMatch

if TYPE_CHECKING:
    from switchback.server.asgi import ASGIApp

logger = logging.getLogger("switchback.routing")

State = TypeVar("State")


class Router(Generic[State]):
    """HTTP router holding one shared state object.

    Usage::

        router = (
            Router.new_with_state(AppState())
            .get(path("/hello"), get_hello)
            .post("/users/:id", update_user)
        )
        response = await router.run(request)

    Every handler is called as ``handler(request, state)`` with the very
    object passed in here. The router never copies or mutates it; any
    mutable fields must bring their own synchronization.

    Register every route before serving. ``run`` is safe to call
    concurrently; ``add`` is not.
    """

    __slots__ = ("_config", "_frozen", "_routes", "_state")

    def __init__(self, state: State, *, config: RouterConfig | None = None) -> None:
        self._state = state
        self._config = config or RouterConfig()
        self._routes: list[Route] = []
        self._frozen = False

    @classmethod
    def new_with_state(cls, state: State, *, config: RouterConfig | None = None) -> Router[State]:
        """Create a router whose handlers all receive *state*."""
        return cls(state, config=config)

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"Router(routes={len(self._routes)}, frozen={self._frozen})"

    @property
    def state(self) -> State:
        return self._state

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def routes(self) -> tuple[Route, ...]:
        """Registered routes in priority (registration) order."""
        return tuple(self._routes)

    @property
    def frozen(self) -> bool:
        return self._frozen

    # -- Registration --

    def add(self, method: Method | str, pattern: Pattern | str, handler: Handler) -> Self:
        """Append a route and return the router for chaining.

        *pattern* may be a compiled ``Pattern`` or a template string,
        which is compiled on the spot so a ``PatternError`` surfaces here.
        Shadowed and duplicate routes are accepted; the earliest one wins.
        """
        if self._frozen:
            msg = "Cannot add routes after the router is frozen."
            raise RuntimeError(msg)

        resolved = Method.parse(method)
        if resolved is None:
            allowed = ", ".join(Method)
            msg = f"Unknown HTTP method {method!r}. Expected one of: {allowed}."
            raise ConfigurationError(msg)

        if isinstance(pattern, str):
            pattern = compile_path(pattern)
        elif not isinstance(pattern, Pattern):
            msg = f"Route pattern must be a Pattern or a template string, got {type(pattern).__name__}."
            raise ConfigurationError(msg)

        if not callable(handler):
            msg = f"Handler for {resolved} {pattern.template} is not callable: {handler!r}"
            raise ConfigurationError(msg)

        route = Route(method=resolved, pattern=pattern, handler=handler)
        self._routes.append(route)
        logger.debug("Registered route #%d: %s", len(self._routes), route)
        return self

    def head(self, pattern: Pattern | str, handler: Handler) -> Self:
        """Register *handler* for HEAD requests matching *pattern*."""
        return self.add(Method.HEAD, pattern, handler)

    def get(self, pattern: Pattern | str, handler: Handler) -> Self:
        """Register *handler* for GET requests matching *pattern*."""
        return self.add(Method.GET, pattern, handler)

    def post(self, pattern: Pattern | str, handler: Handler) -> Self:
        """Register *handler* for POST requests matching *pattern*."""
        return self.add(Method.POST, pattern, handler)

    def put(self, pattern: Pattern | str, handler: Handler) -> Self:
        """Register *handler* for PUT requests matching *pattern*."""
        return self.add(Method.PUT, pattern, handler)

    def patch(self, pattern: Pattern | str, handler: Handler) -> Self:
        """Register *handler* for PATCH requests matching *pattern*."""
        return self.add(Method.PATCH, pattern, handler)

    def delete(self, pattern: Pattern | str, handler: Handler) -> Self:
        """Register *handler* for DELETE requests matching *pattern*."""
        return self.add(Method.DELETE, pattern, handler)

    def options(self, pattern: Pattern | str, handler: Handler) -> Self:
        """Register *handler* for OPTIONS requests matching *pattern*."""
        return self.add(Method.OPTIONS, pattern, handler)

    def connect(self, pattern: Pattern | str, handler: Handler) -> Self:
        """Register *handler* for CONNECT requests matching *pattern*."""
        return self.add(Method.CONNECT, pattern, handler)

    def trace(self, pattern: Pattern | str, handler: Handler) -> Self:
        """Register *handler* for TRACE requests matching *pattern*."""
        return self.add(Method.TRACE, pattern, handler)

    def route(
        self,
        pattern: Pattern | str,
        methods: Iterable[Method | str] = (Method.GET,),
    ) -> Callable[[Handler], Handler]:
        """Decorator form of ``add``, one route per method in order::

            @router.route("/users/:id", methods=["GET", "HEAD"])
            async def show_user(request, state):
                ...
        """
        if isinstance(pattern, str):
            pattern = compile_path(pattern)

        def decorator(handler: Handler) -> Handler:
            for method in methods:
                self.add(method, pattern, handler)
            return handler

        return decorator

    def freeze(self) -> Self:
        """Reject further registration. Call once setup is complete."""
        self._frozen = True
        return self

    # -- Dispatch --

    def match(self, method: str, path: str) -> RouteMatch | None:
        """Return the first route matching *method* and *path*, or None."""
        for route in self._routes:
            if route.method != method:
                continue
            params = route.pattern.match(path)
            if params is not None:
                return RouteMatch(route=route, path_params=params)
        return None

    async def run(self, request: Request) -> Response:
        """Dispatch *request* to the first matching route.

        Raises ``URLParseError`` if the request URL cannot be parsed.
        Whatever the matched handler raises propagates unchanged; no
        later route is tried. Returns the configured not-found response
        (404, ``page not found``) when nothing matches.
        """
        url = request.url()
        found = self.match(request.method, url.path)
        if found is None:
            return Response.error(self._config.not_found_body, self._config.not_found_status)
        return await invoke(found.route.handler, request.with_path_params(found.path_params), self._state)

    def asgi(self) -> ASGIApp:
        """Wrap this router in an ASGI application."""
        from switchback.server.asgi import ASGIApp

        return ASGIApp(self)
