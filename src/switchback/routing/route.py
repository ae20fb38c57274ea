"""Route and RouteMatch frozen dataclasses."""

from dataclasses import dataclass

from switchback._internal.types import Handler
from switchback.http.method import Method
from switchback.routing.pattern import Pattern


@dataclass(frozen=True, slots=True)
class Route:
    """One registered (method, pattern, handler) entry.

    Created by ``Router.add()``; never changed afterwards.
    """

    method: Method
    pattern: Pattern
    handler: Handler

    def __str__(self) -> str:
        return f"{self.method} {self.pattern.template}"


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    path_params: dict[str, str]
