"""Routing: path pattern compilation and ordered first-match dispatch.

Routes are registered during setup and scanned in registration order
for every request.
"""

from switchback.routing.pattern import Pattern, compile_path, path
from switchback.routing.route import Route, RouteMatch
from switchback.routing.router import Router

__all__ = ["Pattern", "Route", "RouteMatch", "Router", "compile_path", "path"]
