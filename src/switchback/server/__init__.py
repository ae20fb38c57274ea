"""ASGI hosting boundary: turns scopes into Requests and Responses into messages."""

from switchback.server.asgi import ASGIApp

__all__ = ["ASGIApp"]
