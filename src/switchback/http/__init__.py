"""HTTP primitives: Request, Response, Headers, QueryParams, Method."""

from switchback.http.headers import Headers
from switchback.http.method import Method
from switchback.http.query import QueryParams
from switchback.http.request import Request
from switchback.http.response import Response

__all__ = ["Headers", "Method", "QueryParams", "Request", "Response"]
