"""Hello World — the smallest switchback service.

Demonstrates chained registration, path parameters, shared state with
its own lock, and the built-in 404.

Run under any ASGI server:
    uvicorn app:app
"""

import asyncio
from dataclasses import dataclass, field

from switchback import Request, Response, Router, path


@dataclass
class ServerState:
    greeting: str = "hello"
    visits: int = 0
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)


async def get_hello(request: Request, state: ServerState) -> Response:
    return Response.ok(state.greeting)


async def get_user(request: Request, state: ServerState) -> Response:
    return Response.json({"id": request.path_params["id"]})


async def count_visit(request: Request, state: ServerState) -> Response:
    async with state.lock:
        state.visits += 1
        return Response.json({"visits": state.visits})


router = (
    Router.new_with_state(ServerState())
    .get(path("/hello"), get_hello)
    .get(path("/users/:id"), get_user)
    .post(path("/visits"), count_visit)
)

app = router.asgi()
