"""Invoke helper — call sync or async handlers uniformly.

Handlers are normally ``async def``, but a plain ``def`` returning a
``Response`` is accepted too. The sync/async check lives here so the
router never has to care.

Usage::

    from switchback._internal.invoke import invoke

    response = await invoke(handler, request, state)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's awaitable."""
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
