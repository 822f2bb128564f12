"""Invoke helper — call sync or async handler functions uniformly.

Route handlers can be ``def`` or ``async def``. ``HandlerFunc`` and the
middleware chain both call user code through this helper so the
sync/async check lives in exactly one place.

Usage::

    from routekit._internal.invoke import invoke

    await invoke(func, writer, request)
"""

import inspect
from typing import Any


async def invoke(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *func* and await the result if it's awaitable.

    Works with both sync and async callables::

        def hello(w: ResponseWriter, r: Request) -> None:
            w.write("Hello")

        async def echo(w: ResponseWriter, r: Request) -> None:
            w.write(r.body)
    """
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
