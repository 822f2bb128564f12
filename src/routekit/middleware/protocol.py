"""Middleware protocol.

A middleware is any callable matching::

    async def my_mw(writer: ResponseWriter, request: Request, next: Handler) -> None: ...

No base class required. The chain checks the shape, not the lineage.

The middleware decides whether the exchange continues: awaiting
``next.serve(writer, request)`` runs the rest of the chain, returning
without it stops here. Code after the ``await`` runs on the way back
out, innermost first.

Write middleware as ``async def``. A plain ``def`` is accepted only when
it never continues the chain (a guard that writes a response and
returns): calling ``next.serve`` without awaiting it does not run the
rest of the chain. A middleware that returns anything other than
``None`` is rejected with ``TypeError``.
"""

from typing import Protocol, TypeAlias

from routekit.handler import Handler
from routekit.http.request import Request
from routekit.http.writer import ResponseWriter

# The next handler in the middleware chain
Next: TypeAlias = Handler


class Middleware(Protocol):
    """Protocol for routekit middleware.

    Accepts both functions and callable objects::

        # Function middleware
        async def timing(writer: ResponseWriter, request: Request, next: Next) -> None:
            start = time.monotonic()
            await next.serve(writer, request)
            log.info("%s took %.3fs", request.path, time.monotonic() - start)

        # Class middleware
        class RequireToken:
            async def __call__(self, writer: ResponseWriter, request: Request, next: Next) -> None:
                ...
    """

    async def __call__(self, writer: ResponseWriter, request: Request, next: Next) -> None: ...
