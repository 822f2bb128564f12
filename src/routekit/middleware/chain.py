"""Middleware chain — fold a middleware list around a handler.

Each layer is a ``MiddlewareChain``: a ``Handler`` that forwards
``serve`` to its middleware together with the next handler. Since a
layer is itself a ``Handler``, it can be the ``next`` of the layer
outside it.
"""

from dataclasses import dataclass

from routekit._internal.invoke import invoke
from routekit.handler import Handler
from routekit.http.request import Request
from routekit.http.writer import ResponseWriter
from routekit.middleware.protocol import Middleware


@dataclass(frozen=True, slots=True)
class MiddlewareChain:
    """One layer of a middleware chain."""

    next: Handler
    middleware: Middleware

    async def serve(self, writer: ResponseWriter, request: Request) -> None:
        result = await invoke(self.middleware, writer, request, self.next)
        if result is not None:
            name = getattr(self.middleware, "__qualname__", type(self.middleware).__qualname__)
            msg = (
                f"Middleware {name} returned {type(result).__qualname__}; "
                "middleware must be async def (or return None) and await next.serve()."
            )
            raise TypeError(msg)


def apply(handler: Handler, *middleware: Middleware) -> Handler:
    """Return *handler* wrapped in *middleware*.

    The first middleware is the outermost layer, so it runs first on
    every exchange::

        chain = apply(handler, logging_mw, recover_mw)
        # logging_mw -> recover_mw -> handler
    """
    current = handler
    for mw in reversed(middleware):
        current = MiddlewareChain(next=current, middleware=mw)
    return current
