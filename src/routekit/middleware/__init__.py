"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(writer: ResponseWriter, request: Request, next: Next) -> None

routekit ships no middleware of its own, only the composition:
    apply -- wrap a handler in an ordered middleware chain
"""

from routekit.middleware.chain import MiddlewareChain, apply
from routekit.middleware.protocol import Middleware, Next

__all__ = [
    "Middleware",
    "MiddlewareChain",
    "Next",
    "apply",
]
