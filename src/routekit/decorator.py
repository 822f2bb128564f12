"""Handler decorators and the chain builder.

A decorator takes a ``Handler`` and returns a ``Handler`` that wraps it.
Wrapping is pure; side effects belong in the returned handler's
``serve``.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from routekit.handler import Handler
from routekit.middleware.chain import apply
from routekit.middleware.protocol import Middleware


class Decorator(Protocol):
    """Protocol for handler decorators.

    Plain functions work::

        def traced(handler: Handler) -> Handler:
            return apply(handler, trace_mw)
    """

    def __call__(self, handler: Handler) -> Handler: ...


@dataclass(frozen=True, slots=True)
class MiddlewareDecorator:
    """Decorator wrapping each handler in a fixed middleware chain."""

    middleware: tuple[Middleware, ...]

    def __call__(self, handler: Handler) -> Handler:
        return apply(handler, *self.middleware)


def decorate(terminal: Handler, decorators: Sequence[Decorator]) -> Handler:
    """Wrap *terminal* so the first decorator ends up outermost.

    For ``[a, b, c]`` the composed handler runs ``a -> b -> c -> terminal``
    on the way in and ``terminal -> c -> b -> a`` on the way out.
    """
    current = terminal
    for decorator in reversed(decorators):
        current = decorator(current)
    return current
