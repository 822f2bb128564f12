"""Handler protocol and handler-value mapping.

A ``Handler`` is anything with an async ``serve(writer, request)``
method. Controllers may declare route handlers more loosely, so every
route's handler value goes through a ``Mapper`` before registration.

The default mapper, ``map_handler``, accepts:

- objects already implementing ``Handler`` (returned unchanged)
- functions and bound methods whose signature is exactly
  ``(ResponseWriter, Request)``, sync or async (wrapped in ``HandlerFunc``)

Anything else raises ``HandlerMappingError``.
"""

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from routekit._internal.invoke import invoke
from routekit.errors import HandlerMappingError
from routekit.http.request import Request
from routekit.http.writer import ResponseWriter

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


@runtime_checkable
class Handler(Protocol):
    """Protocol for a canonical request handler.

    Class handlers just implement ``serve``::

        class Hello:
            async def serve(self, writer: ResponseWriter, request: Request) -> None:
                writer.write("Hello")
    """

    async def serve(self, writer: ResponseWriter, request: Request) -> None: ...


class Mapper(Protocol):
    """Strategy turning a route's handler value into a ``Handler``.

    Raises ``HandlerMappingError`` (or any error of its choosing) when
    the value cannot be mapped.
    """

    def __call__(self, value: Any) -> Handler: ...


@dataclass(frozen=True, slots=True)
class HandlerFunc:
    """Adapts a plain ``(writer, request)`` function to ``Handler``.

    Also the explicit way to declare a function handler without relying
    on annotations::

        route("GET", "/hello", HandlerFunc(lambda w, r: w.write("Hello")))
    """

    func: Callable[..., Any]

    async def serve(self, writer: ResponseWriter, request: Request) -> None:
        await invoke(self.func, writer, request)


def is_handler_func(value: Any) -> bool:
    """True if *value* is a function taking exactly ``(ResponseWriter, Request)``.

    Parameter types are compared by identity after resolving annotations,
    so parameter names don't matter and string annotations are fine.
    """
    if not (inspect.isfunction(value) or inspect.ismethod(value)):
        return False

    try:
        sig = inspect.signature(value, eval_str=True)
    except (NameError, TypeError, ValueError):
        # Unresolvable string annotation or an uninspectable callable
        return False

    params = list(sig.parameters.values())
    if len(params) != 2 or any(p.kind not in _POSITIONAL for p in params):
        return False

    writer_param, request_param = params
    return writer_param.annotation is ResponseWriter and request_param.annotation is Request


def map_handler(value: Any) -> Handler:
    """Default ``Mapper``: first try ``Handler``, then the function signature.

    A handler class is not a handler; only its instances are.
    """
    if not isinstance(value, type) and isinstance(value, Handler):
        return value
    if is_handler_func(value):
        return HandlerFunc(value)
    raise HandlerMappingError(value)
