"""Handler registrars — bind a mapped handler onto a router object.

routekit never knows the router's concrete type. A registrar is the
adapter that does: it receives the router as given to
``register_controller`` and binds one ``(route, handler)`` pair to it.

Two registrars ship:

- ``bind_registrar`` (default) for mux-like routers exposing
  ``bind(pattern, handler)``; binds ``"<METHOD> <PATTERN>"``.
- ``MethodScopedRegistrar`` for path-template routers that take the
  method as a separate argument.

Anything else is a one-function adapter away::

    def register_on_my_router(router, handler, route):
        if not isinstance(router, MyRouter):
            raise RouterMismatchError(router, expected="MyRouter")
        router.handle(route.pattern, handler).methods(route.method)
"""

import logging
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from routekit.errors import RouterMismatchError
from routekit.handler import Handler
from routekit.routing.route import Route

logger = logging.getLogger("routekit.routing")


class HandlerRegistrar(Protocol):
    """Strategy binding a handler for *route* onto *router*.

    Raises ``RouterMismatchError`` (or any error of its choosing) when
    the router can't be used.
    """

    def __call__(self, router: Any, handler: Handler, route: Route) -> None: ...


@runtime_checkable
class BindableRouter(Protocol):
    """The minimal router shape ``bind_registrar`` understands."""

    def bind(self, pattern: str, handler: Handler) -> None: ...


def bind_registrar(router: Any, handler: Handler, route: Route) -> None:
    """Default registrar: ``router.bind("<METHOD> <PATTERN>", handler)``.

    Any object with a ``bind`` method qualifies; the check is on shape,
    not type.
    """
    if not isinstance(router, BindableRouter) or not callable(router.bind):
        raise RouterMismatchError(router)
    pattern = route.method_pattern
    router.bind(pattern, handler)
    logger.debug("Bound %s on %s", pattern, type(router).__qualname__)


@dataclass(frozen=True, slots=True)
class MethodScopedRegistrar:
    """Registrar for routers whose binding call takes the method separately.

    Calls ``router.<bind_method>(pattern, handler, method)``::

        register_controller(
            router,
            controller,
            with_registrar(MethodScopedRegistrar("add_route")),
        )
    """

    bind_method: str = "add"

    def __call__(self, router: Any, handler: Handler, route: Route) -> None:
        bind = getattr(router, self.bind_method, None)
        if not callable(bind):
            expected = f"router with {self.bind_method}(pattern, handler, method)"
            raise RouterMismatchError(router, expected=expected)
        bind(route.pattern, handler, route.method)
        logger.debug(
            "Bound %s %s via %s.%s",
            route.method,
            route.pattern,
            type(router).__qualname__,
            self.bind_method,
        )
