"""Controller registration.

A controller is any object with a ``routes()`` method. Registration
walks those routes in declared order and, for each one:

1. maps ``Route.handler`` to a ``Handler`` (``RegistrationOptions.mapper``)
2. wraps it in the configured decorators, if any
3. binds it to the router (``Route.registrar`` or ``RegistrationOptions.registrar``)

The first failure aborts the pass and propagates. Routes bound before
the failure stay bound; registration is not transactional.

Usage::

    class HelloController:
        def routes(self) -> Routes:
            return [route("GET", "/hello", self.hello)]

        def hello(self, w: ResponseWriter, r: Request) -> None:
            w.write("Hello")

    must_register_controller(mux, HelloController(), with_middlewares(log_requests))
"""

import logging
from collections.abc import Sequence
from typing import Any, Protocol

from routekit.config import OptionModifier, RegistrationOptions
from routekit.decorator import decorate
from routekit.routing.route import Route

logger = logging.getLogger("routekit.controller")

__all__ = [
    "Controller",
    "ControllerRegistrar",
    "Registrar",
    "decorate",
    "must_register_controller",
    "new_controller_registrar",
    "register_controller",
]


class Controller(Protocol):
    """Anything that declares routes."""

    def routes(self) -> Sequence[Route]: ...


class Registrar(Protocol):
    """Registers every route of a controller onto a router."""

    def register_controller(self, router: Any, controller: Controller) -> None: ...


class ControllerRegistrar:
    """Default ``Registrar``, driven by a ``RegistrationOptions``.

    The same instance can register any number of controllers; it keeps
    no state between calls.
    """

    __slots__ = ("options",)

    def __init__(self, options: RegistrationOptions | None = None) -> None:
        self.options = options or RegistrationOptions()

    def register_controller(self, router: Any, controller: Controller) -> None:
        """Bind all of *controller*'s routes onto *router*.

        Raises whatever the mapper or registrar raises, at the first
        failing route.
        """
        options = self.options
        registrar = options.registrar
        count = 0

        for route in controller.routes():
            handler = options.mapper(route.handler)
            if options.decorators:
                handler = decorate(handler, options.decorators)

            route_registrar = registrar
            if route.registrar is not None:
                route_registrar = route.registrar
                if options.sticky_route_registrar:
                    registrar = route.registrar

            route_registrar(router, handler, route)
            count += 1
            logger.debug("Registered %s %s", route.method, route.pattern)

        logger.debug(
            "Registered %d route(s) from %s",
            count,
            type(controller).__qualname__,
        )


def new_controller_registrar(*modifiers: OptionModifier) -> ControllerRegistrar:
    """Build a ``ControllerRegistrar`` from option modifiers, applied in order."""
    return ControllerRegistrar(RegistrationOptions.build(*modifiers))


def register_controller(router: Any, controller: Controller, *modifiers: OptionModifier) -> None:
    """Register *controller* on *router* with options built from *modifiers*."""
    new_controller_registrar(*modifiers).register_controller(router, controller)


def must_register_controller(router: Any, controller: Controller, *modifiers: OptionModifier) -> None:
    """Like ``register_controller``, but a registration failure is fatal.

    Meant for startup wiring, where a route that can't be bound means the
    process shouldn't run. Logs the failure and raises ``SystemExit(1)``.
    """
    try:
        register_controller(router, controller, *modifiers)
    except Exception as exc:
        logger.critical(
            "Failed to register %s on %s: %s",
            type(controller).__qualname__,
            type(router).__qualname__,
            exc,
        )
        raise SystemExit(1) from exc
