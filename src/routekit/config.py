"""Registration configuration.

RegistrationOptions is a frozen dataclass, immutable after creation:
IDE-autocompletable, no string-key dict lookups.

Options come from keyword arguments or from modifiers applied in call
order; each modifier returns a new instance::

    options = RegistrationOptions.build(
        with_registrar(MethodScopedRegistrar("add_route")),
        with_middlewares(logging_mw),
        with_middlewares(recover_mw),
    )
"""

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import TypeAlias

from routekit.decorator import Decorator, MiddlewareDecorator
from routekit.errors import ConfigurationError
from routekit.handler import Mapper, map_handler
from routekit.middleware.protocol import Middleware
from routekit.routing.registrar import HandlerRegistrar, bind_registrar


@dataclass(frozen=True, slots=True)
class RegistrationOptions:
    """How a controller's routes get mapped, decorated, and bound.

    All fields have defaults. Override what you need::

        RegistrationOptions(registrar=register_on_my_router)
    """

    # Turns each Route.handler value into a Handler
    mapper: Mapper = map_handler

    # Binds each mapped handler onto the router (unless the route has its own)
    registrar: HandlerRegistrar = bind_registrar

    # Wrapped around every route's handler; first entry is outermost
    decorators: tuple[Decorator, ...] = ()

    # When True, a route-level registrar stays in effect for later routes
    # that don't declare one. When False it applies to its own route only.
    sticky_route_registrar: bool = False

    @classmethod
    def build(cls, *modifiers: "OptionModifier") -> "RegistrationOptions":
        """Start from defaults and apply *modifiers* in order."""
        options = cls()
        for modify in modifiers:
            options = modify(options)
        return options


OptionModifier: TypeAlias = Callable[[RegistrationOptions], RegistrationOptions]


def with_mapper(mapper: Mapper) -> OptionModifier:
    """Replace the handler mapper wholesale."""
    if not callable(mapper):
        msg = f"Handler mapper must be callable, got {type(mapper).__qualname__}."
        raise ConfigurationError(msg)

    def modify(options: RegistrationOptions) -> RegistrationOptions:
        return replace(options, mapper=mapper)

    return modify


def with_registrar(registrar: HandlerRegistrar) -> OptionModifier:
    """Replace the default handler registrar."""
    if not callable(registrar):
        msg = f"Handler registrar must be callable, got {type(registrar).__qualname__}."
        raise ConfigurationError(msg)

    def modify(options: RegistrationOptions) -> RegistrationOptions:
        return replace(options, registrar=registrar)

    return modify


def with_decorator(decorator: Decorator) -> OptionModifier:
    """Append a decorator; earlier decorators wrap later ones."""
    if not callable(decorator):
        msg = f"Handler decorator must be callable, got {type(decorator).__qualname__}."
        raise ConfigurationError(msg)

    def modify(options: RegistrationOptions) -> RegistrationOptions:
        return replace(options, decorators=(*options.decorators, decorator))

    return modify


def with_middlewares(*middleware: Middleware) -> OptionModifier:
    """Append one decorator running *middleware* in the given order."""
    return with_decorator(MiddlewareDecorator(middleware))


def with_sticky_route_registrar(sticky: bool = True) -> OptionModifier:
    """Let a route-level registrar carry over to later routes."""

    def modify(options: RegistrationOptions) -> RegistrationOptions:
        return replace(options, sticky_route_registrar=sticky)

    return modify
