"""routekit exception hierarchy.

Shared across the handler mapper, registrars, and the controller
orchestrator so every module raises and catches the same types.
"""

from typing import Any


class RoutekitError(Exception):
    """Base for all routekit-specific errors."""


class ConfigurationError(RoutekitError):
    """Raised when a route or registration option is invalid.

    Typically surfaces while a controller builds its routes at startup.
    """


class RegistrationError(RoutekitError):
    """Base for failures while binding a controller's routes to a router."""


class HandlerMappingError(RegistrationError):
    """A route's handler value could not be turned into a ``Handler``.

    Raised by the default mapper when the value neither implements
    ``Handler`` nor is a function taking ``(ResponseWriter, Request)``.
    """

    def __init__(self, value: Any, detail: str = "failed to map handler") -> None:
        self.value = value
        self.detail = detail
        super().__init__(detail)

    def __str__(self) -> str:
        return f"{self.detail}: {self.value!r}"


class RouterMismatchError(RegistrationError):
    """The router object lacks the capability the active registrar needs.

    The message names the router's actual type, e.g.::

        RouterMismatchError: router with bind(pattern, handler) expected, got dict
    """

    def __init__(self, router: Any, expected: str = "router with bind(pattern, handler)") -> None:
        self.router_type = type(router)
        self.expected = expected
        super().__init__(f"{expected} expected, got {self.router_type.__qualname__}")
