"""Route frozen dataclass and the ``route()`` helper."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeAlias

from routekit.errors import ConfigurationError

if TYPE_CHECKING:
    from routekit.routing.registrar import HandlerRegistrar


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route declaration.

    Built by a controller's ``routes()``, consumed once at registration.
    ``method`` and ``pattern`` are opaque to routekit; they only have to
    mean something to the target router.

    ``handler`` is whatever the active mapper understands. ``registrar``,
    when set, overrides the configured registrar for this route.
    """

    method: str
    pattern: str
    handler: Any
    registrar: HandlerRegistrar | None = None

    def __post_init__(self) -> None:
        if not self.method:
            msg = f"Route method must be non-empty (pattern {self.pattern!r})."
            raise ConfigurationError(msg)
        if not self.pattern:
            msg = f"Route pattern must be non-empty (method {self.method!r})."
            raise ConfigurationError(msg)

    @property
    def method_pattern(self) -> str:
        """The ``"<METHOD> <PATTERN>"`` form used by method-aware muxes."""
        return f"{self.method} {self.pattern}"


Routes: TypeAlias = list[Route]


def route(
    method: str,
    pattern: str,
    handler: Any,
    *,
    registrar: HandlerRegistrar | None = None,
) -> Route:
    """Shorthand for declaring a route inside ``routes()``::

        def routes(self) -> Routes:
            return [
                route("GET", "/api/hello", self.say_hello),
                route("POST", "/api/hi", self.say_hi),
            ]
    """
    return Route(method=method, pattern=pattern, handler=handler, registrar=registrar)
