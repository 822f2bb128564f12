"""Routing — route declarations and the registrars that bind them.

routekit does no matching of its own. Routes are handed to whatever
router the caller supplies, through a registrar that knows its shape.
"""

from routekit.routing.registrar import (
    BindableRouter,
    HandlerRegistrar,
    MethodScopedRegistrar,
    bind_registrar,
)
from routekit.routing.route import Route, Routes, route

__all__ = [
    "BindableRouter",
    "HandlerRegistrar",
    "MethodScopedRegistrar",
    "Route",
    "Routes",
    "bind_registrar",
    "route",
]
