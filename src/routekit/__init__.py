"""routekit — bind declarative controller routes onto any router.

Controllers declare routes; routekit maps each handler value to a
``Handler``, wraps it in the configured middleware, and binds it to
whatever router you hand it through a pluggable registrar.

Basic usage::

    from routekit import Request, ResponseWriter, must_register_controller, route

    class HelloController:
        def routes(self):
            return [route("GET", "/hello", self.hello)]

        def hello(self, w: ResponseWriter, r: Request) -> None:
            w.write("Hello")

    must_register_controller(mux, HelloController())

Any router works once it has a registrar; the default one expects a
``bind(pattern, handler)`` method and binds ``"GET /hello"``.
"""

__version__ = "0.1.0"
__all__ = [
    "Controller",
    "ControllerRegistrar",
    "ConfigurationError",
    "Decorator",
    "Handler",
    "HandlerFunc",
    "HandlerMappingError",
    "HandlerRegistrar",
    "Headers",
    "Middleware",
    "Next",
    "RegistrationError",
    "RegistrationOptions",
    "Request",
    "ResponseWriter",
    "Route",
    "RouterMismatchError",
    "Routes",
    "RoutekitError",
    "apply",
    "decorate",
    "map_handler",
    "must_register_controller",
    "new_controller_registrar",
    "register_controller",
    "route",
    "with_decorator",
    "with_mapper",
    "with_middlewares",
    "with_registrar",
    "with_sticky_route_registrar",
]


# Public name -> defining module. Resolved on first attribute access.
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "routekit.errors",
    "Controller": "routekit.controller",
    "ControllerRegistrar": "routekit.controller",
    "Decorator": "routekit.decorator",
    "Handler": "routekit.handler",
    "HandlerFunc": "routekit.handler",
    "HandlerMappingError": "routekit.errors",
    "HandlerRegistrar": "routekit.routing.registrar",
    "Headers": "routekit.http.headers",
    "Middleware": "routekit.middleware.protocol",
    "Next": "routekit.middleware.protocol",
    "RegistrationError": "routekit.errors",
    "RegistrationOptions": "routekit.config",
    "Request": "routekit.http.request",
    "ResponseWriter": "routekit.http.writer",
    "Route": "routekit.routing.route",
    "RouterMismatchError": "routekit.errors",
    "Routes": "routekit.routing.route",
    "RoutekitError": "routekit.errors",
    "apply": "routekit.middleware.chain",
    "decorate": "routekit.decorator",
    "map_handler": "routekit.handler",
    "must_register_controller": "routekit.controller",
    "new_controller_registrar": "routekit.controller",
    "register_controller": "routekit.controller",
    "route": "routekit.routing.route",
    "with_decorator": "routekit.config",
    "with_mapper": "routekit.config",
    "with_middlewares": "routekit.config",
    "with_registrar": "routekit.config",
    "with_sticky_route_registrar": "routekit.config",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routekit`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_path), name)
