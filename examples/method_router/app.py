"""Method Router — registering onto a router with its own binding API.

``PathRouter`` stands in for a path-template router that takes the HTTP
method as a separate argument and has no ``bind``. Two ways to target it:

- ``MethodScopedRegistrar``, when the router's call is
  ``add(pattern, handler, method)``
- a hand-written registrar function for anything else

The ``/health`` route brings its own registrar, which wins for that
route only.

Run:
    python app.py
"""

from typing import Any

from routekit import (
    Handler,
    Request,
    ResponseWriter,
    Route,
    RouterMismatchError,
    Routes,
    must_register_controller,
    route,
    with_registrar,
)
from routekit.routing import MethodScopedRegistrar
from routekit.testing import serve_sync


class PathRouter:
    """Keeps ``{method: {pattern: handler}}``; a real router would also match."""

    def __init__(self) -> None:
        self.table: dict[str, dict[str, Handler]] = {}
        self.internal: dict[str, Handler] = {}

    def add(self, pattern: str, handler: Handler, method: str) -> None:
        self.table.setdefault(method, {})[pattern] = handler

    def lookup(self, method: str, pattern: str) -> Handler:
        return self.table[method][pattern]


def register_internal(router: Any, handler: Handler, route: Route) -> None:
    """Put a route in the router's internal table, off the public one."""
    if not isinstance(router, PathRouter):
        raise RouterMismatchError(router, expected="PathRouter")
    router.internal[route.pattern] = handler


class ItemController:
    def __init__(self) -> None:
        self.items: dict[str, str] = {"1": "apple"}

    def get_item(self, w: ResponseWriter, r: Request) -> None:
        item = self.items.get(r.path_params.get("id", ""))
        if item is None:
            w.write_header(404)
            return
        w.write(item)

    def put_item(self, w: ResponseWriter, r: Request) -> None:
        self.items[r.path_params["id"]] = r.text()
        w.write_header(204)

    def health(self, w: ResponseWriter, r: Request) -> None:
        w.write("ok")

    def routes(self) -> Routes:
        return [
            route("GET", "/items/{id}", self.get_item),
            route("PUT", "/items/{id}", self.put_item),
            route("GET", "/health", self.health, registrar=register_internal),
        ]


router = PathRouter()
must_register_controller(router, ItemController(), with_registrar(MethodScopedRegistrar("add")))


if __name__ == "__main__":
    handler = router.lookup("GET", "/items/{id}")
    response = serve_sync(handler, Request.build("GET", "/items/1", path_params={"id": "1"}))
    print(response.status, response.text)
