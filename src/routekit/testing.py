"""Test helpers for routekit handlers and controllers.

Stand-ins for the two collaborators routekit never provides: a router
to register onto and a response writer to serve into. No server
involved.

Usage::

    router = RecordingRouter()
    register_controller(router, HelloController())
    response = await router.serve("GET /hello", Request.build("GET", "/hello"))
    assert response.text == "Hello"
"""

import anyio

from routekit.handler import Handler
from routekit.http.request import Request


class ResponseRecorder:
    """A ``ResponseWriter`` that keeps everything written to it."""

    __test__ = False  # Tell pytest this is not a test class

    __slots__ = ("_headers", "body", "status", "wrote_header")

    def __init__(self) -> None:
        self._headers: dict[str, str] = {}
        self.status = 200
        self.wrote_header = False
        self.body = bytearray()

    @property
    def headers(self) -> dict[str, str]:
        return self._headers

    def write_header(self, status: int) -> None:
        # First status wins, as on a real connection
        if self.wrote_header:
            return
        self.status = status
        self.wrote_header = True

    def write(self, data: bytes | str) -> int:
        if not self.wrote_header:
            self.write_header(200)
        if isinstance(data, str):
            data = data.encode("utf-8")
        self.body.extend(data)
        return len(data)

    @property
    def text(self) -> str:
        """The body decoded as UTF-8."""
        return self.body.decode("utf-8")


class RecordingRouter:
    """A ``BindableRouter`` that records bindings in order.

    Binding the same pattern twice is an error, as on most muxes.
    """

    __test__ = False

    __slots__ = ("handlers", "patterns")

    def __init__(self) -> None:
        self.patterns: list[str] = []
        self.handlers: dict[str, Handler] = {}

    def bind(self, pattern: str, handler: Handler) -> None:
        if pattern in self.handlers:
            msg = f"Pattern {pattern!r} is already bound."
            raise ValueError(msg)
        self.patterns.append(pattern)
        self.handlers[pattern] = handler

    def __len__(self) -> int:
        return len(self.patterns)

    async def serve(self, pattern: str, request: Request) -> ResponseRecorder:
        """Serve *request* with the handler bound to exactly *pattern*."""
        return await serve(self.handlers[pattern], request)


async def serve(handler: Handler, request: Request | None = None) -> ResponseRecorder:
    """Run *handler* against a fresh ``ResponseRecorder`` and return it."""
    recorder = ResponseRecorder()
    await handler.serve(recorder, request or Request.build("GET", "/"))
    return recorder


def serve_sync(handler: Handler, request: Request | None = None) -> ResponseRecorder:
    """``serve`` for synchronous callers; runs its own event loop."""
    return anyio.run(serve, handler, request)


def assert_bound(router: RecordingRouter, *patterns: str) -> None:
    """Assert *router* holds exactly *patterns*, in this order."""
    assert router.patterns == list(patterns), (
        f"Expected bindings {list(patterns)}, got {router.patterns}"
    )
