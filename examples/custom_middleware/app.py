"""Custom Middleware — logging and error recovery around every route.

Demonstrates:
- Function middleware (request logging with elapsed time)
- Class middleware (recovers from handler errors, answers 500)
- Call order: the first ``with_middlewares`` runs first on every request

Run:
    python app.py
"""

import logging
import time

from routekit import (
    Next,
    Request,
    ResponseWriter,
    Routes,
    must_register_controller,
    route,
    with_middlewares,
)
from routekit.testing import RecordingRouter, serve_sync

log = logging.getLogger("examples.custom_middleware")


# ---------------------------------------------------------------------------
# Function middleware: logging
# ---------------------------------------------------------------------------


async def log_requests(writer: ResponseWriter, request: Request, next: Next) -> None:
    start = time.monotonic()
    log.info("(log_requests) handling request for: %s", request.url)
    await next.serve(writer, request)
    log.info("(log_requests) end request for: %s elapsed: %.3fs", request.url, time.monotonic() - start)


# ---------------------------------------------------------------------------
# Class middleware: error recovery
# ---------------------------------------------------------------------------


class RecoverErrors:
    """Turn an exception escaping the handler into a 500 response."""

    def __init__(self) -> None:
        self.recovered = 0

    async def __call__(self, writer: ResponseWriter, request: Request, next: Next) -> None:
        try:
            await next.serve(writer, request)
        except Exception:
            self.recovered += 1
            log.warning("(RecoverErrors) recovered error for %s", request.url, exc_info=True)
            writer.write_header(500)


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------


class GreetingController:
    def say_hello(self, w: ResponseWriter, r: Request) -> None:
        raise RuntimeError("Hello")

    def say_hi(self, w: ResponseWriter, r: Request) -> None:
        w.write("Hi")

    def routes(self) -> Routes:
        return [
            route("GET", "/api/hello", self.say_hello),
            route("POST", "/api/hi", self.say_hi),
        ]


recover_errors = RecoverErrors()
router = RecordingRouter()
must_register_controller(
    router,
    GreetingController(),
    with_middlewares(log_requests),
    with_middlewares(recover_errors),
)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    for pattern, request in (
        ("GET /api/hello", Request.build("GET", "/api/hello")),
        ("POST /api/hi", Request.build("POST", "/api/hi")),
    ):
        response = serve_sync(router.handlers[pattern], request)
        print(pattern, response.status, response.text)
