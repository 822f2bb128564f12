"""Echo — plain method handlers mapped by signature.

``serve_echo`` and ``serve_length`` are ordinary bound methods taking
``(ResponseWriter, Request)``; the default mapper recognizes the
signature and wraps them.

Run:
    python app.py
"""

import json

from routekit import Request, ResponseWriter, Routes, must_register_controller, route
from routekit.testing import RecordingRouter, serve_sync


class EchoController:
    def serve_echo(self, w: ResponseWriter, r: Request) -> None:
        if r.content_type is not None:
            w.headers["content-type"] = r.content_type
        w.write(r.body)

    async def serve_length(self, w: ResponseWriter, r: Request) -> None:
        w.headers["content-type"] = "application/json"
        w.write(json.dumps({"length": len(r.body)}))

    def routes(self) -> Routes:
        return [
            route("POST", "/", self.serve_echo),
            route("POST", "/length", self.serve_length),
        ]


router = RecordingRouter()
must_register_controller(router, EchoController())


if __name__ == "__main__":
    request = Request.build(
        "POST",
        "/",
        headers=[("Content-Type", "application/json")],
        body='{"payload": "Hello, world!"}',
    )
    print(serve_sync(router.handlers["POST /"], request).text)
