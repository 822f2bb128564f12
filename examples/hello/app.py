"""Hello — a class handler registered with all defaults.

The controller is its own handler: it implements ``serve`` and declares
one route pointing at itself. The default registrar binds it on any
mux-like router as ``"GET /hello"``.

Run:
    python app.py
"""

from routekit import Request, ResponseWriter, Routes, must_register_controller, route
from routekit.testing import RecordingRouter, serve_sync


class HelloController:
    async def serve(self, writer: ResponseWriter, request: Request) -> None:
        name = request.query_param("name") or "anonymous"
        writer.headers["content-type"] = "text/plain; charset=utf-8"
        writer.write(f"Hello, {name}!\n")

    def routes(self) -> Routes:
        return [route("GET", "/hello", self)]


router = RecordingRouter()
must_register_controller(router, HelloController())


if __name__ == "__main__":
    response = serve_sync(router.handlers["GET /hello"], Request.build("GET", "/hello?name=YourName"))
    print(response.status, response.text, end="")
