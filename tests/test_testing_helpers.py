"""Tests for routekit.testing — ResponseRecorder, RecordingRouter, serve helpers."""

import pytest

from routekit.handler import HandlerFunc
from routekit.http.request import Request
from routekit.http.writer import ResponseWriter
from routekit.testing import (
    RecordingRouter,
    ResponseRecorder,
    assert_bound,
    serve,
    serve_sync,
)


class TestResponseRecorder:
    def test_is_response_writer(self) -> None:
        assert isinstance(ResponseRecorder(), ResponseWriter)

    def test_defaults(self) -> None:
        recorder = ResponseRecorder()
        assert recorder.status == 200
        assert recorder.wrote_header is False
        assert recorder.body == b""
        assert recorder.headers == {}

    def test_write_implies_200(self) -> None:
        recorder = ResponseRecorder()
        assert recorder.write("hi") == 2
        assert recorder.wrote_header is True
        assert recorder.status == 200
        assert recorder.text == "hi"

    def test_first_status_wins(self) -> None:
        recorder = ResponseRecorder()
        recorder.write_header(404)
        recorder.write_header(500)
        recorder.write(b"gone")
        assert recorder.status == 404
        assert recorder.body == b"gone"

    def test_headers_mutable(self) -> None:
        recorder = ResponseRecorder()
        recorder.headers["content-type"] = "text/plain"
        assert recorder.headers == {"content-type": "text/plain"}


class TestRecordingRouter:
    def test_records_in_order(self) -> None:
        router = RecordingRouter()
        handler = HandlerFunc(lambda w, r: None)
        router.bind("GET /b", handler)
        router.bind("GET /a", handler)
        assert router.patterns == ["GET /b", "GET /a"]
        assert len(router) == 2

    def test_duplicate_pattern_rejected(self) -> None:
        router = RecordingRouter()
        handler = HandlerFunc(lambda w, r: None)
        router.bind("GET /", handler)
        with pytest.raises(ValueError, match="already bound"):
            router.bind("GET /", handler)

    @pytest.mark.anyio
    async def test_serve_bound_pattern(self) -> None:
        router = RecordingRouter()
        router.bind("GET /hello", HandlerFunc(lambda w, r: w.write(r.url)))
        response = await router.serve("GET /hello", Request.build("GET", "/hello?x=1"))
        assert response.text == "/hello?x=1"

    def test_assert_bound_mismatch(self) -> None:
        router = RecordingRouter()
        router.bind("GET /", HandlerFunc(lambda w, r: None))
        with pytest.raises(AssertionError, match="Expected bindings"):
            assert_bound(router, "POST /")


class TestServe:
    @pytest.mark.anyio
    async def test_default_request(self) -> None:
        response = await serve(HandlerFunc(lambda w, r: w.write(f"{r.method} {r.path}")))
        assert response.text == "GET /"

    def test_serve_sync(self) -> None:
        async def greet(w: ResponseWriter, r: Request) -> None:
            w.write_header(201)
            w.write("created")

        response = serve_sync(HandlerFunc(greet), Request.build("POST", "/items"))
        assert response.status == 201
        assert response.text == "created"
