"""Immutable HTTP request.

Frozen metadata plus the already-received body. The request is honest
about what it is: received data that doesn't change. Handlers and
middleware get the same instance, passed through unmodified.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import parse_qs

from routekit.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Routers that serve routekit handlers build one per exchange and pass
    it alongside a ``ResponseWriter``.
    """

    method: str
    path: str
    headers: Headers = field(default_factory=Headers)
    query_string: str = ""
    path_params: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    # -- Computed properties --

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get("content-type")

    @property
    def url(self) -> str:
        """Request path plus query string."""
        if self.query_string:
            return f"{self.path}?{self.query_string}"
        return self.path

    def query_param(self, name: str, default: str | None = None) -> str | None:
        """Return the first query-string value for *name*."""
        values = parse_qs(self.query_string, keep_blank_values=True).get(name)
        if not values:
            return default
        return values[0]

    def text(self, encoding: str = "utf-8") -> str:
        """Decode the body as text."""
        return self.body.decode(encoding)

    def json(self) -> Any:
        """Parse the body as JSON."""
        import json as json_module

        return json_module.loads(self.body)

    # -- Factory --

    @classmethod
    def build(
        cls,
        method: str,
        target: str,
        *,
        headers: Iterable[tuple[str, str]] = (),
        body: bytes | str = b"",
        path_params: dict[str, str] | None = None,
    ) -> Request:
        """Create a Request from a method and request target.

        The query string is split off *target*; a ``str`` body is encoded
        as UTF-8::

            Request.build("GET", "/hello?name=Ada")
        """
        path, _, query_string = target.partition("?")
        if isinstance(body, str):
            body = body.encode("utf-8")
        return cls(
            method=method.upper(),
            path=path or "/",
            headers=Headers(headers),
            query_string=query_string,
            path_params=path_params or {},
            body=body,
        )
