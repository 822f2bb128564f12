"""ResponseWriter protocol.

The response half of a request/response exchange. Whatever serving loop
hosts routekit handlers supplies an object of this shape; routekit only
passes it through.

No base class required. Handler mapping checks the annotation, and the
serving loop checks the shape, not the lineage.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ResponseWriter(Protocol):
    """Protocol for writing a response.

    ``headers`` may be mutated until the first ``write_header()`` or
    ``write()``; ``write()`` sends status 200 implicitly when no status
    was written yet::

        def hello(w: ResponseWriter, r: Request) -> None:
            w.headers["content-type"] = "text/plain; charset=utf-8"
            w.write("Hello")
    """

    @property
    def headers(self) -> dict[str, str]: ...

    def write_header(self, status: int) -> None: ...

    def write(self, data: bytes | str) -> int: ...
