"""Shared fixtures: handlers and middleware that record how they were called."""

from collections import Counter
from dataclasses import dataclass, field

import pytest

from routekit.handler import Handler
from routekit.http.request import Request
from routekit.http.writer import ResponseWriter
from routekit.middleware.chain import apply


@dataclass
class EventLog:
    """Ordered record of entries/exits plus per-name invocation counts."""

    events: list[str] = field(default_factory=list)
    calls: Counter[str] = field(default_factory=Counter)

    def entered(self) -> list[str]:
        return [e.removesuffix(":in") for e in self.events if e.endswith(":in")]

    def exited(self) -> list[str]:
        return [e.removesuffix(":out") for e in self.events if e.endswith(":out")]

    def handler(self, name: str = "H") -> "RecordingHandler":
        return RecordingHandler(name, self)

    def middleware(self, name: str, *, call_next: bool = True) -> "RecordingMiddleware":
        return RecordingMiddleware(name, self, call_next)

    def decorator(self, name: str, *, call_next: bool = True):  # noqa: ANN201
        """A decorator applying one recording middleware."""
        mw = self.middleware(name, call_next=call_next)

        def wrap(handler: Handler) -> Handler:
            return apply(handler, mw)

        return wrap


@dataclass
class RecordingHandler:
    name: str
    log: EventLog

    async def serve(self, writer: ResponseWriter, request: Request) -> None:
        self.log.calls[self.name] += 1
        self.log.events.append(f"{self.name}:in")
        writer.write(self.name)
        self.log.events.append(f"{self.name}:out")


@dataclass
class RecordingMiddleware:
    name: str
    log: EventLog
    call_next: bool = True

    async def __call__(self, writer: ResponseWriter, request: Request, next: Handler) -> None:
        self.log.calls[self.name] += 1
        self.log.events.append(f"{self.name}:in")
        if self.call_next:
            await next.serve(writer, request)
        self.log.events.append(f"{self.name}:out")


@pytest.fixture
def event_log() -> EventLog:
    return EventLog()
