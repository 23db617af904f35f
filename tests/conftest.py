"""Shared fixtures: a scripted fake of the OpenJudge site served through httpx."""

from collections import defaultdict, deque

import httpx
import pytest

from infrastructure.http_client import AsyncHTTPClient
from infrastructure.session_context import SessionContext
from infrastructure.session_store import MemorySessionStore


class FakeSite:
    """Answers requests from scripted responses keyed by method and URL."""

    def __init__(self):
        self.routes: dict[tuple[str, str], deque] = defaultdict(deque)
        self.requests: list[httpx.Request] = []

    def add(
        self,
        url: str,
        body: str | bytes = "",
        *,
        method: str = "GET",
        status: int = 200,
        headers: list[tuple[str, str]] | None = None,
    ) -> None:
        """Queue a response; the last queued response for a URL is repeated."""
        content = body.encode("utf-8") if isinstance(body, str) else body
        self.routes[(method, url)].append((status, headers or [], content))

    def add_error(self, url: str, exc: Exception, *, method: str = "GET") -> None:
        self.routes[(method, url)].append(exc)

    def requests_to(self, url: str, method: str | None = None) -> list[httpx.Request]:
        return [
            request
            for request in self.requests
            if str(request.url) == url and (method is None or request.method == method)
        ]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self.routes.get((request.method, str(request.url)))
        if not queue:
            return httpx.Response(404, stream=httpx.ByteStream(b"Not Found"))

        entry = queue.popleft() if len(queue) > 1 else queue[0]
        if isinstance(entry, Exception):
            raise entry

        status, headers, content = entry
        return httpx.Response(status, headers=headers, stream=httpx.ByteStream(content))

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def site():
    return FakeSite()


@pytest.fixture
def store():
    return MemorySessionStore()


@pytest.fixture
def context(store):
    return SessionContext(store=store)


@pytest.fixture
def http_client(context, site):
    return AsyncHTTPClient(context, transport=site.transport)
