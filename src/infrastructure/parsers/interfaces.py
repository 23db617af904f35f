"""Protocol interfaces for the HTTP session used by services."""

from typing import Protocol

from infrastructure.http_client import HttpResponse


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    async def request(
        self,
        url: str,
        method: str = "GET",
        headers: dict[str, str] | None = None,
        body: str | bytes | None = None,
    ) -> HttpResponse:
        """Issue a request and return the decoded response."""
        ...

    async def get_text(self, url: str) -> str:
        """Get text content from URL."""
        ...

    async def post_form(
        self,
        url: str,
        form: dict[str, str],
        headers: dict[str, str] | None = None,
    ) -> HttpResponse:
        """POST url-encoded form data."""
        ...
