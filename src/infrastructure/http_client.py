"""Async HTTP session with cookie persistence and manual body decompression."""

import codecs
import gzip
import zlib
from dataclasses import dataclass
from urllib.parse import urlencode

import httpx
from loguru import logger

from domain.exceptions import HttpError, TransportError

from .session_context import SessionContext

PREVIEW_LENGTH = 200

DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/142.0.0.0 Safari/537.36"
    ),
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,"
        "image/webp,image/apng,*/*;q=0.8,application/signed-exchange;v=b3;q=0.7"
    ),
    "Accept-Language": "zh-CN,zh;q=0.9,en;q=0.8",
    "Accept-Encoding": "gzip, deflate",
    "Connection": "keep-alive",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
    "Upgrade-Insecure-Requests": "1",
}

AJAX_ACCEPT = "application/json, text/javascript, */*; q=0.01"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def ajax_headers(origin: str | None = None, referer: str | None = None) -> dict[str, str]:
    """Headers the site's own JavaScript sends with form POSTs."""
    headers = {
        "Accept": AJAX_ACCEPT,
        "Content-Type": FORM_CONTENT_TYPE,
        "X-Requested-With": "XMLHttpRequest",
    }
    if origin:
        headers["Origin"] = origin
    if referer:
        headers["Referer"] = referer
    return headers


@dataclass
class HttpResponse:
    body: str
    headers: httpx.Headers
    status_code: int


class AsyncHTTPClient:
    """
    Browser-like HTTP session over a shared keep-alive connection pool.

    Cookies are managed by the session context's jar rather than httpx: the
    Cookie header is rendered from the jar for every request, and every
    Set-Cookie is written back to the jar and persisted before the response is
    handed to the caller.
    """

    def __init__(
        self,
        context: SessionContext,
        *,
        max_connections: int = 10,
        keepalive_expiry: float = 30.0,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize client.

        Args:
            context: Session context owning the cookie jar and its store
            max_connections: Size of the connection pool; extra requests wait
            keepalive_expiry: Seconds an idle connection is kept open
            timeout: Connect/read/write timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.context = context
        self._client = httpx.AsyncClient(
            limits=httpx.Limits(
                max_connections=max_connections,
                max_keepalive_connections=max_connections,
                keepalive_expiry=keepalive_expiry,
            ),
            # No pool timeout: a saturated pool queues requests instead of failing them
            timeout=httpx.Timeout(timeout, pool=None),
            follow_redirects=False,
            transport=transport,
        )

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def build_headers(self, url: str, extra: dict[str, str] | None = None) -> dict[str, str]:
        """Merge default and caller headers, then add the jar's Cookie header."""
        headers = {**DEFAULT_HEADERS, **(extra or {})}

        cookie_header = self.context.cookie_jar.header_for(httpx.URL(url).host)
        if cookie_header:
            headers["Cookie"] = cookie_header
        return headers

    async def request(
        self,
        url: str,
        method: str = "GET",
        headers: dict[str, str] | None = None,
        body: str | bytes | None = None,
    ) -> HttpResponse:
        """
        Issue a request and return its decoded body.

        Raises:
            HttpError: If the server answered with status 400 or above
            TransportError: On network failure, timeout or undecodable body
        """
        method = method.upper()
        request_headers = self.build_headers(url, headers)
        host = httpx.URL(url).host

        logger.debug(f"[HTTP {method}] {url}")
        if body:
            logger.debug(f"[HTTP {method}] body length: {len(body)}")

        try:
            async with self._client.stream(
                method, url, headers=request_headers, content=body
            ) as response:
                await self._store_cookies(response, host)
                text = await self._read_body(response)
                status_code = response.status_code
                response_headers = response.headers
        except httpx.HTTPError as e:
            logger.error(f"[HTTP {method}] {url} failed: {e}")
            raise TransportError(f"{method} {url} failed: {e}") from e
        finally:
            # httpx keeps its own jar; ours is the only source of truth
            self._client.cookies.clear()

        logger.debug(f"[HTTP {method}] {url} -> {status_code}, body length: {len(text)}")

        if status_code >= 400:
            logger.error(f"[HTTP {status_code}] {url}: {text[:1000]}")
            raise HttpError(status_code, text[:PREVIEW_LENGTH])

        return HttpResponse(body=text, headers=response_headers, status_code=status_code)

    async def get_text(self, url: str) -> str:
        """Get text content from URL."""
        response = await self.request(url)
        return response.body

    async def post_form(
        self,
        url: str,
        form: dict[str, str],
        headers: dict[str, str] | None = None,
    ) -> HttpResponse:
        """POST url-encoded form data."""
        request_headers = {"Content-Type": FORM_CONTENT_TYPE, **(headers or {})}
        return await self.request(
            url, method="POST", headers=request_headers, body=urlencode(form)
        )

    async def _store_cookies(self, response: httpx.Response, host: str) -> None:
        set_cookie = response.headers.get_list("set-cookie")
        if not set_cookie:
            return

        self.context.cookie_jar.set_from_header(set_cookie, host)
        await self.context.persist_cookies()

    async def _read_body(self, response: httpx.Response) -> str:
        encoding = response.headers.get("content-encoding", "").strip().lower()

        if encoding in ("gzip", "deflate"):
            compressed = bytearray()
            async for chunk in response.aiter_raw():
                compressed.extend(chunk)
            logger.debug(f"[HTTP] Decompressing {len(compressed)} bytes of {encoding} content")
            return self._decompress(bytes(compressed), encoding).decode("utf-8", errors="replace")

        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        parts = []
        async for chunk in response.aiter_raw():
            parts.append(decoder.decode(chunk))
        parts.append(decoder.decode(b"", final=True))
        return "".join(parts)

    @staticmethod
    def _decompress(data: bytes, encoding: str) -> bytes:
        if not data:
            return b""

        try:
            if encoding == "gzip":
                return gzip.decompress(data)
            try:
                return zlib.decompress(data)
            except zlib.error:
                # Some servers send raw deflate without the zlib wrapper
                logger.debug("zlib-wrapped inflate failed, retrying as raw deflate")
                return zlib.decompress(data, -zlib.MAX_WBITS)
        except (OSError, EOFError, zlib.error) as e:
            raise TransportError(f"Failed to decompress {encoding} response body: {e}") from e
