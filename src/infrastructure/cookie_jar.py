"""In-memory cookie jar for the single target site."""

from collections.abc import Iterable
from typing import Any

from loguru import logger

from domain.models.session import CookieRecord

ExportedCookies = list[list[Any]]


class CookieJar:
    """
    Cookies keyed by name.

    One jar is used per process against a single site, so cookies are not
    domain-qualified: a later cookie with the same name replaces the earlier one.
    """

    def __init__(self) -> None:
        self._cookies: dict[str, CookieRecord] = {}

    def __len__(self) -> int:
        return len(self._cookies)

    def __contains__(self, name: str) -> bool:
        return name in self._cookies

    def set_from_header(self, set_cookie: str | Iterable[str], domain: str) -> None:
        """
        Store cookies from one or more Set-Cookie header values.

        Args:
            set_cookie: A single header value or a list of them
            domain: Host of the response, used when no Domain attribute is given
        """
        headers = [set_cookie] if isinstance(set_cookie, str) else list(set_cookie)

        for header in headers:
            parts = [part.strip() for part in header.split(";")]
            name, sep, value = parts[0].partition("=")
            name = name.strip()
            if not name or not sep:
                logger.debug(f"Ignoring malformed Set-Cookie value: {parts[0]!r}")
                continue

            cookie_path = "/"
            cookie_domain = domain
            for part in parts[1:]:
                lowered = part.lower()
                if lowered.startswith("path="):
                    cookie_path = part[5:]
                elif lowered.startswith("domain="):
                    cookie_domain = part[7:]

            self._cookies[name] = CookieRecord(
                name=name, value=value.strip(), domain=cookie_domain, path=cookie_path
            )
            logger.debug(f"Stored cookie {name} for {cookie_domain}")

    def header_for(self, domain: str) -> str:
        """Render the Cookie header for a host."""
        return "; ".join(
            f"{name}={cookie.value}"
            for name, cookie in self._cookies.items()
            if cookie.domain in domain or domain in cookie.domain
        )

    def set(self, name: str, value: str, domain: str, path: str = "/") -> None:
        self._cookies[name] = CookieRecord(name=name, value=value, domain=domain, path=path)

    def get(self, name: str) -> str | None:
        cookie = self._cookies.get(name)
        return cookie.value if cookie else None

    def clear(self) -> None:
        self._cookies.clear()

    def export(self) -> ExportedCookies:
        """Snapshot as an ordered list of ``[name, {value, domain, path}]`` pairs."""
        return [[name, cookie.to_dict()] for name, cookie in self._cookies.items()]

    def import_(self, data: Iterable[Any]) -> None:
        """Replace the jar contents with a snapshot produced by :meth:`export`."""
        cookies: dict[str, CookieRecord] = {}
        for name, record in data:
            cookies[name] = CookieRecord(
                name=name,
                value=record.get("value", ""),
                domain=record.get("domain", ""),
                path=record.get("path", "/"),
            )
        self._cookies = cookies
