"""Service for logging in, switching language and logging out."""

import json
from urllib.parse import quote

from loguru import logger

from domain.exceptions import AuthError, MissingSessionCookieError, OpenJudgeError, TransportError
from domain.models import AuthResult, Credentials, Session
from domain.models.session import DEFAULT_LOCALE, LOCALE_COOKIE, SESSION_COOKIE
from infrastructure.http_client import ajax_headers
from infrastructure.parsers import HTTPClientProtocol, URLParser
from infrastructure.session_context import SessionContext

DEFAULT_LOGIN_HINT = "Credentials saved; the next start will log in automatically"


def parse_cookie_string(raw: str) -> dict[str, str]:
    """
    Split a browser ``Cookie`` header into name/value pairs.

    Values may themselves contain ``=``, so each pair is split on its first
    ``=`` only.
    """
    cookies: dict[str, str] = {}
    for chunk in raw.split(";"):
        name, sep, value = chunk.strip().partition("=")
        if name.strip() and sep:
            cookies[name.strip()] = value.strip()
    return cookies


class AuthService:
    """Establishes and tears down the authenticated session."""

    def __init__(
        self,
        *,
        http_client: HTTPClientProtocol,
        context: SessionContext,
        url_parser: URLParser | None = None,
        interface_language: str | None = None,
    ):
        """Initialize service with dependencies."""
        self.http_client = http_client
        self.context = context
        self.url_parser = url_parser or URLParser(domain=context.domain)
        self.interface_language = interface_language

    @property
    def session(self) -> Session | None:
        return self.context.session

    @property
    def is_logged_in(self) -> bool:
        return self.context.is_logged_in

    async def restore(self) -> bool:
        """Load the persisted session, if any."""
        return await self.context.restore()

    async def login(self, email: str | None = None, password: str | None = None) -> AuthResult:
        """
        Log in with email and password.

        Missing credentials are taken from the saved ones.

        Raises:
            AuthError: If no credentials are available or the site rejects them
            MissingSessionCookieError: If the site reports success without a session cookie
            TransportError: On network failure
        """
        if not email or not password:
            saved = await self.context.load_credentials()
            if saved is None:
                raise AuthError("No credentials provided and none saved")
            logger.info(f"Using saved credentials for: {saved.email}")
            email, password = saved.email, saved.password

        logger.info(f"Attempting login for: {email}")

        logger.debug("Step 1: Getting initial cookie from home page")
        await self.http_client.get_text(self.url_parser.build_home_url())

        logger.debug("Step 2: Posting credentials")
        response = await self.http_client.post_form(
            self.url_parser.build_login_url(),
            {
                "redirectUrl": quote(self.url_parser.build_home_url(), safe=""),
                "email": email,
                "password": password,
            },
            headers=ajax_headers(
                origin=self.url_parser.origin(),
                referer=self.url_parser.build_login_page_url(),
            ),
        )

        try:
            result = json.loads(response.body)
        except ValueError as e:
            raise AuthError(f"Unexpected login response: {response.body[:200]}") from e
        if not isinstance(result, dict):
            raise AuthError(f"Unexpected login response: {response.body[:200]}")

        if result.get("result") != "SUCCESS":
            message = result.get("message") or "Login failed"
            logger.warning(f"Login rejected: {message}")
            raise AuthError(message)

        logger.debug("Step 3: Reading session cookie")
        session_id = self.context.cookie_jar.get(SESSION_COOKIE)
        if not session_id:
            raise MissingSessionCookieError()

        locale = self.context.cookie_jar.get(LOCALE_COOKIE) or DEFAULT_LOCALE
        self.context.session = Session(session_id=session_id, locale=locale)

        await self.context.persist_session()
        await self.context.persist_cookies()
        await self.context.save_credentials(Credentials(email=email, password=password))

        logger.info(f"Login successful, session saved: {self.context.session}")
        return AuthResult(
            result="SUCCESS",
            message="Login successful",
            hint=result.get("hint") or DEFAULT_LOGIN_HINT,
        )

    async def login_with_cookie_string(self, raw: str, locale: str | None = None) -> AuthResult:
        """
        Establish a session from a cookie string copied out of a browser.

        Only ``PHPSESSID`` and ``language`` are kept; every other cookie held
        before is discarded.

        Raises:
            AuthError: If the string carries no ``PHPSESSID``
        """
        cookies = parse_cookie_string(raw or "")
        session_id = cookies.get(SESSION_COOKIE)
        if not session_id:
            raise AuthError(f"No {SESSION_COOKIE} found in cookie string")

        locale = locale or self.interface_language or cookies.get(LOCALE_COOKIE) or DEFAULT_LOCALE
        session = Session(session_id=session_id, locale=locale)

        self.context.session = session
        self.context.cookie_jar.clear()
        self.context.seed_session_cookies(session)
        await self.context.persist_session()
        await self.context.persist_cookies()

        logger.info(f"Session saved from cookie string: {session}")

        try:
            await self.http_client.get_text(self.url_parser.build_home_url())
        except OpenJudgeError as e:
            logger.warning(f"Failed to verify session: {e}")
            return AuthResult(result="SUCCESS", message="Login successful", hint="Cookie saved (not verified)")

        return AuthResult(result="SUCCESS", message="Login successful", hint="Cookie saved and verified")

    async def switch_language(self, locale: str, group: str | None = None) -> None:
        """Switch the interface language; failures are logged, not raised."""
        try:
            await self.http_client.post_form(
                self.url_parser.build_language_switch_url(group),
                {"language": locale},
                headers=ajax_headers(),
            )
        except TransportError as e:
            logger.warning(f"Failed to switch language to {locale}: {e}")
            return

        if self.context.session is None:
            return

        self.context.session = Session(session_id=self.context.session.session_id, locale=locale)
        self.context.cookie_jar.set(LOCALE_COOKIE, locale, self.context.domain)
        await self.context.persist_session()
        await self.context.persist_cookies()
        logger.info(f"Interface language switched to {locale}")

    async def auto_login(self) -> bool:
        """
        Restore the saved session, or log in with saved credentials.

        Returns:
            Whether a session is active afterwards
        """
        if await self.restore():
            return True

        if await self.context.load_credentials() is None:
            return False

        logger.info("Attempting auto-login with saved credentials")
        try:
            await self.login()
        except OpenJudgeError as e:
            logger.warning(f"Auto-login failed: {e}")
            return False

        if self.interface_language:
            await self.switch_language(self.interface_language)
        return True

    async def clear_session(self) -> None:
        """Log out: drop the session, the cookies and the saved credentials."""
        await self.context.reset()
        logger.info("Session and credentials cleared")
