"""Explicitly owned session state shared by the HTTP client and the auth flow."""

from dataclasses import dataclass, field

from loguru import logger

from domain.models.session import LOCALE_COOKIE, SESSION_COOKIE, Credentials, Session

from .cookie_jar import CookieJar
from .session_store import (
    COOKIE_JAR_KEY,
    CREDENTIALS_KEY,
    PERSISTED_KEYS,
    SESSION_KEY,
    SessionStore,
)


@dataclass
class SessionContext:
    """Cookie jar, current session and the store they are persisted to."""

    store: SessionStore
    domain: str = "openjudge.cn"
    cookie_jar: CookieJar = field(default_factory=CookieJar)
    session: Session | None = None

    @property
    def is_logged_in(self) -> bool:
        return self.session is not None

    def seed_session_cookies(self, session: Session) -> None:
        """Mirror a session into the jar as its two cookies."""
        self.cookie_jar.set(SESSION_COOKIE, session.session_id, self.domain)
        self.cookie_jar.set(LOCALE_COOKIE, session.locale, self.domain)

    async def persist_cookies(self) -> None:
        await self.store.set(COOKIE_JAR_KEY, self.cookie_jar.export())

    async def persist_session(self) -> None:
        if self.session is None:
            await self.store.delete(SESSION_KEY)
        else:
            await self.store.set(SESSION_KEY, self.session.to_dict())

    async def save_credentials(self, credentials: Credentials) -> None:
        await self.store.set(CREDENTIALS_KEY, credentials.to_dict())

    async def load_credentials(self) -> Credentials | None:
        data = await self.store.get(CREDENTIALS_KEY)
        return Credentials.from_dict(data) if isinstance(data, dict) else None

    async def restore(self) -> bool:
        """
        Load the persisted session and cookie jar.

        Returns:
            True when a session was restored
        """
        data = await self.store.get(SESSION_KEY)
        session = Session.from_dict(data) if isinstance(data, dict) else None
        if session is None:
            logger.debug("No saved session found")
            return False

        self.session = session
        self.seed_session_cookies(session)

        saved_jar = await self.store.get(COOKIE_JAR_KEY)
        if saved_jar:
            self.cookie_jar.import_(saved_jar)
            logger.debug(f"Cookie jar loaded, cookies: {len(saved_jar)}")

        logger.info(f"Session restored: {session}")
        return True

    async def reset(self) -> None:
        """Forget the session and erase every persisted key."""
        self.session = None
        self.cookie_jar.clear()
        for key in PERSISTED_KEYS:
            await self.store.delete(key)
