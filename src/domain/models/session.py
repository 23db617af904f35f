"""Value objects for the authenticated session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

SESSION_COOKIE = "PHPSESSID"
LOCALE_COOKIE = "language"
DEFAULT_LOCALE = "zh_CN"
SUPPORTED_LOCALES = ("zh_CN", "en_US")


@dataclass
class CookieRecord:
    """A single cookie held by the jar."""

    name: str
    value: str
    domain: str
    path: str = "/"

    def to_dict(self) -> dict[str, str]:
        return {"value": self.value, "domain": self.domain, "path": self.path}


@dataclass(frozen=True)
class Session:
    """Current authenticated session."""

    session_id: str
    locale: str = DEFAULT_LOCALE

    def __str__(self) -> str:
        return f"{self.session_id[:8]}... ({self.locale})"

    def to_dict(self) -> dict[str, Any]:
        return {"sessionId": self.session_id, "locale": self.locale}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Session | None:
        session_id = data.get("sessionId")
        if not session_id:
            return None
        return cls(session_id=session_id, locale=data.get("locale") or DEFAULT_LOCALE)


@dataclass(frozen=True)
class Credentials:
    """Saved login credentials used for automatic login."""

    email: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(email={self.email!r}, password='***')"

    def to_dict(self) -> dict[str, str]:
        return {"email": self.email, "password": self.password}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Credentials | None:
        email = data.get("email")
        password = data.get("password")
        if not email or not password:
            return None
        return cls(email=email, password=password)
