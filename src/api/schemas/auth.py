"""Pydantic schemas for authentication endpoints."""

from pydantic import BaseModel, field_validator

from domain.models.session import SUPPORTED_LOCALES


def _check_locale(value: str | None) -> str | None:
    if value is not None and value not in SUPPORTED_LOCALES:
        raise ValueError(f"Unsupported locale {value!r}, expected one of {', '.join(SUPPORTED_LOCALES)}")
    return value


class LoginRequest(BaseModel):
    """Credentials; both may be omitted to reuse the saved ones."""

    email: str | None = None
    password: str | None = None


class CookieLoginRequest(BaseModel):
    """Cookie string copied from a logged-in browser."""

    cookie: str
    locale: str | None = None

    @field_validator("locale")
    @classmethod
    def check_locale(cls, value: str | None) -> str | None:
        return _check_locale(value)


class LanguageRequest(BaseModel):
    locale: str
    group: str | None = None

    @field_validator("locale")
    @classmethod
    def check_locale(cls, value: str | None) -> str | None:
        return _check_locale(value)


class AuthResponse(BaseModel):
    result: str
    message: str
    hint: str | None = None

    class Config:
        from_attributes = True


class SessionResponse(BaseModel):
    logged_in: bool
    locale: str | None = None
