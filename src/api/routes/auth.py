"""API routes for the authenticated session."""

from litestar import Controller, get, post
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from api.schemas.auth import (
    AuthResponse,
    CookieLoginRequest,
    LanguageRequest,
    LoginRequest,
    SessionResponse,
)
from application.client import OpenJudgeClient


class AuthController(Controller):
    """Controller for login, logout and interface language."""

    path = "/auth"

    @get("/session", status_code=HTTP_200_OK)
    async def get_session(self, client: OpenJudgeClient) -> SessionResponse:
        session = client.session
        return SessionResponse(logged_in=session is not None, locale=session.locale if session else None)

    @post("/login", status_code=HTTP_200_OK)
    async def login(self, data: LoginRequest, client: OpenJudgeClient) -> AuthResponse:
        """
        Log in with email and password.

        Omitted credentials fall back to the saved ones.
        """
        logger.debug("API request for password login")
        result = await client.login(data.email, data.password)
        return AuthResponse.model_validate(result)

    @post("/cookie", status_code=HTTP_200_OK)
    async def login_with_cookie(self, data: CookieLoginRequest, client: OpenJudgeClient) -> AuthResponse:
        logger.debug("API request for cookie login")
        result = await client.login_with_cookie_string(data.cookie, data.locale)
        return AuthResponse.model_validate(result)

    @post("/logout", status_code=HTTP_200_OK)
    async def logout(self, client: OpenJudgeClient) -> SessionResponse:
        await client.logout()
        return SessionResponse(logged_in=False)

    @post("/language", status_code=HTTP_200_OK)
    async def switch_language(self, data: LanguageRequest, client: OpenJudgeClient) -> SessionResponse:
        await client.switch_language(data.locale, data.group)
        session = client.session
        return SessionResponse(logged_in=session is not None, locale=session.locale if session else None)
