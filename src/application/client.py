"""Presentation-facing client coordinating session, catalog and submission flows."""

import asyncio

import httpx
from loguru import logger

from domain.exceptions import OpenJudgeError
from domain.models import (
    AuthResult,
    PollOutcome,
    Practice,
    Problem,
    ProblemDetail,
    Session,
    SubmissionStatus,
    SubmitResponse,
)
from infrastructure.config import Settings
from infrastructure.http_client import AsyncHTTPClient
from infrastructure.session_context import SessionContext
from infrastructure.session_store import JsonFileSessionStore, SessionStore
from services import create_auth_service, create_problem_service, create_submission_service
from services.submission import StatusCallback


class OpenJudgeClient:
    """
    Entry point used by editor integrations.

    Authentication and submission failures are returned as ``AuthResult`` /
    ``SubmitResponse`` values with a readable message; page fetches raise
    ``OpenJudgeError`` subclasses.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        store: SessionStore | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize client with dependency injection.

        Args:
            settings: Client settings (defaults apply when omitted)
            store: Persistence for session state (a JSON file by default)
            transport: Optional httpx transport (used by tests)
        """
        self.settings = settings or Settings()
        self.context = SessionContext(
            store=store or JsonFileSessionStore(self.settings.state_file),
            domain=self.settings.domain,
        )
        self.http_client = AsyncHTTPClient(
            self.context,
            max_connections=self.settings.max_connections,
            keepalive_expiry=self.settings.keepalive_expiry,
            timeout=self.settings.timeout,
            transport=transport,
        )
        self.auth_service = create_auth_service(self.http_client, self.context, self.settings)
        self.problem_service = create_problem_service(self.http_client, self.settings)
        self.submission_service = create_submission_service(self.http_client, self.settings)

    async def __aenter__(self) -> "OpenJudgeClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.http_client.aclose()

    @property
    def session(self) -> Session | None:
        return self.context.session

    @property
    def is_logged_in(self) -> bool:
        return self.context.is_logged_in

    async def initialize(self) -> bool:
        """Restore the saved session or log in with saved credentials."""
        logged_in = await self.auth_service.auto_login()
        if not logged_in:
            logger.info("Not logged in")
        return logged_in

    async def login(self, email: str | None = None, password: str | None = None) -> AuthResult:
        try:
            return await self.auth_service.login(email, password)
        except OpenJudgeError as e:
            logger.error(f"Login failed: {e}")
            return AuthResult(result="ERROR", message=f"Login failed: {e}")

    async def login_with_cookie_string(self, raw: str, locale: str | None = None) -> AuthResult:
        try:
            return await self.auth_service.login_with_cookie_string(raw, locale)
        except OpenJudgeError as e:
            logger.error(f"Cookie login failed: {e}")
            return AuthResult(result="ERROR", message=f"Login failed: {e}")

    async def logout(self) -> None:
        await self.auth_service.clear_session()

    async def switch_language(self, locale: str, group: str | None = None) -> None:
        await self.auth_service.switch_language(locale, group)

    async def fetch_practice_list(self, group: str) -> list[Practice]:
        return await self.problem_service.fetch_practice_list(group)

    async def fetch_problem_list(self, practice_id: str, group: str) -> list[Problem]:
        return await self.problem_service.fetch_problem_list(practice_id, group)

    async def fetch_problem_detail(self, problem: Problem) -> ProblemDetail:
        return await self.problem_service.fetch_problem_detail(problem)

    async def submit(self, problem: Problem, source_text: str, language: str) -> SubmitResponse:
        try:
            return await self.submission_service.submit(problem, source_text, language)
        except OpenJudgeError as e:
            logger.error(f"Submit failed for {problem}: {e}")
            return SubmitResponse(result="ERROR", message=str(e))

    async def fetch_submission_status(
        self, redirect: str, group: str | None = None
    ) -> SubmissionStatus:
        return await self.submission_service.fetch_status(redirect, group)

    async def poll_submission(
        self,
        redirect: str,
        on_update: StatusCallback | None = None,
        cancel_event: asyncio.Event | None = None,
        group: str | None = None,
    ) -> PollOutcome:
        try:
            return await self.submission_service.poll_submission(
                redirect, on_update, cancel_event, group=group
            )
        except OpenJudgeError as e:
            logger.error(f"Polling {redirect} failed: {e}")
            return PollOutcome(state="failed", message=str(e))
