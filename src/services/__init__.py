from infrastructure.config import Settings
from infrastructure.http_client import AsyncHTTPClient
from infrastructure.parsers import URLParser
from infrastructure.session_context import SessionContext
from services.auth import AuthService
from services.problem import ProblemService
from services.submission import SubmissionService


def create_auth_service(
    http_client: AsyncHTTPClient, context: SessionContext, settings: Settings
) -> AuthService:
    """Factory function to create auth service with all dependencies."""
    return AuthService(
        http_client=http_client,
        context=context,
        url_parser=URLParser(domain=settings.domain, scheme=settings.scheme),
        interface_language=settings.interface_language,
    )


def create_problem_service(http_client: AsyncHTTPClient, settings: Settings) -> ProblemService:
    """Factory function to create problem service with all dependencies."""
    return ProblemService(
        http_client=http_client,
        url_parser=URLParser(domain=settings.domain, scheme=settings.scheme),
    )


def create_submission_service(
    http_client: AsyncHTTPClient, settings: Settings
) -> SubmissionService:
    """Factory function to create submission service with all dependencies."""
    return SubmissionService(
        http_client=http_client,
        url_parser=URLParser(domain=settings.domain, scheme=settings.scheme),
        poll_interval=settings.poll_interval,
        max_poll_attempts=settings.max_poll_attempts,
    )


__all__ = [
    "AuthService",
    "ProblemService",
    "SubmissionService",
    "create_auth_service",
    "create_problem_service",
    "create_submission_service",
]
