"""Local HTTP API exposing the client to editor integrations."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from litestar import Litestar, Request, Response
from litestar.datastructures import State
from litestar.di import Provide
from litestar.status_codes import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_502_BAD_GATEWAY,
)
from loguru import logger

from api.dependencies import provide_client
from api.routes import AuthController, ProblemController, SubmissionController
from application.client import OpenJudgeClient
from domain.exceptions import AuthError, OpenJudgeError, TransportError
from infrastructure.config import configure_logging, load_settings


def handle_openjudge_error(request: Request, exc: OpenJudgeError) -> Response:
    if isinstance(exc, TransportError):
        status_code = HTTP_502_BAD_GATEWAY
    elif isinstance(exc, AuthError):
        status_code = HTTP_401_UNAUTHORIZED
    else:
        status_code = HTTP_400_BAD_REQUEST

    logger.warning(f"{request.method} {request.url.path} failed: {exc}")
    return Response(content={"detail": str(exc)}, status_code=status_code)


def create_app(client: OpenJudgeClient | None = None) -> Litestar:
    """
    Build the API application.

    Args:
        client: Client to serve; when omitted one is created from the
            environment on startup and closed on shutdown
    """

    @asynccontextmanager
    async def client_lifespan(app: Litestar) -> AsyncGenerator[None, None]:
        if client is not None:
            yield
            return

        settings = load_settings()
        configure_logging(settings.log_level)
        owned = OpenJudgeClient(settings)
        app.state.client = owned
        await owned.initialize()
        try:
            yield
        finally:
            await owned.aclose()

    return Litestar(
        route_handlers=[AuthController, ProblemController, SubmissionController],
        dependencies={"client": Provide(provide_client, sync_to_thread=False)},
        exception_handlers={OpenJudgeError: handle_openjudge_error},
        lifespan=[client_lifespan],
        state=State({"client": client}),
    )
