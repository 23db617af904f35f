"""API routes for submitting solutions and reading their status."""

from litestar import Controller, get, post
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from api.schemas.submission import (
    SubmissionStatusResponse,
    SubmitResultResponse,
    SubmitSolutionRequest,
)
from application.client import OpenJudgeClient
from domain.models import Problem, SubmissionStatus
from services.submission import resolve_language


def _status_response(status: SubmissionStatus) -> SubmissionStatusResponse:
    return SubmissionStatusResponse(
        id=status.id,
        problem_id=status.problem_id,
        status=status.status.value,
        status_text=status.status_text,
        is_terminal=status.is_terminal,
        language=status.language,
        memory=status.memory,
        time=status.time,
        submit_time=status.submit_time,
        submitter=status.submitter,
        code=status.code,
        error_message=status.error_message,
    )


class SubmissionController(Controller):
    """Controller for submissions."""

    path = "/submissions"

    @post("/", status_code=HTTP_200_OK)
    async def submit(self, data: SubmitSolutionRequest, client: OpenJudgeClient) -> SubmitResultResponse:
        """
        Submit a solution.

        The judge language is ``language`` when given, otherwise it is derived
        from ``language_id`` and the preferred language setting.
        """
        url_parser = client.problem_service.url_parser
        problem = Problem(
            id=data.problem_id,
            title=data.problem_id,
            practice_id=data.practice_id,
            group=data.group,
            url=url_parser.build_problem_url(data.group, data.practice_id, data.problem_id),
            contest_id=data.contest_id,
        )
        language = data.language or resolve_language(
            data.language_id, client.settings.preferred_language
        )

        logger.debug(f"API request to submit {problem} in {language}")
        result = await client.submit(problem, data.source, language)
        return SubmitResultResponse.model_validate(result)

    @get("/status", status_code=HTTP_200_OK)
    async def get_status(
        self, redirect: str, client: OpenJudgeClient, group: str | None = None
    ) -> SubmissionStatusResponse:
        """
        Fetch a submission's status once.

        Query parameters:
        - redirect: Status page URL returned by the submit endpoint
        - group: Group used to resolve a relative redirect
        """
        status = await client.fetch_submission_status(redirect, group)
        return _status_response(status)
