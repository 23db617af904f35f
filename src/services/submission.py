"""Service for submitting solutions and following their judging status."""

import asyncio
import base64
import inspect
import json
from collections.abc import Awaitable, Callable
from dataclasses import replace

from loguru import logger

from domain.exceptions import ContestIdNotFoundError, SubmissionError
from domain.models import PollOutcome, Problem, SubmissionStatus, SubmitRequest, SubmitResponse
from infrastructure.http_client import ajax_headers
from infrastructure.parsers import (
    HTTPClientProtocol,
    SubmissionPageParser,
    URLParser,
    extract_contest_id,
)

DEFAULT_LANGUAGE = "Python3"

EDITOR_LANGUAGES = {
    "python": "Python3",
    "cpp": "C++",
    "c": "C",
    "java": "Java",
}

StatusCallback = Callable[[SubmissionStatus], Awaitable[None] | None]


def resolve_language(language_id: str | None, preferred: str | None = None) -> str:
    """Map an editor language id to the judge's language name."""
    if language_id and language_id in EDITOR_LANGUAGES:
        return EDITOR_LANGUAGES[language_id]
    return preferred or DEFAULT_LANGUAGE


def encode_source(source_text: str) -> str:
    return base64.b64encode(source_text.encode("utf-8")).decode("ascii")


class SubmissionService:
    """Submits solutions and polls their status page."""

    def __init__(
        self,
        *,
        http_client: HTTPClientProtocol,
        url_parser: URLParser | None = None,
        poll_interval: float = 2.0,
        max_poll_attempts: int = 30,
    ):
        """
        Initialize service.

        Args:
            http_client: HTTP session
            url_parser: URL builder for the target site
            poll_interval: Seconds between two status fetches
            max_poll_attempts: Status fetches before polling gives up
        """
        self.http_client = http_client
        self.url_parser = url_parser or URLParser()
        self.poll_interval = poll_interval
        self.max_poll_attempts = max_poll_attempts
        self.status_parser = SubmissionPageParser()

    async def resolve_contest_id(self, problem: Problem) -> str:
        """
        Return the problem's contest id, reading it from the submit page if needed.

        Raises:
            ContestIdNotFoundError: If neither the problem nor its submit page carries one
        """
        if problem.contest_id:
            return problem.contest_id

        url = self.url_parser.build_submit_page_url(problem)
        logger.debug(f"Fetching contest ID from submit page: {url}")
        html = await self.http_client.get_text(url)

        contest_id = extract_contest_id(html)
        if not contest_id:
            logger.error(f"Failed to extract contest ID from submit page {url}")
            raise ContestIdNotFoundError(problem.id, url)

        logger.debug(f"Extracted contest ID {contest_id} for {problem}")
        return contest_id

    async def submit(self, problem: Problem, source_text: str, language: str) -> SubmitResponse:
        """
        Submit a solution.

        Raises:
            ContestIdNotFoundError: If the contest id cannot be resolved
            SubmissionError: If the endpoint does not answer with JSON
            TransportError: On network failure
        """
        contest_id = await self.resolve_contest_id(problem)
        problem = replace(problem, contest_id=contest_id)

        request = SubmitRequest(
            contest_id=contest_id,
            problem_number=problem.id,
            language=language,
            source=encode_source(source_text),
        )

        logger.info(f"Submitting {problem} in {language} ({len(source_text)} chars)")
        response = await self.http_client.post_form(
            self.url_parser.build_submit_api_url(problem.group),
            request.to_form(),
            headers=ajax_headers(
                origin=self.url_parser.origin(problem.group),
                referer=self.url_parser.build_submit_referer(problem.group, contest_id, problem.id),
            ),
        )

        try:
            data = json.loads(response.body)
        except ValueError as e:
            raise SubmissionError(f"Unexpected submit response: {response.body[:200]}") from e
        if not isinstance(data, dict):
            raise SubmissionError(f"Unexpected submit response: {response.body[:200]}")

        result = SubmitResponse.from_dict(data)
        if result.ok:
            logger.info(f"Submission accepted by server: {result.message} -> {result.redirect}")
        else:
            logger.warning(f"Submission rejected: {result.message}")
        return result

    async def fetch_status(self, redirect: str, group: str | None = None) -> SubmissionStatus:
        """Fetch and parse a submission status page once."""
        url = self.url_parser.resolve(redirect, group)
        submission_id = self.url_parser.parse_submission_id(url)
        html = await self.http_client.get_text(url)
        return self.status_parser.parse_submission_status(submission_id, html)

    async def poll_submission(
        self,
        redirect: str,
        on_update: StatusCallback | None = None,
        cancel_event: asyncio.Event | None = None,
        *,
        group: str | None = None,
        interval: float | None = None,
        max_attempts: int | None = None,
    ) -> PollOutcome:
        """
        Poll a submission's status page until judging finishes.

        Polling stops at the first terminal verdict, after ``max_attempts``
        fetches, or as soon as ``cancel_event`` is set; no request is issued
        after cancellation. Fetch errors propagate to the caller.

        Args:
            redirect: Status page URL returned by the submit endpoint
            on_update: Called with every parsed status (may be a coroutine function)
            cancel_event: Set by the caller to stop polling
            group: Group used to resolve a relative redirect
            interval: Seconds between fetches (defaults to the service setting)
            max_attempts: Fetch ceiling (defaults to the service setting)
        """
        interval = self.poll_interval if interval is None else interval
        max_attempts = self.max_poll_attempts if max_attempts is None else max_attempts
        cancel_event = cancel_event or asyncio.Event()
        outcome = PollOutcome(state="exhausted")

        while not cancel_event.is_set():
            status = await self.fetch_status(redirect, group)
            if cancel_event.is_set():
                break

            outcome.attempts += 1
            outcome.last_status = status
            outcome.history.append(status)

            if on_update is not None:
                result = on_update(status)
                if inspect.isawaitable(result):
                    await result

            if status.is_terminal:
                outcome.state = "terminal"
                outcome.message = status.status.value
                logger.info(f"Submission {status.id} finished: {status.status.value}")
                return outcome

            if outcome.attempts >= max_attempts:
                outcome.message = f"Still {status.status.value.lower()} after {outcome.attempts} checks"
                logger.info(f"Stopped polling submission {status.id}: {outcome.message}")
                return outcome

            try:
                await asyncio.wait_for(cancel_event.wait(), timeout=interval)
            except asyncio.TimeoutError:
                continue

        outcome.state = "cancelled"
        outcome.message = "Polling cancelled"
        logger.debug(f"Polling of {redirect} cancelled after {outcome.attempts} checks")
        return outcome
