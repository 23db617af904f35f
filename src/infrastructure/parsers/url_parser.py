"""URL building and parsing for OpenJudge pages and endpoints."""

import re
from urllib.parse import urljoin, urlparse

from loguru import logger

from domain.exceptions import OpenJudgeError
from domain.models import Problem


class URLParsingError(OpenJudgeError, ValueError):
    """Invalid URL format or unable to parse URL."""

    pass


class URLParser:
    """Builds OpenJudge URLs; every group lives on its own subdomain."""

    # Matches http://<group>.openjudge.cn/<practice>/<problem>/
    PROBLEM_PATTERN = r"^https?://([^./]+)\.{domain}/([^/]+)/([^/]+)/?$"

    def __init__(self, domain: str = "openjudge.cn", scheme: str = "http"):
        self.domain = domain
        self.scheme = scheme

    def host(self, group: str | None = None) -> str:
        return f"{group}.{self.domain}" if group else self.domain

    def build_home_url(self, group: str | None = None) -> str:
        return f"{self.scheme}://{self.host(group)}/"

    def build_group_url(self, group: str) -> str:
        return self.build_home_url(group)

    def build_practice_url(self, group: str, practice_id: str) -> str:
        return f"{self.build_home_url(group)}{practice_id}/"

    def build_problem_url(self, group: str, practice_id: str, problem_id: str) -> str:
        return f"{self.build_practice_url(group, practice_id)}{problem_id}/"

    def build_submit_page_url(self, problem: Problem) -> str:
        return f"{self.build_problem_url(problem.group, problem.practice_id, problem.id)}submit/"

    def build_submit_referer(self, group: str, contest_id: str, problem_number: str) -> str:
        return f"{self.build_home_url(group)}{contest_id}/{problem_number}/submit/"

    def build_submit_api_url(self, group: str) -> str:
        return f"{self.build_home_url(group)}api/solution/submitv2/"

    def build_login_url(self) -> str:
        return f"{self.build_home_url()}api/auth/login/"

    def build_login_page_url(self) -> str:
        return f"{self.build_home_url()}auth/login/"

    def build_language_switch_url(self, group: str | None = None) -> str:
        return f"{self.build_home_url(group)}api/language/switch/"

    def origin(self, group: str | None = None) -> str:
        return f"{self.scheme}://{self.host(group)}"

    def resolve(self, target: str, group: str | None = None) -> str:
        """Make a possibly relative redirect target absolute."""
        if urlparse(target).scheme:
            return target
        return urljoin(self.build_home_url(group), target)

    @staticmethod
    def parse_submission_id(target: str) -> str:
        """
        Extract the submission id from a status page URL.

        The id is the last non-empty path segment, e.g. ``/solution/12345/``.
        """
        segments = [segment for segment in urlparse(target).path.split("/") if segment]
        if not segments:
            raise URLParsingError(f"Unable to extract submission id from: {target}")
        return segments[-1]

    def parse_problem_url(self, url: str) -> tuple[str, str, str]:
        """
        Split a problem URL into ``(group, practice_id, problem_id)``.
        """
        pattern = self.PROBLEM_PATTERN.format(domain=re.escape(self.domain))
        match = re.match(pattern, url)
        if not match:
            raise URLParsingError(
                f"Unrecognized OpenJudge problem URL: {url}. "
                f"Expected format: {self.scheme}://<group>.{self.domain}/<practice>/<problem>/"
            )

        group, practice_id, problem_id = match.groups()
        logger.debug(f"Parsed URL to problem: {group}/{practice_id}/{problem_id}")
        return group, practice_id, problem_id
