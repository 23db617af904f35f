"""Service for fetching practices, problem lists and problem statements."""

from loguru import logger

from domain.models import Practice, Problem, ProblemDetail
from infrastructure.parsers import (
    HTTPClientProtocol,
    PracticePageParser,
    ProblemListParser,
    ProblemPageParser,
    URLParser,
)


class ProblemService:
    """Fetches listing and statement pages and parses them into records."""

    def __init__(self, *, http_client: HTTPClientProtocol, url_parser: URLParser | None = None):
        """Initialize service with dependencies."""
        self.http_client = http_client
        self.url_parser = url_parser or URLParser()
        self.practice_parser = PracticePageParser(self.url_parser)
        self.problem_list_parser = ProblemListParser(self.url_parser)
        self.problem_page_parser = ProblemPageParser()

    async def fetch_practice_list(self, group: str) -> list[Practice]:
        """Get practices and contests of a group."""
        logger.debug(f"Fetching practice list for group: {group}")
        html = await self.http_client.get_text(self.url_parser.build_group_url(group))
        practices = self.practice_parser.parse_practice_list(html, group)
        logger.info(f"Found {len(practices)} practices/contests in group {group}")
        return practices

    async def fetch_problem_list(self, practice_id: str, group: str) -> list[Problem]:
        """Get problems of a practice or contest."""
        url = self.url_parser.build_practice_url(group, practice_id)
        logger.debug(f"Fetching problem list: {url}")
        html = await self.http_client.get_text(url)
        problems = self.problem_list_parser.parse_problem_list(html, practice_id, group)
        logger.info(f"Found {len(problems)} problems in {group}/{practice_id}")
        return problems

    async def fetch_problem_detail(self, problem: Problem) -> ProblemDetail:
        """Get the statement of a problem."""
        logger.debug(f"Fetching problem detail: {problem.url}")
        html = await self.http_client.get_text(problem.url)
        return self.problem_page_parser.parse_problem_detail(html, problem.id)

    async def find_problem(self, problem_id: str, practice_id: str, group: str) -> Problem | None:
        """Look a problem up by id in its practice's problem list."""
        problems = await self.fetch_problem_list(practice_id, group)
        return next((problem for problem in problems if problem.id == problem_id), None)
