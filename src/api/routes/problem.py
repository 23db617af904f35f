"""API routes for practices, problem lists and problem statements."""

from dataclasses import asdict

from litestar import Controller, get
from litestar.exceptions import NotFoundException
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from api.schemas.problem import PracticeResponse, ProblemDetailResponse, ProblemResponse
from application.client import OpenJudgeClient


class ProblemController(Controller):
    """Controller for browsing a group's practices and problems."""

    path = "/groups"

    @get("/", status_code=HTTP_200_OK)
    async def list_groups(self, client: OpenJudgeClient) -> list[str]:
        """Get the groups configured for browsing."""
        return list(client.settings.groups)

    @get("/{group:str}/practices", status_code=HTTP_200_OK)
    async def list_practices(self, group: str, client: OpenJudgeClient) -> list[PracticeResponse]:
        """
        Get practices and contests of a group.

        Path parameters:
        - group: Group subdomain (e.g., "python")
        """
        logger.debug(f"API request for practices: group={group}")
        practices = await client.fetch_practice_list(group)
        return [
            PracticeResponse(**{**asdict(practice), "kind": practice.kind.value})
            for practice in practices
        ]

    @get("/{group:str}/practices/{practice_id:str}/problems", status_code=HTTP_200_OK)
    async def list_problems(
        self, group: str, practice_id: str, client: OpenJudgeClient
    ) -> list[ProblemResponse]:
        logger.debug(f"API request for problems: group={group}, practice={practice_id}")
        problems = await client.fetch_problem_list(practice_id, group)
        return [ProblemResponse.model_validate(problem) for problem in problems]

    @get("/{group:str}/practices/{practice_id:str}/problems/{problem_id:str}", status_code=HTTP_200_OK)
    async def get_problem(
        self, group: str, practice_id: str, problem_id: str, client: OpenJudgeClient
    ) -> ProblemDetailResponse:
        """
        Get the statement of a problem.

        Path parameters:
        - group: Group subdomain
        - practice_id: Practice or contest id
        - problem_id: Problem number within the practice
        """
        logger.debug(f"API request for problem: {group}/{practice_id}/{problem_id}")
        problem = await client.problem_service.find_problem(problem_id, practice_id, group)
        if problem is None:
            raise NotFoundException(f"Problem {problem_id} not found in {group}/{practice_id}")

        detail = await client.fetch_problem_detail(problem)
        return ProblemDetailResponse.model_validate(detail)
