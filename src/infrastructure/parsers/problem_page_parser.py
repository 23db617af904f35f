"""Parser for problem statement pages."""

import re

from loguru import logger

from domain.models import ProblemDetail

from .fields import collect_definitions, first_value, make_soup, text_of

TITLE_PREFIX = re.compile(r"^\d+:")


class ProblemPageParser:
    """Extracts the statement, limits and samples from a problem page."""

    def parse_problem_detail(self, html: str, problem_id: str) -> ProblemDetail:
        """
        Parse problem page and extract data.

        Labels are rendered in the interface language, so every field is
        looked up under the Chinese label first and the English one second.
        """
        soup = make_soup(html)

        title = TITLE_PREFIX.sub("", text_of(soup.select_one("#pageTitle h2"))).strip()
        params = collect_definitions(soup, "dl.problem-params")
        content = collect_definitions(soup, "dl.problem-content", markup=True)
        global_id = text_of(soup.select_one(".problem-statistics dl dd")) or None

        if not content:
            logger.warning(f"No problem content found for problem {problem_id}")

        return ProblemDetail(
            id=problem_id,
            title=title,
            time_limit=first_value(params, "总时间限制", "Time Limit", default="N/A"),
            memory_limit=first_value(params, "内存限制", "Memory Limit", default="N/A"),
            description=first_value(content, "描述", "Description", default=""),
            input=first_value(content, "输入", "Input", default=""),
            output=first_value(content, "输出", "Output", default=""),
            sample_input=first_value(content, "样例输入", "Sample Input", default=""),
            sample_output=first_value(content, "样例输出", "Sample Output", default=""),
            hint=first_value(content, "提示", "Hint"),
            source=first_value(content, "来源", "Source"),
            global_id=global_id,
        )


def parse_problem_detail(html: str, problem_id: str) -> ProblemDetail:
    """Convenience function to parse a problem page."""
    return ProblemPageParser().parse_problem_detail(html, problem_id)
