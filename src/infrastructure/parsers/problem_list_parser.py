"""Parser for the problem table of a practice or contest page."""

from bs4 import BeautifulSoup, Tag
from loguru import logger

from domain.models import Problem

from .fields import make_soup, text_of, to_int
from .url_parser import URLParser


def extract_contest_id(html: str | BeautifulSoup) -> str | None:
    """Read the hidden ``contestId`` form field, if the page has one."""
    soup = make_soup(html) if isinstance(html, str) else html
    field = soup.select_one('input[name="contestId"]')
    if field is None:
        logger.debug('No input[name="contestId"] found in page')
        return None

    value = field.get("value")
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()


class ProblemListParser:
    """
    Extracts problems from a practice page.

    Two table layouts exist. The semantic one marks cells with
    ``td.problem-id``/``td.title``; older pages only have positional cells.
    The positional layout is tried only when no row matches the semantic one.
    """

    def __init__(self, url_parser: URLParser | None = None):
        self.url_parser = url_parser or URLParser()

    def parse_problem_list(self, html: str, practice_id: str, group: str) -> list[Problem]:
        soup = make_soup(html)
        contest_id = extract_contest_id(soup)
        rows = self._table_rows(soup)

        logger.debug(
            f"Parsing problem list for {group}/{practice_id}: "
            f"{len(rows)} rows, contest id {contest_id or '(not found)'}"
        )

        problems, matched = self._parse_semantic_rows(rows, practice_id, group, contest_id)
        if not matched:
            logger.debug("No semantic rows found, trying positional table layout")
            problems = self._parse_positional_rows(rows, practice_id, group, contest_id)

        logger.debug(f"Total problems found: {len(problems)}")
        return problems

    @staticmethod
    def _table_rows(soup: BeautifulSoup) -> list[Tag]:
        # lxml keeps tbody only where the markup has one, so take every table row
        return soup.select("table tr")

    def _parse_semantic_rows(
        self,
        rows: list[Tag],
        practice_id: str,
        group: str,
        contest_id: str | None,
    ) -> tuple[list[Problem], bool]:
        problems: list[Problem] = []
        matched = False

        for row in rows:
            id_cell = row.select_one("td.problem-id")
            title_cell = row.select_one("td.title")
            if id_cell is None or title_cell is None:
                continue

            matched = True
            problem_id = text_of(id_cell.find("a"))
            title = text_of(title_cell.find("a"))
            if not problem_id or not title:
                continue

            submissions_cell = row.select_one("td.submissions")
            attempt_count = (
                to_int(text_of(submissions_cell.find("a"))) if submissions_cell else None
            )

            problems.append(
                self._build_problem(
                    problem_id, title, practice_id, group, contest_id, attempt_count=attempt_count
                )
            )

        return problems, matched

    def _parse_positional_rows(
        self,
        rows: list[Tag],
        practice_id: str,
        group: str,
        contest_id: str | None,
    ) -> list[Problem]:
        problems: list[Problem] = []

        for index, row in enumerate(rows, start=1):
            if row.parent is not None and row.parent.name == "thead":
                continue

            cells = row.find_all("td")
            if len(cells) < 2:
                continue

            def cell(position: int) -> str | None:
                if position >= len(cells):
                    return None
                return text_of(cells[position].find("a"))

            problem_id = cell(0)
            title = cell(1)
            if not problem_id or not title:
                logger.debug(f"Skipping row {index}: missing ID or title")
                continue

            problems.append(
                self._build_problem(
                    problem_id,
                    title,
                    practice_id,
                    group,
                    contest_id,
                    acceptance_rate=cell(2) or None,
                    passed_count=to_int(cell(3)),
                    attempt_count=to_int(cell(4)),
                )
            )

        return problems

    def _build_problem(
        self,
        problem_id: str,
        title: str,
        practice_id: str,
        group: str,
        contest_id: str | None,
        **counts,
    ) -> Problem:
        return Problem(
            id=problem_id,
            title=title,
            practice_id=practice_id,
            group=group,
            url=self.url_parser.build_problem_url(group, practice_id, problem_id),
            contest_id=contest_id,
            **counts,
        )


def parse_problem_list(html: str, practice_id: str, group: str) -> list[Problem]:
    """Convenience function to parse a practice page."""
    return ProblemListParser().parse_problem_list(html, practice_id, group)
