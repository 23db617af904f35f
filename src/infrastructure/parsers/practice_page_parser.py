"""Parser for the practice and contest list on a group's home page."""

import re

from loguru import logger

from domain.models import Practice, PracticeKind

from .fields import make_soup, text_of
from .url_parser import URLParser

HREF_ID_PATTERN = re.compile(r"/([^/]+)/$")
PROBLEM_COUNT_PATTERN = re.compile(r"\((\d+)题\)")

FAMILIES = (
    ("li.practice-info", PracticeKind.PRACTICE),
    ("li.contest-info", PracticeKind.CONTEST),
)


class PracticePageParser:
    """Extracts practices and contests from a group home page."""

    def __init__(self, url_parser: URLParser | None = None):
        self.url_parser = url_parser or URLParser()

    def parse_practice_list(self, html: str, group: str) -> list[Practice]:
        """
        Parse a group home page.

        Practices come first, then contests, each in document order. Items
        whose link does not end in ``/<id>/`` are skipped.
        """
        soup = make_soup(html)
        practices: list[Practice] = []

        for selector, kind in FAMILIES:
            for item in soup.select(selector):
                link = item.select_one("h3 a")
                if link is None:
                    logger.warning(f"No title link in {kind.value} item of group {group}")
                    continue

                href = link.get("href")
                name = text_of(link)
                match = HREF_ID_PATTERN.search(href) if isinstance(href, str) else None
                if not match:
                    logger.warning(f"Failed to parse {kind.value} href: {href!r} name: {name!r}")
                    continue

                practice_id = match.group(1)
                practices.append(
                    Practice(
                        id=practice_id,
                        name=name,
                        group=group,
                        problem_count=self._extract_problem_count(text_of(link.parent)),
                        url=self.url_parser.build_practice_url(group, practice_id),
                        kind=kind,
                    )
                )

        logger.debug(f"Found {len(practices)} practices/contests in group {group}")
        return practices

    @staticmethod
    def _extract_problem_count(text: str) -> int:
        match = PROBLEM_COUNT_PATTERN.search(text)
        return int(match.group(1)) if match else 0


def parse_practice_list(html: str, group: str) -> list[Practice]:
    """Convenience function to parse a group home page."""
    return PracticePageParser().parse_practice_list(html, group)
