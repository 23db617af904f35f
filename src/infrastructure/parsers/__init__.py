"""Parsers for extracting records from OpenJudge HTML pages."""

from .interfaces import HTTPClientProtocol
from .practice_page_parser import PracticePageParser, parse_practice_list
from .problem_list_parser import ProblemListParser, extract_contest_id, parse_problem_list
from .problem_page_parser import ProblemPageParser, parse_problem_detail
from .submission_page_parser import SubmissionPageParser, parse_submission_status
from .url_parser import URLParser, URLParsingError

__all__ = [
    "HTTPClientProtocol",
    "PracticePageParser",
    "ProblemListParser",
    "ProblemPageParser",
    "SubmissionPageParser",
    "URLParser",
    "URLParsingError",
    "extract_contest_id",
    "parse_practice_list",
    "parse_problem_detail",
    "parse_problem_list",
    "parse_submission_status",
]
