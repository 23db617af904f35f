"""Parser for submission status pages."""

from bs4 import BeautifulSoup
from loguru import logger

from domain.models import SubmissionStatus, Verdict

from .fields import collect_definitions, first_value, make_soup, text_of

STATUS_SELECTORS = (
    ".compile-status a",
    ".compile-status span.result-right",
    ".compile-status span.result-wrong",
)
CODE_SELECTORS = ("pre.sh_python", "pre.sh_cpp", "pre.sh_c", "pre.sh_java")
COMPILE_ERROR_LABELS = ("Compile Error", "编译错误")
ERROR_MARKERS = ("error", "Error", "错误")


class SubmissionPageParser:
    """Extracts verdict, judging info and source code from a status page."""

    def parse_submission_status(self, submission_id: str, html: str) -> SubmissionStatus:
        soup = make_soup(html)

        status_text = self._extract_status_text(soup)
        info = {key: value for key, value in collect_definitions(soup, ".compile-info dl").items() if value}

        error_message = ""
        if any(label in status_text for label in COMPILE_ERROR_LABELS):
            error_message = self._extract_error_message(soup)
            if not error_message:
                logger.debug(f"Compile error reported but no error block found for {submission_id}")

        status = SubmissionStatus(
            id=submission_id,
            problem_id=first_value(info, "题目", "Problem", "问题", default=""),
            status=Verdict.from_text(status_text),
            status_text=status_text,
            language=first_value(info, "语言", "Language", default=""),
            memory=first_value(info, "内存", "Memory"),
            time=first_value(info, "时间", "Time"),
            submit_time=first_value(info, "提交时间", "Submit Time", default=""),
            submitter=first_value(info, "提交人", "Submitter"),
            code=self._extract_code(soup),
            error_message=error_message,
        )

        logger.debug(
            f"Parsed submission {submission_id}: status={status.status.value!r} "
            f"problem={status.problem_id!r} code={bool(status.code)} error={bool(error_message)}"
        )
        return status

    @staticmethod
    def _extract_status_text(soup: BeautifulSoup) -> str:
        for selector in STATUS_SELECTORS:
            for element in soup.select(selector):
                text = text_of(element)
                if text:
                    return text
        return ""

    @staticmethod
    def _extract_code(soup: BeautifulSoup) -> str:
        for selector in CODE_SELECTORS:
            block = soup.select_one(selector)
            if block is not None:
                return block.get_text()

        block = soup.find("pre")
        return block.get_text() if block is not None else ""

    @staticmethod
    def _extract_error_message(soup: BeautifulSoup) -> str:
        for block in soup.find_all("pre"):
            text = block.get_text()
            if any(marker in text for marker in ERROR_MARKERS):
                return text
        return ""


def parse_submission_status(submission_id: str, html: str) -> SubmissionStatus:
    """Convenience function to parse a submission status page."""
    return SubmissionPageParser().parse_submission_status(submission_id, html)
