"""Value objects for submissions and their judging status."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal

ResultCode = Literal["SUCCESS", "ERROR"]


class Verdict(str, Enum):
    PENDING = "Pending"
    RUNNING = "Running"
    ACCEPTED = "Accepted"
    WRONG_ANSWER = "Wrong Answer"
    TIME_LIMIT_EXCEEDED = "Time Limit Exceeded"
    MEMORY_LIMIT_EXCEEDED = "Memory Limit Exceeded"
    RUNTIME_ERROR = "Runtime Error"
    COMPILE_ERROR = "Compile Error"
    PRESENTATION_ERROR = "Presentation Error"
    UNKNOWN = "Unknown"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_VERDICTS

    @classmethod
    def from_text(cls, text: str) -> Verdict:
        """Map the status label shown on a submission page to a verdict."""
        text = text.strip()
        if not text:
            return cls.PENDING

        lowered = text.lower()
        for verdict in cls:
            if verdict.value.lower() == lowered:
                return verdict
        for verdict in cls:
            if verdict in TERMINAL_VERDICTS and verdict.value.lower() in lowered:
                return verdict

        for label, verdict in LOCALIZED_VERDICTS.items():
            if label in text:
                return verdict

        if lowered in ("judging", "compiling"):
            return cls.RUNNING
        if lowered in ("waiting", "queuing"):
            return cls.PENDING
        return cls.UNKNOWN


TERMINAL_VERDICTS = frozenset(
    {
        Verdict.ACCEPTED,
        Verdict.WRONG_ANSWER,
        Verdict.TIME_LIMIT_EXCEEDED,
        Verdict.MEMORY_LIMIT_EXCEEDED,
        Verdict.RUNTIME_ERROR,
        Verdict.COMPILE_ERROR,
        Verdict.PRESENTATION_ERROR,
    }
)

LOCALIZED_VERDICTS: dict[str, Verdict] = {
    "编译错误": Verdict.COMPILE_ERROR,
    "答案错误": Verdict.WRONG_ANSWER,
    "时间超限": Verdict.TIME_LIMIT_EXCEEDED,
    "内存超限": Verdict.MEMORY_LIMIT_EXCEEDED,
    "运行错误": Verdict.RUNTIME_ERROR,
    "运行时错误": Verdict.RUNTIME_ERROR,
    "格式错误": Verdict.PRESENTATION_ERROR,
    "通过": Verdict.ACCEPTED,
    "正确": Verdict.ACCEPTED,
    "评测中": Verdict.RUNNING,
    "编译中": Verdict.RUNNING,
    "等待": Verdict.PENDING,
}


@dataclass(frozen=True)
class SubmissionStatus:
    """Judging status of one submission as shown on its status page."""

    id: str
    problem_id: str
    status: Verdict
    status_text: str
    language: str
    submit_time: str
    code: str = ""
    error_message: str = ""
    memory: str | None = None
    time: str | None = None
    submitter: str | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal


@dataclass(frozen=True)
class SubmitRequest:
    """Form payload of the submission endpoint."""

    contest_id: str
    problem_number: str
    language: str
    source: str
    source_encode: str = "base64"

    def to_form(self) -> dict[str, str]:
        return {
            "contestId": self.contest_id,
            "problemNumber": self.problem_number,
            "sourceEncode": self.source_encode,
            "language": self.language,
            "source": self.source,
        }


@dataclass(frozen=True)
class SubmitResponse:
    result: ResultCode
    message: str
    redirect: str | None = None

    @property
    def ok(self) -> bool:
        return self.result == "SUCCESS"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SubmitResponse:
        result = "SUCCESS" if data.get("result") == "SUCCESS" else "ERROR"
        return cls(
            result=result,
            message=str(data.get("message") or ""),
            redirect=data.get("redirect") or None,
        )


@dataclass(frozen=True)
class AuthResult:
    result: ResultCode
    message: str
    hint: str | None = None

    @property
    def ok(self) -> bool:
        return self.result == "SUCCESS"


PollState = Literal["terminal", "exhausted", "cancelled", "failed"]


@dataclass
class PollOutcome:
    """How a submission poll ended."""

    state: PollState
    attempts: int = 0
    last_status: SubmissionStatus | None = None
    message: str = ""
    history: list[SubmissionStatus] = field(default_factory=list, repr=False)

    @property
    def still_pending(self) -> bool:
        return self.state == "exhausted"
