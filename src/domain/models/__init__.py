"""Domain models package."""

from .practice import Practice, PracticeKind, Problem, ProblemDetail
from .session import Credentials, CookieRecord, Session
from .submission import (
    AuthResult,
    PollOutcome,
    SubmissionStatus,
    SubmitRequest,
    SubmitResponse,
    Verdict,
)

__all__ = [
    "AuthResult",
    "CookieRecord",
    "Credentials",
    "Practice",
    "PracticeKind",
    "PollOutcome",
    "Problem",
    "ProblemDetail",
    "Session",
    "SubmissionStatus",
    "SubmitRequest",
    "SubmitResponse",
    "Verdict",
]
