"""Pydantic schemas for submission endpoints."""

from pydantic import BaseModel


class SubmitSolutionRequest(BaseModel):
    """Solution to submit for a problem."""

    group: str
    practice_id: str
    problem_id: str
    source: str
    language: str | None = None
    language_id: str | None = None  # Editor language id, e.g. "python"
    contest_id: str | None = None


class SubmitResultResponse(BaseModel):
    result: str
    message: str
    redirect: str | None = None

    class Config:
        from_attributes = True


class SubmissionStatusResponse(BaseModel):
    """Judging status of a submission."""

    id: str
    problem_id: str
    status: str
    status_text: str
    is_terminal: bool
    language: str
    memory: str | None = None
    time: str | None = None
    submit_time: str
    submitter: str | None = None
    code: str
    error_message: str
