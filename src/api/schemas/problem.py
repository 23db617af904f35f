"""Pydantic schemas for practice and problem endpoints."""

from pydantic import BaseModel


class PracticeResponse(BaseModel):
    """A practice set or contest of a group."""

    id: str
    name: str
    group: str
    problem_count: int
    url: str
    kind: str

    class Config:
        from_attributes = True


class ProblemResponse(BaseModel):
    """A problem listed in a practice."""

    id: str
    title: str
    practice_id: str
    group: str
    url: str
    acceptance_rate: str | None = None
    passed_count: int | None = None
    attempt_count: int | None = None
    contest_id: str | None = None

    class Config:
        from_attributes = True


class ProblemDetailResponse(BaseModel):
    """Problem statement; text sections keep their HTML markup."""

    id: str
    title: str
    time_limit: str
    memory_limit: str
    description: str
    input: str
    output: str
    sample_input: str
    sample_output: str
    hint: str | None = None
    source: str | None = None
    global_id: str | None = None

    class Config:
        from_attributes = True
