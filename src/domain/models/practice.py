"""Value objects for practices, problems and problem statements."""

from dataclasses import dataclass
from enum import Enum


class PracticeKind(str, Enum):
    PRACTICE = "practice"
    CONTEST = "contest"


@dataclass(frozen=True)
class Practice:
    """A practice set or contest inside a group."""

    id: str
    name: str
    group: str
    problem_count: int
    url: str
    kind: PracticeKind = PracticeKind.PRACTICE

    @property
    def key(self) -> tuple[str, str]:
        return (self.group, self.id)


@dataclass(frozen=True)
class Problem:
    """A problem listed in a practice or contest."""

    id: str
    title: str
    practice_id: str
    group: str
    url: str
    acceptance_rate: str | None = None
    passed_count: int | None = None
    attempt_count: int | None = None
    contest_id: str | None = None

    @property
    def key(self) -> tuple[str, str, str]:
        return (self.group, self.practice_id, self.id)

    def __str__(self) -> str:
        return f"{self.group}/{self.practice_id}/{self.id}"


@dataclass(frozen=True)
class ProblemDetail:
    """Statement of a single problem."""

    id: str
    title: str
    time_limit: str = "N/A"
    memory_limit: str = "N/A"
    description: str = ""
    input: str = ""
    output: str = ""
    sample_input: str = ""
    sample_output: str = ""
    hint: str | None = None
    source: str | None = None
    global_id: str | None = None
