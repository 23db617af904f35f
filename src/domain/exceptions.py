"""Exceptions raised by the OpenJudge client."""


class OpenJudgeError(Exception):
    """Base error for the OpenJudge client."""

    pass


class TransportError(OpenJudgeError):
    """Network failure, timeout or unusable HTTP response."""

    pass


class HttpError(TransportError):
    """Server answered with a status code of 400 or above."""

    def __init__(self, status_code: int, preview: str = ""):
        self.status_code = status_code
        self.preview = preview
        super().__init__(f"HTTP {status_code}: {preview}")


class AuthError(OpenJudgeError):
    """Login rejected or session could not be established."""

    pass


class MissingSessionCookieError(AuthError):
    """Login reported success but no session cookie was set."""

    def __init__(self, message: str = "Login succeeded but no session cookie was received"):
        super().__init__(message)


class ContestIdNotFoundError(OpenJudgeError):
    """Contest identifier could not be resolved for a problem."""

    def __init__(self, problem_id: str, url: str | None = None):
        self.problem_id = problem_id
        self.url = url
        message = f"Unable to determine contest ID for problem {problem_id}"
        if url:
            message += f" (submit page: {url})"
        super().__init__(message)


class SubmissionError(OpenJudgeError):
    """Submission endpoint returned something other than the expected JSON."""

    pass
