from api.routes.auth import AuthController
from api.routes.problem import ProblemController
from api.routes.submission import SubmissionController

__all__ = ["AuthController", "ProblemController", "SubmissionController"]
