from litestar.datastructures import State

from application.client import OpenJudgeClient


def provide_client(state: State) -> OpenJudgeClient:
    """Return the client shared by all requests."""
    return state.client
