"""Unit tests for the OpenJudgeClient facade."""

import pytest

from domain.models import Problem
from application.client import OpenJudgeClient
from infrastructure.config import Settings
from infrastructure.session_store import CREDENTIALS_KEY, SESSION_KEY, MemorySessionStore

HOME = "http://openjudge.cn/"
LOGIN = "http://openjudge.cn/api/auth/login/"
SUBMIT_API = "http://python.openjudge.cn/api/solution/submitv2/"
REDIRECT = "http://python.openjudge.cn/solution/1/"


@pytest.fixture
def settings():
    return Settings(poll_interval=0, max_poll_attempts=3)


@pytest.fixture
def client(site, settings, store):
    return OpenJudgeClient(settings, store, transport=site.transport)


def make_problem():
    return Problem(
        id="01",
        title="Hello",
        practice_id="ch0101",
        group="python",
        url="http://python.openjudge.cn/ch0101/01/",
        contest_id="777",
    )


@pytest.mark.asyncio
async def test_initialize_restores_session(site, store, client):
    store.data[SESSION_KEY] = {"sessionId": "abc", "locale": "zh_CN"}

    assert await client.initialize() is True
    assert client.is_logged_in
    assert client.session.session_id == "abc"


@pytest.mark.asyncio
async def test_initialize_logs_in_with_saved_credentials(site, store, client):
    """Test auto-login when only credentials are saved."""
    store.data[CREDENTIALS_KEY] = {"email": "a@b.c", "password": "pw"}
    site.add(HOME, "", headers=[("Set-Cookie", "PHPSESSID=fresh")])
    site.add(LOGIN, '{"result": "SUCCESS"}', method="POST")

    assert await client.initialize() is True
    assert client.session.session_id == "fresh"


@pytest.mark.asyncio
async def test_initialize_without_saved_state(client):
    assert await client.initialize() is False
    assert not client.is_logged_in


@pytest.mark.asyncio
async def test_login_failure_is_returned_as_error_result(site, client):
    site.add(HOME, "")
    site.add(LOGIN, '{"result": "ERROR", "message": "用户名或密码错误"}', method="POST")

    result = await client.login("a@b.c", "wrong")

    assert not result.ok
    assert result.message == "Login failed: 用户名或密码错误"


@pytest.mark.asyncio
async def test_cookie_login_without_session_id_returns_error(client):
    result = await client.login_with_cookie_string("language=en_US")

    assert result.result == "ERROR"
    assert "PHPSESSID" in result.message


@pytest.mark.asyncio
async def test_submit_failure_is_returned_as_error_response(site, client):
    site.add(SUBMIT_API, "server error", method="POST", status=500)

    response = await client.submit(make_problem(), "print(1)", "Python3")

    assert not response.ok
    assert response.message.startswith("HTTP 500")


@pytest.mark.asyncio
async def test_poll_failure_is_returned_as_failed_outcome(site, client):
    site.add(REDIRECT, "server error", status=503)

    outcome = await client.poll_submission(REDIRECT)

    assert outcome.state == "failed"
    assert "503" in outcome.message


@pytest.mark.asyncio
async def test_poll_with_unusable_redirect_is_failed_outcome(site, client):
    """Test that a redirect without a submission id does not escape as an exception."""
    outcome = await client.poll_submission("/")

    assert outcome.state == "failed"
    assert "submission id" in outcome.message
    assert site.requests == []


@pytest.mark.asyncio
async def test_logout_clears_persisted_state(site, store, client):
    await client.login_with_cookie_string("PHPSESSID=abc")

    await client.logout()

    assert store.data == {}
    assert client.session is None


@pytest.mark.asyncio
async def test_context_manager_closes_http_client(site):
    async with OpenJudgeClient(Settings(), MemorySessionStore(), transport=site.transport) as client:
        pass

    assert client.http_client._client.is_closed
