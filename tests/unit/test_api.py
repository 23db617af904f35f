"""Tests for the HTTP API served through litestar's test client."""

import pytest
from litestar.testing import TestClient

from api.app import create_app
from application.client import OpenJudgeClient
from infrastructure.config import Settings

GROUP_URL = "http://python.openjudge.cn/"
PRACTICE_URL = "http://python.openjudge.cn/ch0101/"
SUBMIT_API = "http://python.openjudge.cn/api/solution/submitv2/"

PRACTICE_PAGE = """
<input type="hidden" name="contestId" value="555">
<table><tbody>
  <tr><td class="problem-id"><a>01</a></td><td class="title"><a>Hello</a></td></tr>
</tbody></table>
"""


@pytest.fixture
def api(site, store):
    client = OpenJudgeClient(Settings(groups=["python", "noi"]), store, transport=site.transport)
    with TestClient(app=create_app(client)) as test_client:
        yield test_client


def test_list_groups(api):
    response = api.get("/groups")

    assert response.status_code == 200
    assert response.json() == ["python", "noi"]


def test_unsupported_locale_is_rejected(site, api):
    """Test that only the site's interface languages are accepted."""
    response = api.post("/auth/language", json={"locale": "fr_FR"})

    assert response.status_code == 400
    assert site.requests == []


def test_list_practices(site, api):
    site.add(GROUP_URL, '<li class="practice-info"><h3><a href="/ch0101/">输入输出</a> (3题)</h3></li>')

    response = api.get("/groups/python/practices")

    assert response.status_code == 200
    assert response.json() == [
        {
            "id": "ch0101",
            "name": "输入输出",
            "group": "python",
            "problem_count": 3,
            "url": PRACTICE_URL,
            "kind": "practice",
        }
    ]


def test_list_problems(site, api):
    site.add(PRACTICE_URL, PRACTICE_PAGE)

    response = api.get("/groups/python/practices/ch0101/problems")

    assert response.status_code == 200
    assert response.json()[0]["id"] == "01"
    assert response.json()[0]["contest_id"] == "555"


def test_unknown_problem_is_404(site, api):
    site.add(PRACTICE_URL, PRACTICE_PAGE)

    response = api.get("/groups/python/practices/ch0101/problems/99")

    assert response.status_code == 404


def test_upstream_failure_is_502(site, api):
    site.add(GROUP_URL, "boom", status=500)

    response = api.get("/groups/python/practices")

    assert response.status_code == 502
    assert response.json()["detail"].startswith("HTTP 500")


def test_cookie_login_and_session(site, api):
    """Test importing a cookie string and reading the session back."""
    response = api.post("/auth/cookie", json={"cookie": "PHPSESSID=abc; language=en_US"})

    assert response.status_code == 200
    assert response.json()["result"] == "SUCCESS"

    session = api.get("/auth/session").json()
    assert session == {"logged_in": True, "locale": "en_US"}

    api.post("/auth/logout")
    assert api.get("/auth/session").json() == {"logged_in": False, "locale": None}


def test_submit(site, api):
    site.add(SUBMIT_API, '{"result": "SUCCESS", "message": "ok", "redirect": "/solution/9/"}', method="POST")

    response = api.post(
        "/submissions",
        json={
            "group": "python",
            "practice_id": "ch0101",
            "problem_id": "01",
            "contest_id": "555",
            "source": "print(1)",
            "language_id": "cpp",
        },
    )

    assert response.status_code == 200
    assert response.json() == {"result": "SUCCESS", "message": "ok", "redirect": "/solution/9/"}
    assert "language=C%2B%2B" in site.requests_to(SUBMIT_API, "POST")[0].content.decode()


def test_submission_status_without_id_is_400(site, api):
    response = api.get("/submissions/status", params={"redirect": "/"})

    assert response.status_code == 400
    assert "submission id" in response.json()["detail"]


def test_submission_status(site, api):
    site.add(
        "http://python.openjudge.cn/solution/9/",
        '<div class="compile-status"><a>Accepted</a></div>',
    )

    response = api.get("/submissions/status", params={"redirect": "/solution/9/", "group": "python"})

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == "9"
    assert body["status"] == "Accepted"
    assert body["is_terminal"] is True
