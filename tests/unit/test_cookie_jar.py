"""Unit tests for the cookie jar."""

import pytest

from domain.models import CookieRecord
from infrastructure.cookie_jar import CookieJar


class TestSetFromHeader:
    def test_parses_name_value_and_attributes(self):
        jar = CookieJar()
        jar.set_from_header("SID=abc; Path=/; Domain=example.com", "www.example.com")

        assert jar.export() == [["SID", {"value": "abc", "domain": "example.com", "path": "/"}]]

    def test_attributes_are_case_insensitive(self):
        jar = CookieJar()
        jar.set_from_header("SID=abc; PATH=/app; DOMAIN=example.com; HttpOnly", "example.com")

        record = dict(jar.export())["SID"]
        assert record == {"value": "abc", "domain": "example.com", "path": "/app"}

    def test_defaults_to_response_host_and_root_path(self):
        jar = CookieJar()
        jar.set_from_header("language=zh_CN; expires=Thu, 01 Jan 2099 00:00:00 GMT", "openjudge.cn")

        assert dict(jar.export())["language"] == {
            "value": "zh_CN",
            "domain": "openjudge.cn",
            "path": "/",
        }

    def test_accepts_multiple_headers_and_last_write_wins(self):
        jar = CookieJar()
        jar.set_from_header(["a=1; Path=/", "b=2", "a=3"], "openjudge.cn")

        assert len(jar) == 2
        assert jar.get("a") == "3"
        assert jar.get("b") == "2"

    def test_ignores_values_without_equals_sign(self):
        jar = CookieJar()
        jar.set_from_header(["garbage", "ok=1"], "openjudge.cn")

        assert len(jar) == 1
        assert "ok" in jar


class TestHeaderFor:
    def test_matches_subdomains_in_both_directions(self):
        jar = CookieJar()
        jar.set("PHPSESSID", "abc", "openjudge.cn")
        jar.set("group_pref", "x", "python.openjudge.cn")

        assert jar.header_for("python.openjudge.cn") == "PHPSESSID=abc; group_pref=x"
        assert jar.header_for("openjudge.cn") == "PHPSESSID=abc; group_pref=x"
        assert jar.header_for("noi.openjudge.cn") == "PHPSESSID=abc"

    def test_skips_foreign_domains(self):
        jar = CookieJar()
        jar.set("PHPSESSID", "abc", "openjudge.cn")

        assert jar.header_for("example.org") == ""


def test_clear_empties_jar():
    jar = CookieJar()
    jar.set("a", "1", "openjudge.cn")
    jar.clear()

    assert len(jar) == 0
    assert jar.get("a") is None


@pytest.mark.parametrize(
    "domain", ["openjudge.cn", "python.openjudge.cn", "noi.openjudge.cn", "example.org"]
)
def test_export_import_round_trip_preserves_headers(domain):
    jar = CookieJar()
    jar.set_from_header(["PHPSESSID=s1; Path=/", "language=en_US"], "openjudge.cn")
    jar.set("token", "a=b=c", "python.openjudge.cn", "/api")

    restored = CookieJar()
    restored.set("stale", "1", "openjudge.cn")
    restored.import_(jar.export())

    assert restored.header_for(domain) == jar.header_for(domain)
    assert restored.export() == jar.export()


def test_cookie_record_serialisation():
    record = CookieRecord(name="a", value="1", domain="openjudge.cn")
    assert record.to_dict() == {"value": "1", "domain": "openjudge.cn", "path": "/"}
