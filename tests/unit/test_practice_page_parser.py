"""Unit tests for the group home page parser."""

from domain.models import PracticeKind
from infrastructure.parsers import PracticePageParser, URLParser

GROUP_PAGE = """
<html><body>
<ul>
  <li class="practice-info">
    <h3><a href="/ch0101/">01:输入输出</a> (10题)</h3>
  </li>
  <li class="contest-info">
    <h3><a href="http://python.openjudge.cn/2024final/">2024 期末考试</a> (5题)</h3>
  </li>
  <li class="practice-info">
    <h3><a href="/ch0102/">02:顺序结构</a></h3>
  </li>
  <li class="practice-info">
    <h3><a href="javascript:void(0)">Broken</a> (3题)</h3>
  </li>
  <li class="practice-info"><p>No title here</p></li>
</ul>
</body></html>
"""


def test_parses_practices_before_contests():
    """Test that practices come first, then contests, each in document order."""
    practices = PracticePageParser().parse_practice_list(GROUP_PAGE, "python")

    assert [p.id for p in practices] == ["ch0101", "ch0102", "2024final"]
    assert [p.kind for p in practices] == [
        PracticeKind.PRACTICE,
        PracticeKind.PRACTICE,
        PracticeKind.CONTEST,
    ]


def test_extracts_name_count_and_url():
    """Test field extraction for a single practice item."""
    first, second, contest = PracticePageParser().parse_practice_list(GROUP_PAGE, "python")

    assert first.name == "01:输入输出"
    assert first.problem_count == 10
    assert first.group == "python"
    assert first.url == "http://python.openjudge.cn/ch0101/"
    assert second.problem_count == 0
    assert contest.problem_count == 5
    assert contest.key == ("python", "2024final")


def test_uses_configured_domain_for_urls():
    """Test that practice URLs follow the URL parser's domain."""
    parser = PracticePageParser(URLParser(domain="example.test", scheme="https"))

    practices = parser.parse_practice_list(GROUP_PAGE, "noi")

    assert practices[0].url == "https://noi.example.test/ch0101/"


def test_empty_page_returns_empty_list():
    assert PracticePageParser().parse_practice_list("", "python") == []
