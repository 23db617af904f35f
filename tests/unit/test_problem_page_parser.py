"""Unit tests for the problem statement parser."""

from infrastructure.parsers import ProblemPageParser

CHINESE_PAGE = """
<html><body>
<div id="pageTitle"><h2>01:Hello, World!</h2></div>
<dl class="problem-params">
  <dt>总时间限制:</dt><dd>1000ms</dd>
  <dt>内存限制:</dt><dd>65536kB</dd>
</dl>
<dl class="problem-content">
  <dt>描述</dt><dd>对于大部分编程语言来说，编写一个能够输出<b>Hello, World!</b>的程序往往是最基本的。</dd>
  <dt>输入</dt><dd>无</dd>
  <dt>输出</dt><dd>一行，仅包含一个字符串：“Hello, World!”</dd>
  <dt>样例输入</dt><dd><pre>(无)</pre></dd>
  <dt>样例输出</dt><dd><pre>Hello, World!
  second   line</pre></dd>
  <dt>来源</dt><dd>习题(2-1)</dd>
</dl>
<div class="problem-statistics"><dl><dt>全局题号</dt><dd>1656</dd></dl></div>
</body></html>
"""

ENGLISH_PAGE = """
<html><body>
<div id="pageTitle"><h2>A+B Problem</h2></div>
<dl class="problem-params">
  <dt>Time Limit:</dt><dd>1000ms</dd>
  <dt>Memory Limit:</dt><dd>65536kB</dd>
</dl>
<dl class="problem-content">
  <dt>Description</dt><dd>Add two numbers.</dd>
  <dt>Input</dt><dd>Two integers.</dd>
  <dt>Output</dt><dd>Their sum.</dd>
  <dt>Hint</dt><dd>Watch for overflow.</dd>
</dl>
</body></html>
"""


def test_chinese_labels():
    """Test a page rendered with Chinese labels."""
    detail = ProblemPageParser().parse_problem_detail(CHINESE_PAGE, "01")

    assert detail.id == "01"
    assert detail.title == "Hello, World!"
    assert detail.time_limit == "1000ms"
    assert detail.memory_limit == "65536kB"
    assert "<b>Hello, World!</b>" in detail.description
    assert detail.input == "无"
    assert detail.sample_input == "(无)"
    assert detail.source == "习题(2-1)"
    assert detail.hint is None
    assert detail.global_id == "1656"


def test_sample_whitespace_is_preserved():
    """Test that pre blocks keep their line breaks and spacing."""
    detail = ProblemPageParser().parse_problem_detail(CHINESE_PAGE, "01")

    assert detail.sample_output == "Hello, World!\n  second   line"


def test_english_labels():
    """Test a page rendered with English labels only."""
    detail = ProblemPageParser().parse_problem_detail(ENGLISH_PAGE, "1001")

    assert detail.title == "A+B Problem"
    assert detail.time_limit == "1000ms"
    assert detail.description == "Add two numbers."
    assert detail.output == "Their sum."
    assert detail.hint == "Watch for overflow."
    assert detail.sample_input == ""
    assert detail.global_id is None


def test_missing_sections_use_defaults():
    """Test defaults when the page has none of the expected sections."""
    detail = ProblemPageParser().parse_problem_detail("<html><body></body></html>", "42")

    assert detail.title == ""
    assert detail.time_limit == "N/A"
    assert detail.memory_limit == "N/A"
    assert detail.description == ""
    assert detail.source is None
