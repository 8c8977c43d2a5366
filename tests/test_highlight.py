"""Tests for code block highlighting."""

from unittest.mock import patch

import pytest

from mdpress.highlight import PlainHighlighter, PygmentsHighlighter, escape_html


def test_escape_html():
    assert escape_html("""<a href="x">Tom & Jerry's</a>""") == (
        "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&#039;s&lt;/a&gt;"
    )


class TestPlainHighlighter:
    def test_only_escapes(self):
        assert PlainHighlighter().highlight("if a < b:", "python") == "if a &lt; b:"


class TestPygmentsHighlighter:
    @pytest.fixture
    def highlighter(self):
        return PygmentsHighlighter()

    def test_known_language_gets_token_spans(self, highlighter):
        html = highlighter.highlight("def f():\n    return 1", "python")

        assert '<span class="k">def</span>' in html
        assert "<pre" not in html
        assert not html.endswith("\n")

    def test_language_name_is_case_insensitive(self, highlighter):
        assert '<span class="k">def</span>' in highlighter.highlight("def f(): pass", "Python")

    @pytest.mark.parametrize("language", ["text", "plain", "", "TXT"])
    def test_plain_languages_are_escaped(self, highlighter, language):
        assert highlighter.highlight("a < b", language) == "a &lt; b"

    def test_unknown_language_falls_back_to_escaping(self, highlighter):
        assert highlighter.highlight("a < b && c", "no-such-language") == "a &lt; b &amp;&amp; c"

    def test_failure_inside_pygments_falls_back_to_escaping(self, highlighter):
        with patch("mdpress.highlight.pygments_highlight", side_effect=RuntimeError("boom")):
            assert highlighter.highlight("x = '<'", "python") == "x = &#039;&lt;&#039;"
