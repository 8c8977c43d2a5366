"""Tests for the mdpress command line interface."""

import pytest
from click.testing import CliRunner

from mdpress.cli.cli import main
from mdpress.cli.search import terminal_snippet
from mdpress.content import ContentStore, ContentType


@pytest.fixture
def content_dir(tmp_path):
    content_dir = tmp_path / "content"
    store = ContentStore(content_dir)
    store.save(
        ContentType.POSTS,
        "hello",
        {"title": "Hello", "date": "2024-01-01", "tags": ["intro"]},
        "## Welcome\n\nHello **world**.",
    )
    store.save(
        ContentType.POSTS,
        "draft",
        {"title": "Draft", "date": "2024-02-01", "listed": False},
        "Unfinished.",
    )
    return content_dir


@pytest.fixture
def runner():
    return CliRunner()


class TestRenderCommand:
    def test_render_to_stdout(self, runner, content_dir):
        result = runner.invoke(main, ["--content", str(content_dir), "render", "posts", "hello"])

        assert result.exit_code == 0
        assert '<h2 id="heading-0">Welcome</h2>' in result.output
        assert "<strong>world</strong>" in result.output

    def test_render_to_file(self, runner, content_dir, tmp_path):
        output = tmp_path / "out" / "hello.html"
        result = runner.invoke(
            main,
            ["--content", str(content_dir), "render", "posts", "hello", "--output", str(output)],
        )

        assert result.exit_code == 0
        assert "<strong>world</strong>" in output.read_text(encoding="utf-8")

    def test_render_missing_entry(self, runner, content_dir):
        result = runner.invoke(main, ["--content", str(content_dir), "render", "posts", "nope"])

        assert result.exit_code == 1
        assert "No posts entry named `nope`" in result.output

    def test_render_invalid_slug(self, runner, content_dir):
        result = runner.invoke(main, ["--content", str(content_dir), "render", "posts", "../x"])

        assert result.exit_code == 1
        assert "Invalid slug" in result.output

    def test_render_unknown_type(self, runner, content_dir):
        result = runner.invoke(main, ["--content", str(content_dir), "render", "notes", "hello"])

        assert result.exit_code == 2


class TestListCommand:
    def test_list_listed_entries(self, runner, content_dir):
        result = runner.invoke(main, ["--content", str(content_dir), "list", "posts"])

        assert result.exit_code == 0
        assert "hello" in result.output
        assert "draft" not in result.output

    def test_list_all_entries(self, runner, content_dir):
        result = runner.invoke(main, ["--content", str(content_dir), "list", "posts", "--all"])

        assert result.exit_code == 0
        assert "hello" in result.output
        assert "draft" in result.output

    def test_list_empty_type(self, runner, content_dir):
        result = runner.invoke(main, ["--content", str(content_dir), "list", "magazines"])

        assert result.exit_code == 0
        assert "No magazines found" in result.output


class TestSearchCommand:
    def test_search(self, runner, content_dir):
        result = runner.invoke(main, ["--content", str(content_dir), "search", "hello"])

        assert result.exit_code == 0
        assert "1 documents indexed" in result.output
        assert "Hello" in result.output

    def test_search_without_results(self, runner, content_dir):
        result = runner.invoke(main, ["--content", str(content_dir), "search", "zzz"])

        assert result.exit_code == 0
        assert "No results for" in result.output

    def test_terminal_snippet(self):
        text = terminal_snippet("a &lt;b&gt; <mark>rust</mark> c")

        assert text.plain == "a <b> rust c"
        assert [(span.start, span.end, span.style) for span in text.spans] == [
            (6, 10, "bold yellow")
        ]


def test_config_file_option(runner, content_dir, tmp_path):
    config_file = tmp_path / "mdpress.yml"
    config_file.write_text("content_dir: content\n")

    result = runner.invoke(main, ["--config", str(config_file), "list", "posts"])

    assert result.exit_code == 0
    assert "hello" in result.output
