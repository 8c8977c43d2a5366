"""Tests for front matter parsing and serialization."""

import pytest

from mdpress.frontmatter import dump_front_matter, parse_front_matter, parse_value


class TestParseFrontMatter:
    """Test splitting raw content files into metadata and body."""

    def test_basic_front_matter(self):
        text = """---
title: Rust Ownership
emoji: 🦀
date: 2024-03-01
tags: ["rust", "memory"]
listed: false
---

Body text here."""

        document = parse_front_matter(text)

        assert document.metadata == {
            "title": "Rust Ownership",
            "emoji": "🦀",
            "date": "2024-03-01",
            "tags": ["rust", "memory"],
            "listed": False,
        }
        assert document.content == "Body text here."

    def test_without_front_matter_returns_text_untouched(self):
        text = "# Just a heading\n\nAnd a body."
        document = parse_front_matter(text)

        assert document.metadata == {}
        assert document.content == text

    def test_missing_closing_delimiter(self):
        """An unterminated block is treated as ordinary content."""
        text = "---\ntitle: Hello\nno closing line"
        document = parse_front_matter(text)

        assert document.metadata == {}
        assert document.content == text

    def test_closing_delimiter_on_last_line_is_not_front_matter(self):
        text = "---\ntitle: Hello\n---"
        document = parse_front_matter(text)

        assert document.metadata == {}
        assert document.content == text

    def test_crlf_line_endings(self):
        text = "---\r\ntitle: Windows\r\n---\r\n\r\nLine one\r\nLine two"
        document = parse_front_matter(text)

        assert document.metadata == {"title": "Windows"}
        assert document.content == "Line one\nLine two"

    def test_empty_front_matter(self):
        document = parse_front_matter("---\n---\n\nBody")

        assert document.metadata == {}
        assert document.content == "Body"

    def test_body_without_blank_separator_line(self):
        document = parse_front_matter("---\ntitle: Hi\n---\nBody starts here")

        assert document.content == "Body starts here"

    def test_only_the_first_blank_line_is_consumed(self):
        document = parse_front_matter("---\ntitle: Hi\n---\n\n\nBody")

        assert document.content == "\nBody"

    def test_value_keeps_everything_after_first_colon(self):
        document = parse_front_matter("---\nsource: https://example.com:8080/a\n---\n\n")

        assert document.metadata["source"] == "https://example.com:8080/a"

    def test_lines_without_colon_or_value_are_skipped(self):
        text = "---\ntitle: Kept\njust some words\nempty:\n: no key\n---\n\nBody"
        document = parse_front_matter(text)

        assert document.metadata == {"title": "Kept"}

    def test_duplicate_keys_last_one_wins(self):
        document = parse_front_matter("---\ntitle: First\ntitle: Second\n---\n\n")

        assert document.metadata == {"title": "Second"}

    def test_delimiter_inside_body_is_left_alone(self):
        document = parse_front_matter("---\ntitle: Hi\n---\n\nAbove\n\n---\n\nBelow")

        assert document.content == "Above\n\n---\n\nBelow"


class TestParseValue:
    """Test scalar and array value conversion."""

    @pytest.mark.parametrize(
        "key,value,expected",
        [
            ("listed", "true", True),
            ("listed", "false", False),
            ("listed", "True", "True"),
            ("title", "false", False),
            ("title", "Plain text", "Plain text"),
            ("tags", '["a", "b"]', ["a", "b"]),
            ("articles", '["first-post"]', ["first-post"]),
            ("tags", "[]", []),
            ("tags", "not json", []),
            ("tags", '"a string"', []),
            ("tags", '{"a": 1}', []),
            ("tags", "[1, 2]", ["1", "2"]),
            ("other", '["a"]', '["a"]'),
        ],
    )
    def test_parse_value(self, key, value, expected):
        assert parse_value(key, value) == expected

    def test_invalid_tags_do_not_break_other_fields(self):
        document = parse_front_matter("---\ntitle: Ok\ntags: [broken\n---\n\nBody")

        assert document.metadata == {"title": "Ok", "tags": []}
        assert document.content == "Body"


class TestDumpFrontMatter:
    """Test writing metadata back into the content file format."""

    def test_dump_layout(self):
        text = dump_front_matter(
            {"title": "Hello", "tags": ["a", "ü"], "listed": True, "missing": None},
            "Body",
        )

        assert text == '---\ntitle: Hello\ntags: ["a", "ü"]\nlisted: true\n---\n\nBody'

    @pytest.mark.parametrize(
        "metadata,body",
        [
            ({"title": "Hello", "listed": False, "tags": ["a", "b"]}, "Body\n\nmore"),
            ({"title": "Magazine", "articles": ["one", "two"]}, "# Heading\n\n- item"),
            ({}, "No metadata"),
            ({"title": "Empty body"}, ""),
        ],
    )
    def test_round_trip(self, metadata, body):
        document = parse_front_matter(dump_front_matter(metadata, body))

        assert document.metadata == metadata
        assert document.content == body
