"""Tests for plain text extraction used by search."""

import pytest

from mdpress.plain_text import extract_plain_text


@pytest.mark.parametrize(
    "markdown,expected",
    [
        ("", ""),
        ("plain sentence with no markup", "plain sentence with no markup"),
        ("  spaced \n\n out  ", "spaced out"),
        ("```python\nprint(1)\n```", "print(1)"),
        ("before\n:::article\nsome-slug\n:::\nafter", "before after"),
        ("before\n:::bookmark\nhttps://example.com\ntitle: X\n:::\nafter", "before after"),
        ("> [!NOTE]\n> hello", "hello"),
        ("![Alt text](a.png) [Link text](https://example.com)", "Alt text Link text"),
        ("# Title\n- one\n1. two", "Title one two"),
        ("**bold** *it* ~~del~~ ++u++ `code`", "bold it del u code"),
        ("__bold__ _it_", "bold it"),
        ("<b>tagged</b> text", "tagged text"),
        ("above\n---\nbelow", "above below"),
    ],
)
def test_extract_plain_text(markdown, expected):
    assert extract_plain_text(markdown) == expected


def test_body_with_front_matter_free_markdown():
    markdown = """## Ownership

Rust's **ownership** model prevents [use-after-free](https://example.com).

> [!TIP]
> Borrow instead of cloning.

```rust
let s = String::new();
```
"""
    assert extract_plain_text(markdown) == (
        "Ownership Rust's ownership model prevents use-after-free. "
        "Borrow instead of cloning. let s = String::new();"
    )
