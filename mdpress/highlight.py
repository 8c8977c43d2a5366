"""Syntax highlighting for fenced code blocks."""

from abc import ABC, abstractmethod

from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from mdpress.logger import get_logger

logger = get_logger(__name__)

PLAIN_LANGUAGES = {"", "text", "plain", "plaintext", "txt"}


def escape_html(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#039;")
    )


class Highlighter(ABC):
    """Turns a code string into the HTML placed inside `<pre><code>`."""

    @abstractmethod
    def highlight(self, code: str, language: str) -> str:
        """Return highlighted HTML. Implementations must never raise."""
        pass


class PlainHighlighter(Highlighter):
    """Escapes the code without any token markup."""

    def highlight(self, code: str, language: str) -> str:
        return escape_html(code)


class PygmentsHighlighter(Highlighter):
    """
    Wraps each token in a `<span>` carrying the Pygments short css class,
    so any Pygments style sheet applies. Unknown languages and any failure
    inside Pygments fall back to escaped text.

    """

    def __init__(self) -> None:
        self.formatter = HtmlFormatter(nowrap=True)

    def highlight(self, code: str, language: str) -> str:
        if language.lower() in PLAIN_LANGUAGES:
            return escape_html(code)

        try:
            lexer = get_lexer_by_name(language.lower(), stripnl=False, ensurenl=False)
        except ClassNotFound:
            logger.debug(f"No lexer for `{language}`, rendering code block as plain text")
            return escape_html(code)

        try:
            return pygments_highlight(code, lexer, self.formatter).rstrip("\n")
        except Exception as e:
            logger.debug(f"Highlighting `{language}` failed, rendering as plain text: {e}")
            return escape_html(code)
