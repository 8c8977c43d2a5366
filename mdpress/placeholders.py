"""
Placeholder tokens protecting already rendered fragments from later passes.

Every token embeds a random nonce drawn once per store, so literal text such
as `___CODE_BLOCK_0___` written by an author is never mistaken for a token.

"""

import re
import secrets
from enum import Enum


class PlaceholderKind(str, Enum):
    CODE_BLOCK = "CODE_BLOCK"
    BOOKMARK = "BOOKMARK"
    ARTICLE = "ARTICLE"
    MAGAZINE = "MAGAZINE"
    DICTIONARY = "DICTIONARY"
    CALLOUT = "CALLOUT"
    TABLE = "TABLE"
    INLINE_CODE = "INLINE_CODE"

    @property
    def is_block(self) -> bool:
        return self is not PlaceholderKind.INLINE_CODE


BLOCK_KINDS = [kind for kind in PlaceholderKind if kind.is_block]


class PlaceholderStore:
    """
    Accumulates protected fragments for a single top level render.

    Tokens look like `___TABLE_1a2b3c4d_0___`. Fragments may themselves hold
    tokens created before them (a callout wrapping its code blocks), which
    `restore` resolves recursively.

    """

    def __init__(self, nonce: str | None = None):
        self.nonce = nonce or secrets.token_hex(4)
        self.fragments: list[str] = []

        kinds = "|".join(kind.value for kind in PlaceholderKind)
        block_kinds = "|".join(kind.value for kind in BLOCK_KINDS)
        self.token_pattern = re.compile(rf"___(?:{kinds})_{self.nonce}_(\d+)___")
        self.block_token_pattern = re.compile(rf"___(?:{block_kinds})_{self.nonce}_\d+___")

    def protect(self, kind: PlaceholderKind, html: str) -> str:
        token = f"___{kind.value}_{self.nonce}_{len(self.fragments)}___"
        self.fragments.append(html)
        return token

    def is_block_token(self, text: str) -> bool:
        return self.block_token_pattern.fullmatch(text) is not None

    def contains_block_token(self, text: str) -> bool:
        return self.block_token_pattern.search(text) is not None

    def split_block_tokens(self, text: str) -> list[str]:
        """Split text into alternating prose and block token parts, dropping empties."""
        parts: list[str] = []
        position = 0
        for match in self.block_token_pattern.finditer(text):
            if match.start() > position:
                parts.append(text[position : match.start()])
            parts.append(match.group(0))
            position = match.end()
        if position < len(text):
            parts.append(text[position:])
        return parts

    def restore(self, text: str) -> str:
        return self.token_pattern.sub(self._restore_match, text)

    def _restore_match(self, match: re.Match) -> str:
        index = int(match.group(1))
        if index >= len(self.fragments):
            return match.group(0)
        return self.restore(self.fragments[index])
