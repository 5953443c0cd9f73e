"""
Lexical tokenizer for interaction validation.

One token per code point. Eight punctuation marks get their own kind;
everything else (letters, operator glyphs, whitespace) is a SYMBOL.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    SYMBOL = "symbol"
    ARROW = "arrow"          # →
    PLUS = "plus"            # +
    COLON = "colon"          # :
    SLASH = "slash"          # /
    PIPE = "pipe"            # |
    LBRACKET = "lbracket"    # [
    RBRACKET = "rbracket"    # ]
    EQUALS = "equals"        # =


PUNCTUATION_KINDS: dict[str, TokenKind] = {
    "→": TokenKind.ARROW,
    "+": TokenKind.PLUS,
    ":": TokenKind.COLON,
    "/": TokenKind.SLASH,
    "|": TokenKind.PIPE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "=": TokenKind.EQUALS,
}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    index: int
    char: str


def tokenize(content: str) -> list[Token]:
    """Tokenize content. Total: never fails, never looks at context."""
    return [
        Token(
            kind=PUNCTUATION_KINDS.get(char, TokenKind.SYMBOL),
            index=index,
            char=char,
        )
        for index, char in enumerate(content)
    ]
