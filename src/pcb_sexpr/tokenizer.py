"""
S-expression tokenizer.

Turns text into a flat list of tokens ending with a single EOF token.
Tokenizing never fails: malformed input simply produces symbol or number
tokens that the parser may reject later.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import NamedTuple

WHITESPACE = " \t\n\r"
DELIMITERS = WHITESPACE + "()"

NUMBER_PATTERN = re.compile(r"-?[0-9]+(\.[0-9]+)?")

ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    '"': '"',
}


class TokenType(Enum):
    """Kinds of token produced by the tokenizer."""

    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    STRING = "STRING"
    NUMBER = "NUMBER"
    SYMBOL = "SYMBOL"
    EOF = "EOF"


class Token(NamedTuple):
    """A token and the offset in the input where it starts."""

    type: TokenType
    value: str
    position: int = 0


def looks_like_number(text: str) -> bool:
    """True if text is an optionally negative integer or decimal literal."""
    return NUMBER_PATTERN.fullmatch(text) is not None


def tokenize(text: str) -> list[Token]:
    """
    Split s-expression text into tokens.

    Args:
        text: Input text

    Returns:
        Tokens in input order, terminated by exactly one EOF token
    """
    tokens: list[Token] = []
    length = len(text)
    pos = 0

    while pos < length:
        char = text[pos]

        if char in WHITESPACE:
            pos += 1
            continue

        if char == "(":
            tokens.append(Token(TokenType.LPAREN, "(", pos))
            pos += 1
            continue

        if char == ")":
            tokens.append(Token(TokenType.RPAREN, ")", pos))
            pos += 1
            continue

        if char == '"':
            start = pos
            value, pos = _read_string(text, pos + 1)
            tokens.append(Token(TokenType.STRING, value, start))
            continue

        start = pos
        while pos < length and text[pos] not in DELIMITERS:
            pos += 1
        word = text[start:pos]
        kind = TokenType.NUMBER if looks_like_number(word) else TokenType.SYMBOL
        tokens.append(Token(kind, word, start))

    tokens.append(Token(TokenType.EOF, "", length))
    return tokens


def _read_string(text: str, pos: int) -> tuple[str, int]:
    """
    Read a string literal body starting just after the opening quote.

    An unterminated literal runs to the end of the input.

    Returns:
        The unescaped value and the position after the closing quote
    """
    result = []
    length = len(text)

    while pos < length:
        char = text[pos]
        if char == '"':
            return "".join(result), pos + 1
        if char == "\\":
            pos += 1
            if pos < length:
                escaped = text[pos]
                result.append(ESCAPES.get(escaped, escaped))
        else:
            result.append(char)
        pos += 1

    return "".join(result), pos
