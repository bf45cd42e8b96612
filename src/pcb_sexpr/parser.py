"""
Recursive-descent s-expression parser.

Consumes the token list from the tokenizer with one token of lookahead and
builds a single SExpr tree.

Usage:
    from pcb_sexpr.parser import parse

    node = parse('(property "Value" "10k" (at 1 2))')
    node.name               # "property"
    node.get_string_value(1)  # "10k"
"""

from __future__ import annotations

import logging

from .exceptions import ParseError
from .tokenizer import Token, TokenType, tokenize
from .values import Atom, QuotedString, SExpr, Value

logger = logging.getLogger(__name__)

# Name given to "()", which has no name token of its own
EMPTY_LIST_NAME = "list"


class Parser:
    """S-expression parser over a token list."""

    def __init__(self, tokens: list[Token]):
        self.tokens = tokens
        self.index = 0

    @classmethod
    def from_text(cls, text: str) -> Parser:
        """Tokenize text and return a parser over the tokens."""
        return cls(tokenize(text))

    def parse(self, strict: bool = False) -> SExpr:
        """
        Parse the token list into one node.

        Args:
            strict: Reject content after the first s-expression instead
                of logging a warning and ignoring it

        Raises:
            ParseError: If the top-level value is not a node or the
                grammar is violated anywhere inside it, or in strict mode
                if anything follows the first node
        """
        logger.debug("Parsing %d tokens", len(self.tokens))
        result = self.parse_value()

        if not isinstance(result, SExpr):
            raise ParseError(
                "Input does not contain a valid s-expression",
                found=type(result).__name__,
                suggestions=["Wrap the content in a list, e.g. (name value ...)"],
            )

        trailing = self.peek()
        if trailing.type is not TokenType.EOF:
            if strict:
                raise ParseError(
                    "Unexpected content after the first s-expression",
                    position=trailing.position,
                    found=trailing.type.value,
                    suggestions=["Keep a single top-level list per file"],
                )
            logger.warning(
                "Ignoring content after the first s-expression at position %d",
                trailing.position,
            )
        return result

    def peek(self) -> Token:
        """Return the next token without consuming it."""
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        end = self.tokens[-1].position if self.tokens else 0
        return Token(TokenType.EOF, "", end)

    def advance(self) -> Token:
        """Consume and return the next token."""
        token = self.peek()
        self.index += 1
        return token

    def parse_value(self) -> Value:
        """Parse a single value starting at the current token."""
        token = self.peek()

        if token.type is TokenType.LPAREN:
            return self._parse_list()

        if token.type is TokenType.STRING:
            self.advance()
            return QuotedString(token.value)

        if token.type is TokenType.NUMBER:
            self.advance()
            return float(token.value)

        if token.type is TokenType.SYMBOL:
            self.advance()
            # nil reads back as an empty raw string, not as None
            if token.value == "nil":
                return ""
            return Atom(token.value)

        raise ParseError(
            f"Unexpected token type: {token.type.value}",
            position=token.position,
            found=token.type.value,
        )

    def _parse_list(self) -> SExpr:
        """Parse ``(name value...)`` starting at an LPAREN token."""
        open_token = self.advance()

        if self.peek().type is TokenType.RPAREN:
            self.advance()
            return SExpr(EMPTY_LIST_NAME)

        name_token = self.advance()
        if name_token.type not in (TokenType.SYMBOL, TokenType.STRING):
            raise ParseError(
                "Expected symbol or string for s-expression name, "
                f"got {name_token.type.value}",
                position=name_token.position,
                found=name_token.type.value,
            )

        node = SExpr(name_token.value)

        while self.peek().type not in (TokenType.RPAREN, TokenType.EOF):
            node.add(self.parse_value())

        if self.peek().type is not TokenType.RPAREN:
            raise ParseError(
                "Expected closing parenthesis",
                context={"list": node.name, "opened_at": open_token.position},
                position=self.peek().position,
                found=TokenType.EOF.value,
                suggestions=["Check for a missing ')' at the end of the input"],
            )
        self.advance()

        return node


def parse(text: str) -> SExpr:
    """Parse s-expression text into a node."""
    return Parser.from_text(text).parse()
