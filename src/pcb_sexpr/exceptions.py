"""
Exception hierarchy for pcb-sexpr.

Every error carries a message plus optional context and suggestions, so
callers (and the CLI) can show where parsing failed and what to try next.

Example::

    from pcb_sexpr.exceptions import ParseError

    raise ParseError(
        "Expected closing parenthesis",
        position=118,
        suggestions=["Check for a missing ')' near the end of the input"],
    )
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Union


class SExprError(Exception):
    """
    Base exception for all pcb-sexpr errors.

    Attributes:
        message: Short description of the failure
        context: Dictionary of contextual information (file, position, etc.)
        suggestions: List of actionable suggestions for fixing the error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context and suggestions."""
        parts = [self.message]

        if self.context:
            parts.append("\n\nContext:")
            for key, value in self.context.items():
                parts.append(f"\n  {key}: {value}")

        if self.suggestions:
            parts.append("\n\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"\n  - {suggestion}")

        return "".join(parts)

    def __str__(self) -> str:
        return self._format_message()


class ParseError(SExprError):
    """
    S-expression text could not be parsed.

    Covers every grammar violation: a top-level value that is not a list,
    an invalid list name, a missing closing parenthesis, or an unexpected
    token where a value was expected. Parsing never returns a partial tree.

    Example::

        raise ParseError(
            "Expected symbol or string for s-expression name, got NUMBER",
            position=1,
            found="NUMBER",
        )
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        position: Optional[int] = None,
        found: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        file_path: Optional[Union[str, Path]] = None,
    ):
        # Build context from convenience parameters
        ctx = context or {}
        if file_path and "file" not in ctx:
            ctx["file"] = str(file_path)
        if line is not None and "line" not in ctx:
            ctx["line"] = line
        if column is not None and "column" not in ctx:
            ctx["column"] = column
        if position is not None and "position" not in ctx:
            ctx["position"] = position
        if found is not None and "found" not in ctx:
            ctx["found"] = found

        super().__init__(message, ctx, suggestions)

    def with_file(self, file_path: Union[str, Path]) -> ParseError:
        """Return a copy of this error with the source file added to its context."""
        ctx = {"file": str(file_path)}
        ctx.update(self.context)
        return ParseError(self.message, context=ctx, suggestions=self.suggestions)


class TokenizeError(SExprError):
    """
    Tokenizing failed.

    The tokenizer is lenient: malformed input becomes symbol or number
    tokens that the parser later rejects, so this is never raised. It is
    kept so callers can catch both codec stages by name.
    """

    pass


class ConfigError(SExprError):
    """
    Configuration file is invalid or unreadable.

    Example::

        raise ConfigError(
            "Invalid value for format.max_width",
            context={"file": ".pcb-sexpr.toml", "expected": "int", "got": "str"},
        )
    """

    pass


class FileNotFoundError(SExprError):
    """
    Input file was not found.

    Example::

        raise FileNotFoundError(
            "S-expression file not found",
            context={"file": "board.kicad_sym"},
            suggestions=["Check that the file path is correct"],
        )
    """

    pass


__all__ = [
    "SExprError",
    "ParseError",
    "TokenizeError",
    "ConfigError",
    "FileNotFoundError",
]
