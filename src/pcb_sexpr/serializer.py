"""
S-expression serializer with width-aware pretty printing.

Each node is laid out either on a single line or with one child per
indented line. Short nodes, and any node that fits the width budget when
compact mode is on, stay on one line; everything else breaks. The closing
paren always follows the last child directly, never on a line of its own.

Usage:
    from pcb_sexpr.serializer import SerializeOptions, serialize

    serialize(node)                                   # defaults
    serialize(node, pretty=False)                     # one line
    serialize(node, SerializeOptions(indent="\\t", max_width=100))
"""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from typing import Optional

from .tokenizer import looks_like_number
from .values import Atom, QuotedString, SExpr, Value

NEEDS_QUOTING_PATTERN = re.compile(r'[\s()"\\]')

NIL = "nil"


@dataclass(frozen=True)
class SerializeOptions:
    """
    Serialization settings.

    Attributes:
        pretty: Break long or nested nodes over several lines
        indent: Text repeated once per nesting level in multi-line output
        max_width: Preferred maximum length of a single-line node
        quote_all: Quote every raw string value, even when not required
        compact: Keep any node that fits within max_width on one line
    """

    pretty: bool = True
    indent: str = "  "
    max_width: int = 80
    quote_all: bool = False
    compact: bool = True

    def replace(self, **changes) -> SerializeOptions:
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)


DEFAULT_OPTIONS = SerializeOptions()


def needs_quoting(text: str) -> bool:
    """
    Check whether a bare value must be quoted to survive re-parsing.

    True for the empty string, text containing whitespace, parentheses,
    a double quote or a backslash, and text that would read back as a number.
    """
    if not text:
        return True
    if NEEDS_QUOTING_PATTERN.search(text):
        return True
    return looks_like_number(text)


def quote_string(text: str) -> str:
    """Quote text, escaping backslash, double quote, newline, CR and tab."""
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def format_number(value: int | float) -> str:
    """
    Format a number for output.

    Integral values print without a fractional part (1.0 -> "1"); other
    values use six fractional digits with trailing zeros removed
    (0.1 -> "0.1").
    """
    if isinstance(value, int):
        return str(value)
    if value.is_integer():
        return str(int(value))
    text = f"{value:.6f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def serialize_value(value: Value, options: SerializeOptions, depth: int = 0) -> str:
    """Serialize any value at the given nesting depth."""
    if value is None:
        return NIL

    if isinstance(value, QuotedString):
        return quote_string(value.value)

    if isinstance(value, Atom):
        return quote_string(value.value) if needs_quoting(value.value) else value.value

    if isinstance(value, str):
        # Raw strings behave like atoms, but honor quote_all
        if options.quote_all or needs_quoting(value):
            return quote_string(value)
        return value

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)

    if isinstance(value, SExpr):
        return serialize_sexpr(value, options, depth)

    if isinstance(value, (list, tuple)):
        return " ".join(serialize_value(v, options, depth) for v in value)

    return str(value)


def single_line_length(node: SExpr, options: SerializeOptions) -> int:
    """Length of the node rendered on a single line."""
    # "(" + name + " "
    length = 1 + len(node.name) + 1

    for i, value in enumerate(node.values):
        if i > 0:
            length += 1
        if isinstance(value, SExpr):
            length += single_line_length(value, options)
        else:
            length += len(serialize_value(value, options))

    # ")"
    return length + 1


def is_simple(node: SExpr) -> bool:
    """True if no direct child is itself a node."""
    return not any(isinstance(v, SExpr) for v in node.values)


def should_use_single_line(node: SExpr, options: SerializeOptions) -> bool:
    """Decide whether a node is rendered on one line."""
    if not options.pretty:
        return True

    if single_line_length(node, options) > options.max_width:
        return False

    # Short atom-only nodes such as (unit 1) always stay inline
    if is_simple(node) and len(node.values) <= 2:
        return True

    return options.compact


def serialize_sexpr(node: SExpr, options: SerializeOptions, depth: int = 0) -> str:
    """Serialize a node, choosing single-line or multi-line layout."""
    parts = [f"({node.name}"]

    if should_use_single_line(node, options):
        for value in node.values:
            parts.append(" ")
            parts.append(serialize_value(value, options, depth + 1))
    else:
        next_indent = options.indent * (depth + 1)
        for value in node.values:
            parts.append("\n")
            parts.append(next_indent)
            parts.append(serialize_value(value, options, depth + 1))

    parts.append(")")
    return "".join(parts)


def serialize(
    value: Value, options: Optional[SerializeOptions] = None, **overrides
) -> str:
    """
    Serialize a node or any other value to text.

    Args:
        value: Node or value to serialize
        options: Serialization options (defaults apply when omitted)
        **overrides: Individual option overrides applied on top of options

    Returns:
        S-expression text
    """
    opts = options or DEFAULT_OPTIONS
    if overrides:
        opts = opts.replace(**overrides)
    return serialize_value(value, opts, 0)
