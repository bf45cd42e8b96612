"""
Convenience constructors for common s-expression shapes.

Usage:
    from pcb_sexpr.builders import at, property_node, sexpr, uuid_node, xy

    sym = sexpr("symbol",
        at(100, 50, 90),
        property_node("Reference", "R1", at(100, 45)),
        uuid_node("0f3c..."),
    )
    pts = sexpr("pts", xy(0, 0), xy(10, 0))
"""

from __future__ import annotations

from typing import Optional

from .values import Atom, QuotedString, SExpr, Value


def sexpr(name: str, *values: Value) -> SExpr:
    """Build a node."""
    return SExpr(name, *values)


def quoted(text: str) -> QuotedString:
    """Wrap text so it is always emitted quoted."""
    return QuotedString(text)


def atom(text: str) -> Atom:
    """Wrap text as an atom, quoted only when needed."""
    return Atom(text)


def xy(x: float, y: float) -> SExpr:
    """Build an (xy X Y) coordinate node."""
    return SExpr("xy", x, y)


def at(x: float, y: float, angle: Optional[float] = None) -> SExpr:
    """Build an (at X Y [ANGLE]) position node.

    The angle is emitted whenever it is given, including 0.
    """
    if angle is not None:
        return SExpr("at", x, y, angle)
    return SExpr("at", x, y)


def property_node(key: str, value: str, *attrs: Value) -> SExpr:
    """Build a (property "KEY" "VALUE" ...) node; key and value are always quoted."""
    return SExpr("property", QuotedString(key), QuotedString(value), *attrs)


def uuid_node(uuid: str) -> SExpr:
    """Build a (uuid "UUID") node."""
    return SExpr("uuid", QuotedString(uuid))
