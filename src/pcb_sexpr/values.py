"""
S-expression value model.

A tree is built from SExpr nodes whose children are any of the value kinds
below. Nodes are mutable; Atom and QuotedString are immutable wrappers.

Usage:
    from pcb_sexpr import SExpr, Atom, QuotedString

    sym = SExpr("symbol", QuotedString("Device:R"))
    sym.child("at", 100, 50, 0)
    sym.child("property", QuotedString("Reference"), QuotedString("R1"))

    print(sym.to_string())
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterator, Optional, Union

if TYPE_CHECKING:
    from .serializer import SerializeOptions


@dataclass(frozen=True)
class Atom:
    """Bare symbolic value, quoted on output only when its text requires it."""

    value: str


@dataclass(frozen=True)
class QuotedString:
    """Text value that is always emitted quoted."""

    value: str


# A bare str is the legacy raw string (serialized like an Atom).
# list/tuple is a plain sequence, emitted inline without parentheses.
# None is an absent value, emitted as nil.
Value = Union[
    int,
    float,
    str,
    Atom,
    QuotedString,
    "SExpr",
    list["Value"],
    tuple["Value", ...],
    None,
]


class SExpr:
    """
    Named s-expression node: ``(name value...)``.

    The name is emitted verbatim and never quoted. Children keep insertion
    order, which is significant and survives a serialize/parse round trip.

    Examples:
        (xy 10 20)
        -> SExpr("xy", 10, 20)

        (property "Value" "10k" (at 1 2))
        -> SExpr("property", QuotedString("Value"), QuotedString("10k"),
                 SExpr("at", 1, 2))
    """

    def __init__(self, name: str, *values: Value):
        self._name = name
        self._values: list[Value] = list(values)

    @property
    def name(self) -> str:
        """Name of this node."""
        return self._name

    @property
    def values(self) -> list[Value]:
        """Child values (the live list; do not mutate it directly)."""
        return self._values

    def get_string_value(self, index: int) -> Optional[str]:
        """
        Get a child as plain text.

        Works for raw strings, Atom and QuotedString children. Returns None
        for any other value kind or when index is out of range.
        """
        if index < 0 or index >= len(self._values):
            return None
        value = self._values[index]
        if isinstance(value, str):
            return value
        if isinstance(value, (Atom, QuotedString)):
            return value.value
        return None

    def add(self, *values: Value) -> SExpr:
        """Append values to this node. Returns self for chaining."""
        self._values.extend(values)
        return self

    def remove_where(self, predicate: Callable[[Value, int], bool]) -> SExpr:
        """
        Remove children for which predicate(value, index) is true.

        Indices passed to the predicate are positions before removal.
        Surviving children keep their relative order. Returns self.
        """
        self._values[:] = [
            value for index, value in enumerate(self._values) if not predicate(value, index)
        ]
        return self

    def child(self, name: str, *values: Value) -> SExpr:
        """Create a child node, append it, and return the child."""
        node = SExpr(name, *values)
        self._values.append(node)
        return node

    def find_child(self, name: str) -> Optional[SExpr]:
        """Find the first direct child node with the given name."""
        for value in self._values:
            if isinstance(value, SExpr) and value.name == name:
                return value
        return None

    def find_children(self, name: str) -> list[SExpr]:
        """Find all direct child nodes with the given name, in order."""
        return [
            value for value in self._values if isinstance(value, SExpr) and value.name == name
        ]

    def to_string(self, options: Optional[SerializeOptions] = None, **overrides) -> str:
        """
        Serialize this node to text.

        Args:
            options: Serialization options (defaults apply when omitted)
            **overrides: Individual option overrides, e.g. ``pretty=False``
        """
        from .serializer import serialize

        return serialize(self, options, **overrides)

    @classmethod
    def create(cls, name: str, *values: Value) -> SExpr:
        """Create a node (same as calling the constructor)."""
        return cls(name, *values)

    @staticmethod
    def serialize(value: Value, options: Optional[SerializeOptions] = None) -> str:
        """Serialize any value, not only nodes."""
        from .serializer import serialize

        return serialize(value, options)

    @classmethod
    def parse(cls, text: str) -> SExpr:
        """
        Parse s-expression text into a node.

        Raises:
            ParseError: If the text is not a single well-formed list
        """
        from .parser import parse

        return parse(text)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Value]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SExpr):
            return NotImplemented
        return self._name == other._name and self._values == other._values

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"SExpr(name={self._name!r}, values=[{len(self._values)} items])"
