"""
pcb-sexpr: s-expression codec for hardware design files.

Parses parenthesized s-expression text into a tree of SExpr nodes, lets
callers edit the tree, and writes it back with width-aware pretty printing.

Modules:
    values: Value model (SExpr, Atom, QuotedString)
    tokenizer: Text to token list
    parser: Token list to SExpr tree
    serializer: SExpr tree to text, with layout options
    builders: Helpers for common node shapes
    config: TOML configuration for the formatter
    io: File loading and saving

Quick Start::

    from pcb_sexpr import SExpr, QuotedString, at

    sym = SExpr.parse('(symbol (lib_id "Device:R") (at 10 20 0))')
    sym.find_child("at").remove_where(lambda v, i: i == 2)
    sym.child("property", QuotedString("Reference"), QuotedString("R1"), at(10, 15))
    print(sym.to_string(max_width=60))
"""

__version__ = "0.1.0"

from pcb_sexpr.builders import at, atom, property_node, quoted, sexpr, uuid_node, xy
from pcb_sexpr.exceptions import ConfigError, ParseError, SExprError, TokenizeError
from pcb_sexpr.io import load, parse_file, save
from pcb_sexpr.parser import Parser, parse
from pcb_sexpr.serializer import (
    SerializeOptions,
    format_number,
    needs_quoting,
    quote_string,
    serialize,
)
from pcb_sexpr.tokenizer import Token, TokenType, tokenize
from pcb_sexpr.values import Atom, QuotedString, SExpr, Value

__all__ = [
    "__version__",
    # Value model
    "SExpr",
    "Atom",
    "QuotedString",
    "Value",
    # Codec
    "tokenize",
    "Token",
    "TokenType",
    "Parser",
    "parse",
    "SerializeOptions",
    "serialize",
    "needs_quoting",
    "quote_string",
    "format_number",
    # Builders
    "sexpr",
    "quoted",
    "atom",
    "xy",
    "at",
    "property_node",
    "uuid_node",
    # Files
    "parse_file",
    "load",
    "save",
    # Errors
    "SExprError",
    "ParseError",
    "TokenizeError",
    "ConfigError",
]
