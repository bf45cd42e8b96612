"""
File I/O for s-expression files.
"""

import logging
from pathlib import Path
from typing import Optional

from pcb_sexpr.exceptions import FileNotFoundError as SExprFileNotFoundError
from pcb_sexpr.exceptions import ParseError
from pcb_sexpr.parser import Parser
from pcb_sexpr.serializer import SerializeOptions, serialize
from pcb_sexpr.values import SExpr

logger = logging.getLogger(__name__)


def read_source(path: str | Path) -> str:
    """
    Read an s-expression file as UTF-8 text.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.is_file():
        raise SExprFileNotFoundError(
            "S-expression file not found",
            context={"file": str(path)},
            suggestions=["Check that the file path is correct"],
        )

    text = path.read_text(encoding="utf-8")
    logger.debug("Read %d characters from %s", len(text), path)
    return text


def parse_text(text: str, path: str | Path, strict: bool = False) -> SExpr:
    """Parse text read from ``path``, adding the path to any ParseError."""
    try:
        return Parser.from_text(text).parse(strict=strict)
    except ParseError as e:
        raise e.with_file(path) from e


def parse_file(path: str | Path, strict: bool = False) -> SExpr:
    """
    Parse an s-expression file.

    Args:
        path: Path to the file (read as UTF-8)
        strict: Raise ParseError for content after the root node
            instead of ignoring it

    Returns:
        Parsed root node

    Raises:
        FileNotFoundError: If the file doesn't exist
        ParseError: If the content is not valid; the file path is added
            to the error context
    """
    return parse_text(read_source(path), path, strict=strict)


load = parse_file


def save(node: SExpr, path: str | Path, options: Optional[SerializeOptions] = None) -> None:
    """
    Serialize a node and write it to a file with a trailing newline.

    Args:
        node: Root node to write
        path: Destination path
        options: Serialization options (defaults apply when omitted)
    """
    path = Path(path)
    text = serialize(node, options) + "\n"
    path.write_text(text, encoding="utf-8")
    logger.debug("Wrote %d characters to %s", len(text), path)
