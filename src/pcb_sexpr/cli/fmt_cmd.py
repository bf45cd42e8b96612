"""
Format and check commands for pcb-sexpr.

Reformats s-expression files using the configured layout rules, or only
checks that they parse.

Usage:
    pcb-sexpr fmt board.kicad_sym              Print formatted output
    pcb-sexpr fmt -w board.kicad_sym           Rewrite the file in place
    pcb-sexpr fmt --check *.kicad_sym          Exit 1 if any file would change
    pcb-sexpr check *.kicad_sym                Exit 1 if any file fails to parse
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pcb_sexpr.cli.utils import configure_logging, print_error
from pcb_sexpr.config import Config
from pcb_sexpr.exceptions import SExprError
from pcb_sexpr.io import parse_file, parse_text, read_source
from pcb_sexpr.serializer import SerializeOptions, serialize

__all__ = ["main", "check_main", "format_file", "create_parser"]

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the fmt command."""
    parser = argparse.ArgumentParser(
        prog="pcb-sexpr fmt",
        description="Reformat s-expression files",
    )
    parser.add_argument("files", nargs="+", help="Files to format")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--check",
        action="store_true",
        help="Don't write output; exit 1 if any file is not formatted",
    )
    mode.add_argument("-w", "--write", action="store_true", help="Rewrite files in place")
    parser.add_argument("--indent", type=int, metavar="N", help="Indent with N spaces")
    parser.add_argument("--max-width", type=int, metavar="N", help="Preferred line width")
    parser.add_argument(
        "--no-pretty",
        dest="pretty",
        action="store_false",
        default=None,
        help="Write each file on a single line",
    )
    parser.add_argument(
        "--quote-all",
        dest="quote_all",
        action="store_true",
        default=None,
        help="Quote every raw string value",
    )
    parser.add_argument(
        "--no-compact",
        dest="compact",
        action="store_false",
        default=None,
        help="Only keep short atom-only lists on one line",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def format_file(path: Path, options: SerializeOptions) -> tuple[str, str]:
    """
    Format one file.

    Content after the root node raises ParseError.

    Returns:
        (original text, formatted text); formatted text ends with a newline
    """
    original = read_source(path)
    root = parse_text(original, path, strict=True)
    formatted = serialize(root, options) + "\n"
    return original, formatted


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the fmt command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.load()
    except SExprError as e:
        print_error(e)
        return 1

    configure_logging(args.verbose or config.defaults.verbose)

    options = config.serialize_options(
        pretty=args.pretty,
        indent=" " * args.indent if args.indent is not None else None,
        max_width=args.max_width,
        quote_all=args.quote_all,
        compact=args.compact,
    )
    logger.debug("Formatting with %s", options)

    exit_code = 0
    for name in args.files:
        path = Path(name)
        try:
            original, formatted = format_file(path, options)
        except SExprError as e:
            print_error(e)
            exit_code = 1
            continue

        if args.check:
            if original != formatted:
                print(f"Would reformat: {path}")
                exit_code = 1
        elif args.write:
            if original != formatted:
                path.write_text(formatted, encoding="utf-8")
                logger.info("Reformatted %s", path)
        else:
            sys.stdout.write(formatted)

    return exit_code


def check_main(argv: list[str] | None = None) -> int:
    """Main entry point for the check command."""
    parser = argparse.ArgumentParser(
        prog="pcb-sexpr check",
        description="Check that s-expression files parse",
    )
    parser.add_argument("files", nargs="+", help="Files to check")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    try:
        config = Config.load()
    except SExprError as e:
        print_error(e)
        return 1

    configure_logging(args.verbose or config.defaults.verbose)

    exit_code = 0
    for name in args.files:
        try:
            root = parse_file(name, strict=True)
        except SExprError as e:
            print_error(e)
            exit_code = 1
            continue
        print(f"{name}: ok ({root.name}, {len(root)} children)")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
