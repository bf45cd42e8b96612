"""
Command-line interface for pcb-sexpr.

Provides commands via the `pcb-sexpr` entry point:

    pcb-sexpr fmt <files>      - Reformat s-expression files
    pcb-sexpr check <files>    - Check that files parse
    pcb-sexpr config           - Show or initialize configuration

Examples:
    pcb-sexpr fmt board.kicad_sym
    pcb-sexpr fmt --check --max-width 100 lib/*.kicad_sym
    pcb-sexpr fmt -w --indent 4 board.kicad_sym
    pcb-sexpr check lib/*.kicad_sym
    pcb-sexpr config --show
"""

import argparse
import sys
from typing import List, Optional

from pcb_sexpr import __version__

__all__ = ["main"]

COMMANDS = {
    "fmt": "Reformat s-expression files",
    "check": "Check that s-expression files parse",
    "config": "Show or initialize configuration",
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for pcb-sexpr CLI."""
    parser = argparse.ArgumentParser(
        prog="pcb-sexpr",
        description="S-expression formatter for hardware design files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--version", action="version", version=f"pcb-sexpr {__version__}")
    parser.add_argument("command", nargs="?", choices=sorted(COMMANDS), help="Command to run")
    parser.add_argument("args", nargs=argparse.REMAINDER, help=argparse.SUPPRESS)

    if argv is None:
        argv = sys.argv[1:]

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    if args.command == "fmt":
        from pcb_sexpr.cli.fmt_cmd import main as fmt_cmd

        return fmt_cmd(args.args)

    elif args.command == "check":
        from pcb_sexpr.cli.fmt_cmd import check_main

        return check_main(args.args)

    elif args.command == "config":
        from pcb_sexpr.cli.config_cmd import main as config_cmd

        return config_cmd(args.args)

    return 0


if __name__ == "__main__":
    sys.exit(main())
