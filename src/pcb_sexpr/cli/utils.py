"""Shared utilities for CLI commands."""

from __future__ import annotations

import logging
import sys
import traceback
from typing import TYPE_CHECKING

from pcb_sexpr.exceptions import SExprError

if TYPE_CHECKING:
    from rich.console import Console

__all__ = ["configure_logging", "format_error", "print_error", "get_error_console"]

# Module-level console for error output, created lazily
_error_console: Console | None = None


def get_error_console() -> Console:
    """Get or create the Rich console for error output.

    The console writes to stderr and is cached for reuse.
    """
    global _error_console
    if _error_console is None:
        from rich.console import Console

        _error_console = Console(stderr=True, force_terminal=None)
    return _error_console


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging for a CLI run."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def print_error(
    e: Exception,
    verbose: bool = False,
    use_rich: bool | None = None,
) -> None:
    """
    Print an exception with Rich formatting when available.

    Uses Rich markup on TTY terminals and plain text otherwise
    (pipes, redirected output, test capture).

    Args:
        e: The exception to print
        verbose: If True, print the full stack trace instead
        use_rich: Override automatic TTY detection (None = auto-detect)
    """
    console = get_error_console()

    if use_rich is None:
        use_rich = console.is_terminal

    if verbose:
        # Always use plain text for stack traces
        print(traceback.format_exc(), file=sys.stderr)
        return

    if use_rich:
        from rich.markup import escape

        detail = str(e) if isinstance(e, SExprError) else f"{type(e).__name__}: {e}"
        console.print(f"[bold red]Error:[/bold red] {escape(detail)}")
    else:
        print(format_error(e), file=sys.stderr)


def format_error(e: Exception) -> str:
    """
    Format an exception for user-friendly display (plain text).

    Args:
        e: The exception to format

    Returns:
        Formatted error message string
    """
    if isinstance(e, SExprError):
        return f"Error: {e}"

    # For other exceptions, show type and message
    return f"Error: {type(e).__name__}: {e}"
