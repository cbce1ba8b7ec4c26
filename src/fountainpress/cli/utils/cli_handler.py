"""Unified CLI handler for standardized error handling and input."""

from __future__ import annotations

import sys
from collections.abc import Callable
from functools import wraps
from typing import Any

import typer
from rich.console import Console

from fountainpress.cli.formatters.json_formatter import JsonFormatter
from fountainpress.config import get_logger
from fountainpress.exceptions import FountainPressError

logger = get_logger(__name__)


class CLIHandler:
    """Unified handler for CLI commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize CLI handler.

        Args:
            console: Rich console for output
        """
        self.console = console or Console()
        self.json_formatter = JsonFormatter()

    def handle_error(
        self, error: Exception, json_output: bool = False, exit_code: int = 1
    ) -> None:
        """Display an error consistently and exit.

        Args:
            error: Exception to handle
            json_output: Whether to output JSON
            exit_code: Exit code to use

        Raises:
            typer.Exit: Always
        """
        logger.error("Command failed", error=str(error), exc_info=error)

        if json_output:
            print(self.json_formatter.format_error_response(error, exit_code))
        else:
            message = str(error)
            if not isinstance(error, FountainPressError):
                message = f"Error: {message}"
            self.console.print(message, style="red", markup=False, highlight=False)

        raise typer.Exit(exit_code)

    def read_stdin(self) -> str:
        """Read screenplay text from stdin.

        Raises:
            typer.Exit: If stdin is a terminal
        """
        if sys.stdin.isatty():
            self.console.print(
                "[red]Error: No input provided. Pass a file or pipe from stdin[/red]"
            )
            raise typer.Exit(1)
        return sys.stdin.read()


def cli_command(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator for CLI commands with standardized error handling."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except Exception as e:
            CLIHandler().handle_error(e, kwargs.get("json_output", False))

    return wrapper
