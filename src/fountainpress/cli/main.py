"""Main CLI entry point."""

from __future__ import annotations

import os
from typing import Annotated

import typer
from rich.console import Console

from fountainpress import __version__
from fountainpress.cli.commands import html_command, parse_command
from fountainpress.cli.formatters.json_formatter import JsonFormatter
from fountainpress.config import (
    clear_settings_cache,
    configure_logging,
    get_logger,
    get_settings,
)

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="fountainpress",
    help="Parse Fountain screenplays into structured documents",
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="parse")(parse_command)
app.command(name="html")(html_command)


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show fountainpress version."""
    version_info = {
        "name": "fountainpress",
        "version": __version__,
        "description": "Fountain screenplay markup to structured documents",
    }

    if json_output:
        print(JsonFormatter().format(version_info))
    else:
        console.print(f"fountainpress v{version_info['version']}")


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging (INFO level)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug", help="Enable debug logging", envvar="FOUNTAINPRESS_DEBUG"
        ),
    ] = False,
) -> None:
    """Configure global options."""
    if debug:
        os.environ["FOUNTAINPRESS_LOG_LEVEL"] = "DEBUG"
        os.environ["FOUNTAINPRESS_DEBUG"] = "true"
    elif verbose:
        os.environ["FOUNTAINPRESS_LOG_LEVEL"] = "INFO"
    else:
        return

    # Force reconfiguration of logging with the new level
    clear_settings_cache()
    configure_logging(get_settings())
    if debug:
        logger.debug("Debug mode enabled")
    else:
        logger.info("Verbose mode enabled")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
