"""Render a Fountain script to HTML."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from fountainpress.cli.commands.parse import load_document
from fountainpress.cli.utils.cli_handler import CLIHandler, cli_command
from fountainpress.config import get_logger, get_settings_for_cli
from fountainpress.render import HtmlRenderer, render_page

logger = get_logger(__name__)
console = Console(stderr=True)


@cli_command
def html_command(
    path: Annotated[
        Path | None,
        typer.Argument(
            help="Fountain file to render (default: read from stdin)",
            dir_okay=False,
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write HTML to this file instead of stdout",
            dir_okay=False,
        ),
    ] = None,
    fragment: Annotated[
        bool,
        typer.Option(
            "--fragment",
            help="Emit only the script body fragment, without page wrapper",
        ),
    ] = False,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
        ),
    ] = None,
) -> None:
    """Render a Fountain script as screenplay-styled HTML."""
    handler = CLIHandler(console)
    settings = get_settings_for_cli(config_file=config)
    document = load_document(path, settings, handler)

    if fragment:
        html = HtmlRenderer().render(document).script
    else:
        html = render_page(
            document, include_title_page=settings.html_include_title_page
        )

    if output is None:
        print(html, end="" if html.endswith("\n") else "\n")
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    logger.info("Wrote HTML", file=str(output), bytes=len(html))
    console.print(f"[green]Wrote {output}[/green]")
