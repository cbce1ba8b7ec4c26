"""fountainpress CLI commands."""

from __future__ import annotations

from fountainpress.cli.commands.html import html_command
from fountainpress.cli.commands.parse import parse_command

__all__ = ["html_command", "parse_command"]
