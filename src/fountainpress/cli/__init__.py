"""fountainpress command line interface."""

from fountainpress.cli.main import app, main

__all__ = ["app", "main"]
