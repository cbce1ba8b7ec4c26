"""Main entry point for the fountainpress CLI when run as a module."""

from fountainpress.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
