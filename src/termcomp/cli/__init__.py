"""Command-line entry point."""

from termcomp.cli.main import main

__all__ = ["main"]
