"""Command-line interface for reelsort.

This package provides the Typer app and the Rich console helpers used by all
CLI commands.

- app: The Typer application object (``reelsort`` console script).
- ConsoleManager: yields a Console honouring ``--no-rich`` / REELSORT_NO_RICH.
"""

from reelsort.cli.commands import app, main
from reelsort.cli.console import ConsoleManager

__all__ = ["ConsoleManager", "app", "main"]
