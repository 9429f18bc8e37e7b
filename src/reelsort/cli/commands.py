"""CLI commands for reelsort.

This module implements the user-facing commands:
- organize: classify every video file under a source tree and move, copy or
  symlink it into the library layout under a destination root.
- version: print the installed version.

Design:
- Typer declares the options; Annotated aliases keep the command signature
  readable.
- All output goes through a Rich Console obtained from ConsoleManager, so the
  ``--no-rich`` flag / ``REELSORT_NO_RICH`` is honoured everywhere.
- Only startup failures (config, credential exchange, missing source) produce a
  non-zero exit code. Per-file failures are reported and the run still exits 0.
"""

import asyncio
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from reelsort.cli.console import ENV_DISABLE_RICH, ConsoleManager
from reelsort.cli.renderer import render_results
from reelsort.core.pipeline import Pipeline
from reelsort.core.scanner import iter_video_files
from reelsort.errors import AuthError, ConfigError
from reelsort.metadata.base import (
    CombinedMetadataClient,
    MetadataClient,
    NullMetadataClient,
)
from reelsort.metadata.clients.tmdb import TMDBClient
from reelsort.metadata.clients.tvdb import TVDBClient, TVDBTokenProvider
from reelsort.metadata.resolver import MetadataResolver
from reelsort.models.core import OperationMode
from reelsort.rules.plex import PlexRuleSet
from reelsort.utils.config import DEFAULT_CONFIG_PATH, load_config
from reelsort.utils.debug import setup_logger

app = typer.Typer(
    name="reelsort",
    help="Classify loose video files and organize them into a media library.",
    add_completion=False,
)


class ExitCode(int, Enum):
    """Exit codes for CLI commands."""

    SUCCESS = 0
    ERROR = 1


SOURCE = Annotated[
    Path,
    typer.Option("--source", "-s", help="Source directory to scan for video files"),
]
DEST = Annotated[
    Path,
    typer.Option("--dest", "-d", help="Destination library root"),
]
OPERATION = Annotated[
    OperationMode,
    typer.Option(
        "--op",
        "-o",
        case_sensitive=False,
        help="Operation: move, copy, or symlink",
    ),
]
DRY_RUN = Annotated[
    bool,
    typer.Option("--dry-run", help="Show what would be done without making changes"),
]
CONFIG = Annotated[
    Path,
    typer.Option("--config", "-c", help="Path to the JSON config file"),
]
NO_METADATA = Annotated[
    bool,
    typer.Option(
        "--no-metadata",
        help="Skip provider lookups (no config file or credentials needed)",
    ),
]
DEBUG = Annotated[
    bool,
    typer.Option("--debug", help="Enable debug logging"),
]


@dataclass
class OrganizeOptions:
    """Options for the organize command."""

    source: Path
    dest: Path
    operation: OperationMode = OperationMode.MOVE
    dry_run: bool = False
    config: Path = DEFAULT_CONFIG_PATH
    no_metadata: bool = False


@app.callback()
def callback(
    no_rich: bool = typer.Option(
        False,
        "--no-rich",
        help=(
            "Disable Rich coloured output. "
            "Can also be set with the REELSORT_NO_RICH environment variable."
        ),
    ),
) -> None:
    """ReelSort - classify and organize video files."""
    if no_rich:
        os.environ[ENV_DISABLE_RICH] = "1"


async def build_metadata_client(options: OrganizeOptions) -> MetadataClient:
    """Load credentials and return the client used for enrichment.

    Raises:
        ConfigError: If the config file is unreadable or malformed.
        AuthError: If the TVDB credential exchange fails.
    """
    if options.no_metadata:
        return NullMetadataClient()
    config = load_config(options.config)
    context = config.provider_context()
    token = await TVDBTokenProvider(config.tvdb_api_key, config.timeout).get_token()
    context = context.with_tvdb_token(token)
    return CombinedMetadataClient(
        movies=TMDBClient(context), series=TVDBClient(context)
    )


async def _organize_impl(options: OrganizeOptions, console: Console) -> ExitCode:
    """Implementation of the organize command."""
    try:
        client = await build_metadata_client(options)
    except ConfigError as e:
        console.print(f"[red]Error loading config: {e}[/red]")
        return ExitCode.ERROR
    except AuthError as e:
        console.print(f"[red]Error getting TVDB token: {e}[/red]")
        return ExitCode.ERROR

    rule_set = PlexRuleSet()
    # Only the library folders are skipped, so dest may equal or contain source.
    library = rule_set.library_dirs(options.dest.absolute())
    try:
        files = list(iter_video_files(options.source, exclude=library))
    except (FileNotFoundError, NotADirectoryError) as e:
        console.print(f"[red]Error: {e}[/red]")
        return ExitCode.ERROR

    pipeline = Pipeline(
        destination=options.dest,
        mode=options.operation,
        dry_run=options.dry_run,
        resolver=MetadataResolver(client),
        rule_set=rule_set,
        console=console,
    )
    summary = await pipeline.run(files)
    render_results(summary, console=console)
    return ExitCode.SUCCESS


@app.command()
def organize(
    source: SOURCE = Path("."),
    dest: DEST = Path("."),
    operation: OPERATION = OperationMode.MOVE,
    dry_run: DRY_RUN = False,
    config: CONFIG = DEFAULT_CONFIG_PATH,
    no_metadata: NO_METADATA = False,
    debug: DEBUG = False,
) -> None:
    """Classify video files under SOURCE and relocate them under DEST."""
    logger = setup_logger(debug)
    options = OrganizeOptions(
        source=source,
        dest=dest,
        operation=operation,
        dry_run=dry_run,
        config=config,
        no_metadata=no_metadata,
    )
    logger.debug("Source directory: %s", source)
    logger.debug("Destination directory: %s", dest)
    logger.debug("Operation: %s", operation.value)
    logger.debug("Dry run: %s", dry_run)
    with ConsoleManager() as console:
        exit_code = asyncio.run(_organize_impl(options, console))
    logger.debug("Processing completed")
    if exit_code != ExitCode.SUCCESS:
        raise typer.Exit(int(exit_code))


@app.command()
def version() -> None:
    """Show the version of reelsort."""
    from reelsort.__about__ import __version__

    with ConsoleManager() as console:
        console.print(f"ReelSort version: [bold]{__version__}[/bold]")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
