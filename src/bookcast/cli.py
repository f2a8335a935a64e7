"""CLI entry point for bookcast."""

import sys
from enum import Enum
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from bookcast.config.logging import setup_logging
from bookcast.config.manager import ConfigManager
from bookcast.pipeline import FeedGenerator
from bookcast.utils.errors import BookcastError, UsageError
from bookcast.utils.paths import printable

app = typer.Typer(
    name="bookcast",
    help="Turn a directory of audio files into a podcast RSS feed",
    add_completion=False,
)
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


class CoverChoice(str, Enum):
    """Cover art tie-break choices."""

    listing = "listing"
    sorted = "sorted"


def _fail(error: BookcastError) -> NoReturn:
    """Print an error to stderr and exit 1."""
    err_console.print(f"[red]✗[/red] Error: {escape(printable(str(error)))}")
    if error.suggestion:
        err_console.print(f"[dim]  {escape(error.suggestion)}[/dim]")
    sys.exit(1)


def _version_callback(value: bool) -> None:
    if value:
        from bookcast import __version__

        console.print(f"[bold cyan]bookcast[/bold cyan] v{__version__}")
        raise typer.Exit()


@app.command()
def main(
    directories: list[Path] | None = typer.Argument(
        None, help="Directory of audio files", show_default=False
    ),
    base_url: str | None = typer.Option(
        None, "--base-url", help="Base URL for hosting the files (required)"
    ),
    cover_selection: CoverChoice | None = typer.Option(
        None,
        "--cover-selection",
        help="Cover art choice when several images exist: listing or sorted",
    ),
    config_file: Path | None = typer.Option(
        None, "--config", help="Path to a YAML config file"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version information",
    ),
) -> None:
    """Generate podcast.rss inside DIRECTORY.

    Examples:
        bookcast --base-url https://example.com/audiobooks ./audiobook1
    """
    try:
        if not base_url:
            raise UsageError(
                "--base-url is required",
                suggestion="Usage: bookcast --base-url <url> <directory>",
            )
        if not directories or len(directories) != 1:
            raise UsageError(
                "Exactly one directory is required",
                suggestion="Usage: bookcast --base-url <url> <directory>",
            )
        directory = directories[0]

        config = ConfigManager(config_file).load_config()
        if cover_selection is not None:
            config = config.model_copy(update={"cover_selection": cover_selection.value})

        setup_logging(verbose=verbose, log_file=log_file, level=config.log_level)

        result = FeedGenerator(config=config).run(directory, base_url)

    except BookcastError as e:
        _fail(e)

    output_path = escape(printable(str(result.output_path)))
    console.print(f"[green]✓[/green] Generated RSS feed: {output_path}")
    console.print(f"Found {result.episode_count} episodes")


if __name__ == "__main__":
    app()
