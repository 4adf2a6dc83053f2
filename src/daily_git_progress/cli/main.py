"""Global options shared by every subcommand."""

from pathlib import Path
from typing import Optional

import typer

from ..config import load_config
from ..exceptions import DailyProgressError
from ..logging_config import setup_logging
from . import app
from ._common import console


@app.callback(invoke_without_command=True, no_args_is_help=False)
def main(
    ctx: typer.Context,
    path: Optional[Path] = typer.Option(
        None,
        "-C",
        "--path",
        help="Repository to inspect (default: current directory)",
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every git command",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Show what happened in a git repository on one day.

    [bold cyan]Examples:[/bold cyan]

      daily-git-progress commits

      daily-git-progress files --date yesterday --tree

      daily-git-progress -C /path/to/repo timeline --date 2026-01-15
    """
    from .. import __version__

    if version:
        console.print(
            f"[bold cyan]Daily Git Progress[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit(0)

    try:
        settings = load_config(config_file=config, verbose=verbose, quiet=quiet)
    except DailyProgressError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(2)

    # Flags already folded into settings.verbosity by load_config
    setup_logging(verbose=settings.verbosity == "verbose", quiet=settings.verbosity == "quiet")

    ctx.ensure_object(dict)
    ctx.obj["path"] = (path or Path.cwd()).resolve()
    ctx.obj["config"] = settings
