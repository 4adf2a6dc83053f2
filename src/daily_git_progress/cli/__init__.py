"""CLI entry point: registers all subcommands."""

import typer

app = typer.Typer(
    name="daily-git-progress",
    help="Daily Git Progress - one day of repository activity by commit, file and time",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .main import main as _main_callback  # noqa: F401, E402
from .activity import commits as _commits, files as _files, timeline as _timeline  # noqa: F401, E402
from .lookup import last as _last, show as _show  # noqa: F401, E402
