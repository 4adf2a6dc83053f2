"""View commands -- render the commit, file or time view for one day."""

import json
from typing import Optional

import typer

from ..views import ActivityViews
from . import app
from ._common import build_query, console, resolve_day
from ._render import render_view, view_to_dict

_DATE_HELP = "Day to show: YYYY-MM-DD, today, yesterday, last, or -N days ago"


def _show_view(
    ctx: typer.Context,
    view_name: str,
    date_value: Optional[str],
    as_tree: Optional[bool],
    json_output: bool,
) -> None:
    query = build_query(ctx)
    day = resolve_day(query, date_value)

    if as_tree is None:
        as_tree = ctx.obj["config"].view_as_tree

    views = ActivityViews(query, view_as_tree=as_tree)
    views.set_date(day)
    view = getattr(views, view_name)

    if json_output:
        print(json.dumps(view_to_dict(view), indent=2))
    else:
        console.print(render_view(view))

    if view.unavailable:
        raise typer.Exit(1)


@app.command()
def commits(
    ctx: typer.Context,
    date_value: Optional[str] = typer.Option(None, "--date", "-d", help=_DATE_HELP),
    as_tree: Optional[bool] = typer.Option(
        None, "--tree/--list", help="Group changed files into folders"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output in machine-readable JSON format"),
):
    """
    Commits of the day, newest first, with the files each one changed.

    [bold cyan]Examples:[/bold cyan]

      daily-git-progress commits

      daily-git-progress commits --date -1 --tree
    """
    _show_view(ctx, "commits", date_value, as_tree, json_output)


@app.command()
def files(
    ctx: typer.Context,
    date_value: Optional[str] = typer.Option(None, "--date", "-d", help=_DATE_HELP),
    as_tree: Optional[bool] = typer.Option(None, "--tree/--list", help="Group files into folders"),
    json_output: bool = typer.Option(False, "--json", help="Output in machine-readable JSON format"),
):
    """
    Files touched during the day, with the commits that touched each one.
    """
    _show_view(ctx, "files", date_value, as_tree, json_output)


@app.command()
def timeline(
    ctx: typer.Context,
    date_value: Optional[str] = typer.Option(None, "--date", "-d", help=_DATE_HELP),
    as_tree: Optional[bool] = typer.Option(
        None, "--tree/--list", help="Group changed files into folders"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output in machine-readable JSON format"),
):
    """
    Commits of the day grouped by time of day (Early Morning ... Night).
    """
    _show_view(ctx, "timeline", date_value, as_tree, json_output)
