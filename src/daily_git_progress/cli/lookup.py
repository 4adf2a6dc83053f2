"""Single-value lookups: last activity date, file content at a commit."""

import typer

from . import app
from ._common import build_query, console
from ._render import date_header_label


@app.command()
def last(ctx: typer.Context):
    """
    Day of the most recent commit across all refs.
    """
    query = build_query(ctx)
    last_activity = query.last_activity_date()
    if last_activity is None:
        console.print("[yellow]No commits found.[/yellow]")
        raise typer.Exit(1)

    console.print(f"{date_header_label(last_activity.date())} {last_activity:%H:%M}")


@app.command()
def show(
    ctx: typer.Context,
    commit_hash: str = typer.Argument(..., help="Commit that changed the file"),
    path: str = typer.Argument(..., help="Repository-relative file path"),
    base: bool = typer.Option(
        False,
        "--base",
        help="Show the file as it was before the commit (what a diff compares against)",
    ),
):
    """
    Print a file as of a commit, or as of the revision a diff would compare it to.
    """
    query = build_query(ctx)

    if base:
        diff_base = query.diff_base(commit_hash, path)
        if diff_base.is_new_file:
            console.print(f"[yellow]{path} is new in {commit_hash[:7]}; nothing to compare.[/yellow]")
            raise typer.Exit(0)
        revision = diff_base.base
    else:
        revision = commit_hash

    if not query.file_exists_at(revision, path):
        console.print(f"[red]{path} does not exist at {revision[:7]}[/red]")
        raise typer.Exit(1)

    # Raw content, no rich markup processing
    typer.echo(query.file_content(revision, path), nl=False)
