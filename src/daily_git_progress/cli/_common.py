"""Shared CLI helpers."""

import re
from datetime import date, timedelta
from typing import Optional

import typer
from rich.console import Console

from ..config import ProgressConfig
from ..exceptions import InvalidDateError
from ..history import GitHistoryQuery

console = Console()

_OFFSET_RE = re.compile(r"^-(\d+)$")


def parse_day(value: Optional[str], query: GitHistoryQuery, today: Optional[date] = None) -> date:
    """Turn a --date value into a calendar day.

    Accepts ``YYYY-MM-DD``, ``today``, ``yesterday``, ``-N`` (N days ago) and
    ``last`` (day of the most recent commit, today if there is none).

    Raises:
        InvalidDateError: for anything else
    """
    today = today or date.today()
    text = (value or "last").strip().lower()

    if text == "today":
        return today
    if text == "yesterday":
        return today - timedelta(days=1)
    if text == "last":
        last = query.last_activity_date()
        return last.date() if last else today

    match = _OFFSET_RE.match(text)
    if match:
        return today - timedelta(days=int(match.group(1)))

    if not re.match(r"^\d{4}-\d{2}-\d{2}$", text):
        raise InvalidDateError(value or "", "use YYYY-MM-DD, today, yesterday, last or -N")
    try:
        return date.fromisoformat(text)
    except ValueError as e:
        raise InvalidDateError(value or "", str(e))


def build_query(ctx: typer.Context) -> GitHistoryQuery:
    """History query for the repository selected with -C (default: cwd)."""
    settings: ProgressConfig = ctx.obj["config"]
    return GitHistoryQuery.from_config(ctx.obj["path"], settings)


def resolve_day(query: GitHistoryQuery, value: Optional[str]) -> date:
    try:
        return parse_day(value, query)
    except InvalidDateError as e:
        raise typer.BadParameter(str(e), param_hint="--date")
