"""Labels, rich trees and JSON for the activity views."""

from __future__ import annotations

import posixpath
from datetime import date
from typing import Any

from rich.markup import escape
from rich.tree import Tree

from ..history.buckets import format_interval
from ..history.models import Commit
from ..tree import Folder
from ..views import (
    ChangeNode,
    CommitNode,
    DateHeaderNode,
    FileActivityNode,
    TimeBucketNode,
    UnavailableNode,
    ViewCoordinator,
)

_DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


def date_header_label(day: date) -> str:
    return f"{_DAY_NAMES[day.weekday()]}, {day.isoformat()}"


def commit_label(commit: Commit) -> str:
    return f"[{commit.local_time:%H:%M}] {commit.message} ({commit.short_hash})"


def node_label(node: Any, view_as_tree: bool = False, under_file: bool = False) -> str:
    """Rich markup for one node.

    ``under_file`` marks a change listed below its file, where the commit is
    the interesting part rather than the path.
    """
    if isinstance(node, DateHeaderNode):
        return f"[bold]{date_header_label(node.day)}[/bold]"

    if isinstance(node, UnavailableNode):
        return f"[red]History unavailable:[/red] {escape(node.reason)}"

    if isinstance(node, CommitNode):
        return f"[cyan]{escape(commit_label(node.commit))}[/cyan]"

    if isinstance(node, TimeBucketNode):
        return (
            f"[yellow]{node.bucket.name}[/yellow] ({format_interval(node.bucket)})"
            f" - {_plural(len(node.commits), 'commit')}"
        )

    if isinstance(node, Folder):
        return f"[blue]{escape(node.name or '/')}[/blue]"

    if isinstance(node, FileActivityNode):
        activity = node.activity
        count = f"({_plural(activity.commit_count, 'commit')})"
        name = escape(posixpath.basename(activity.file))
        if view_as_tree:
            return f"{name} [dim]{count}[/dim]"
        directory = posixpath.dirname(activity.file)
        detail = f"{escape(directory)} {count}" if directory else count
        return f"{name} [dim]{detail}[/dim]"

    if isinstance(node, ChangeNode):
        if under_file:
            return f"[cyan]{escape(commit_label(node.commit))}[/cyan]"
        name = escape(posixpath.basename(node.path))
        directory = posixpath.dirname(node.path)
        if view_as_tree or not directory:
            return name
        return f"{name} [dim]{escape(directory)}[/dim]"

    return escape(str(node))


def render_view(view: ViewCoordinator) -> Tree:
    """Expand every node of ``view`` into a rich Tree rooted at the date header."""
    top = view.children()
    header, rest = top[0], top[1:]
    root = Tree(node_label(header))
    for node in rest:
        _add(root, view, node, under_file=False)
    if not view.commits and not view.unavailable:
        root.add("[dim]No commits[/dim]")
    return root


def _add(parent: Tree, view: ViewCoordinator, node: Any, under_file: bool) -> None:
    branch = parent.add(node_label(node, view.view_as_tree, under_file))
    child_under_file = isinstance(node, FileActivityNode)
    for child in view.children(node):
        _add(branch, view, child, under_file=child_under_file)


def view_to_dict(view: ViewCoordinator) -> dict:
    """Fully expanded, JSON-ready form of ``view``."""
    top = view.children()
    return {
        "view": view.name,
        "date": view.current_date.isoformat() if view.current_date else None,
        "unavailable": view.unavailable,
        "nodes": [_node_to_dict(view, node) for node in top if not isinstance(node, DateHeaderNode)],
    }


def _node_to_dict(view: ViewCoordinator, node: Any) -> dict:
    data = _describe(node)
    children = view.children(node)
    if children:
        data["children"] = [_node_to_dict(view, child) for child in children]
    return data


def _commit_dict(commit: Commit) -> dict:
    return {
        "hash": commit.hash,
        "message": commit.message,
        "author": commit.author,
        "timestamp": commit.timestamp,
    }


def _describe(node: Any) -> dict:
    if isinstance(node, UnavailableNode):
        return {"type": "unavailable", "reason": node.reason}
    if isinstance(node, CommitNode):
        return {"type": "commit", **_commit_dict(node.commit)}
    if isinstance(node, TimeBucketNode):
        return {
            "type": "bucket",
            "name": node.bucket.name,
            "interval": format_interval(node.bucket),
            "commit_count": len(node.commits),
        }
    if isinstance(node, Folder):
        return {"type": "folder", "name": node.name, "path": node.path}
    if isinstance(node, FileActivityNode):
        return {
            "type": "file",
            "path": node.activity.file,
            "commit_count": node.activity.commit_count,
        }
    if isinstance(node, ChangeNode):
        return {"type": "change", "path": node.path, **_commit_dict(node.commit)}
    raise TypeError(f"Unexpected node type: {type(node).__name__}")
