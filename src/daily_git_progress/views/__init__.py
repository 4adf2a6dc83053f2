"""Commit, file and time views over one day of history."""

from .activity import ActivityViews
from .commit_view import CommitView
from .coordinator import ViewCoordinator, ViewState
from .file_view import FileView
from .nodes import (
    ChangeNode,
    CommitNode,
    DateHeaderNode,
    FileActivityNode,
    TimeBucketNode,
    UnavailableNode,
)
from .time_view import TimeView

__all__ = [
    "ActivityViews",
    "ViewCoordinator",
    "ViewState",
    "CommitView",
    "FileView",
    "TimeView",
    "ChangeNode",
    "CommitNode",
    "DateHeaderNode",
    "FileActivityNode",
    "TimeBucketNode",
    "UnavailableNode",
]
