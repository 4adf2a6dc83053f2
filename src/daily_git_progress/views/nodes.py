"""Node types handed to the presentation layer.

Folders and leaves produced by the path tree are passed through as-is
(``tree.Folder``); every other node is one of the dataclasses below.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..history.buckets import TimeBucket
from ..history.models import Commit, FileActivity


@dataclass(frozen=True)
class DateHeaderNode:
    day: date


@dataclass(frozen=True)
class UnavailableNode:
    """Shown when the day's history could not be read."""

    reason: str


@dataclass(frozen=True)
class CommitNode:
    commit: Commit


@dataclass(frozen=True)
class FileActivityNode:
    activity: FileActivity


@dataclass(frozen=True)
class TimeBucketNode:
    bucket: TimeBucket
    commits: tuple[Commit, ...]


@dataclass(frozen=True)
class ChangeNode:
    """One file as changed by one commit; the target of "open diff"."""

    path: str
    commit: Commit
