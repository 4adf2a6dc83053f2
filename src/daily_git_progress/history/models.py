"""Data models for one day of git history."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional, Union


@dataclass(frozen=True)
class Commit:
    hash: str
    message: str  # subject line
    author: str
    timestamp: int  # unix seconds, author date
    files: tuple[str, ...] = ()  # changed paths, in the order git reports them

    @property
    def short_hash(self) -> str:
        return self.hash[:7]

    @property
    def local_time(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp)

    @property
    def hour(self) -> int:
        return self.local_time.hour


@dataclass(frozen=True)
class FileActivity:
    file: str
    commits: tuple[Commit, ...]  # newest first

    @property
    def latest(self) -> Commit:
        return self.commits[0]

    @property
    def commit_count(self) -> int:
        return len(self.commits)


@dataclass(frozen=True)
class DateWindow:
    """One calendar day in local time.

    The window covers [00:00:00.000000, 23:59:59.999999] of ``day``. Unix
    boundaries are floored to whole seconds, matching git's resolution.
    """

    day: date

    @classmethod
    def of(cls, value: Union[date, datetime]) -> DateWindow:
        if isinstance(value, datetime):
            return cls(value.date())
        return cls(value)

    @classmethod
    def today(cls) -> DateWindow:
        return cls(date.today())

    @property
    def start(self) -> datetime:
        return datetime.combine(self.day, time.min)

    @property
    def end(self) -> datetime:
        return datetime.combine(self.day, time.max)

    @property
    def start_timestamp(self) -> int:
        return math.floor(self.start.timestamp())

    @property
    def end_timestamp(self) -> int:
        return math.floor(self.end.timestamp())

    def contains(self, timestamp: int) -> bool:
        return self.start_timestamp <= timestamp <= self.end_timestamp


@dataclass(frozen=True)
class DayHistory:
    """Commits for one window, or the reason they could not be listed."""

    window: DateWindow
    commits: tuple[Commit, ...] = ()
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass(frozen=True)
class DiffBase:
    """Which revisions a diff consumer should compare for one file change."""

    path: str
    target: str  # commit that changed the file
    base: Optional[str]  # parent commit, None at the root of history

    @property
    def is_new_file(self) -> bool:
        """True when there is nothing to compare against (root commit or added file)."""
        return self.base is None
