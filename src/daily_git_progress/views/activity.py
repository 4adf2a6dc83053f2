"""The three views bound to one repository and one selected date."""

from __future__ import annotations

import threading
from datetime import date, datetime
from typing import Optional, Protocol, Union

from ..history.models import DayHistory
from ..logging_config import get_logger
from .commit_view import CommitView
from .coordinator import ViewCoordinator
from .file_view import FileView
from .time_view import TimeView

logger = get_logger(__name__)


class ActivitySource(Protocol):
    def fetch_day(self, day: Union[date, datetime]) -> DayHistory: ...

    def last_activity_date(self) -> Optional[datetime]: ...


class ActivityViews:
    """Keeps the commit, file and time views on the same date.

    One fetch per date change feeds all three views; nothing is reused
    across date changes.
    """

    def __init__(self, query: ActivitySource, view_as_tree: bool = False):
        self.query = query
        self._reserve_lock = threading.Lock()
        self.commits = CommitView(query, view_as_tree=view_as_tree)
        self.files = FileView(query, view_as_tree=view_as_tree)
        self.timeline = TimeView(query, view_as_tree=view_as_tree)

    @property
    def views(self) -> tuple[ViewCoordinator, ...]:
        return (self.commits, self.files, self.timeline)

    @property
    def current_date(self) -> Optional[date]:
        return self.commits.current_date

    def initialize(self) -> date:
        """Select the day of the most recent commit, or today for an empty history."""
        last = self.query.last_activity_date()
        day = last.date() if last else date.today()
        self.set_date(day)
        logger.debug("Initialized with date %s", day)
        return day

    def set_date(self, day: Union[date, datetime]) -> bool:
        """Fetch ``day`` once and install it in every view.

        Returns False if any view had already moved on to a newer date.
        """
        # Reserve all three together so overlapping calls cannot split the views
        with self._reserve_lock:
            generations = [view.begin_update() for view in self.views]
        history = self.query.fetch_day(day)
        applied = [view.apply(history, gen) for view, gen in zip(self.views, generations)]
        return all(applied)

    def refresh(self) -> bool:
        day = self.current_date
        if day is None:
            return False
        return self.set_date(day)

    def set_view_as_tree(self, as_tree: bool) -> None:
        self.commits.set_view_as_tree(as_tree)
        self.files.set_view_as_tree(as_tree)
        self.timeline.set_view_as_tree(as_tree)
