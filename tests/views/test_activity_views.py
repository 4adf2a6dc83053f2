"""Tests for ActivityViews, the three views kept on one date."""

import threading
import time
from datetime import date, datetime, timedelta

from conftest import DAY, FakeQuery, at, make_commit

from daily_git_progress.tree import Folder
from daily_git_progress.views import ActivityViews, CommitNode

COMMIT = make_commit("a" * 40, at(10), ["pkg/mod.py"])


class TestActivityViews:
    """Tests for ActivityViews."""

    def test_initialize_selects_last_activity_day(self):
        query = FakeQuery(days={DAY: [COMMIT]}, last=datetime(2026, 1, 18, 10, 0))
        views = ActivityViews(query)

        assert views.initialize() == DAY
        assert views.current_date == DAY
        assert all(v.current_date == DAY for v in views.views)

    def test_initialize_empty_history_uses_today(self):
        views = ActivityViews(FakeQuery())
        assert views.initialize() == date.today()

    def test_one_fetch_feeds_all_views(self):
        query = FakeQuery(days={DAY: [COMMIT]})
        views = ActivityViews(query)

        assert views.set_date(DAY)

        assert query.fetched == [DAY]
        assert views.commits.commits == (COMMIT,)
        assert [a.file for a in views.files.state.derived] == ["pkg/mod.py"]
        assert len(views.timeline.state.derived) == 1

    def test_refresh_refetches_current_date(self):
        query = FakeQuery(days={DAY: [COMMIT]})
        views = ActivityViews(query)
        assert not views.refresh()

        views.set_date(DAY)
        views.refresh()

        assert query.fetched == [DAY, DAY]

    def test_set_date_replaces_previous_day(self):
        other = DAY - timedelta(days=1)
        views = ActivityViews(FakeQuery(days={DAY: [COMMIT]}))
        views.set_date(DAY)
        views.set_date(other)

        assert views.current_date == other
        assert views.commits.commits == ()
        assert views.files.children()[1:] == []

    def test_failure_marks_every_view_unavailable(self):
        views = ActivityViews(FakeQuery(failures={DAY: "boom"}))
        views.set_date(DAY)
        assert all(v.unavailable for v in views.views)

    def test_set_view_as_tree(self):
        views = ActivityViews(FakeQuery(days={DAY: [COMMIT]}))
        views.set_date(DAY)
        views.set_view_as_tree(True)

        assert all(v.view_as_tree for v in views.views)
        assert isinstance(views.commits.children(CommitNode(COMMIT))[0], Folder)


class TestOverlappingDateChanges:
    """Overlapping date changes never leave the views on different days."""

    def test_reservation_paused_midway(self):
        """A call paused between views cannot split them with a later call."""
        other = DAY - timedelta(days=1)
        views = ActivityViews(FakeQuery(days={DAY: [COMMIT]}))

        paused = threading.Event()
        resume = threading.Event()
        reserve_files = views.files.begin_update
        calls = []

        def slow_reserve():
            calls.append(None)
            if len(calls) == 1:
                paused.set()
                resume.wait(timeout=5)
            return reserve_files()

        views.files.begin_update = slow_reserve

        first = threading.Thread(target=views.set_date, args=(other,))
        first.start()
        assert paused.wait(timeout=5)

        second = threading.Thread(target=views.set_date, args=(DAY,))
        second.start()
        time.sleep(0.05)
        resume.set()
        first.join(timeout=5)
        second.join(timeout=5)

        assert [v.current_date for v in views.views] == [DAY, DAY, DAY]
        assert views.commits.commits == views.files.commits == views.timeline.commits

    def test_slow_fetch_of_older_request_discarded(self):
        other = DAY - timedelta(days=1)
        started = threading.Event()
        release = threading.Event()

        class SlowQuery(FakeQuery):
            def fetch_day(self, day):
                if day == other:
                    started.set()
                    release.wait(timeout=5)
                return super().fetch_day(day)

        views = ActivityViews(SlowQuery(days={DAY: [COMMIT]}))
        results = {}

        worker = threading.Thread(target=lambda: results.update(slow=views.set_date(other)))
        worker.start()
        assert started.wait(timeout=5)

        assert views.set_date(DAY)
        release.set()
        worker.join(timeout=5)

        assert results["slow"] is False
        assert [v.current_date for v in views.views] == [DAY, DAY, DAY]
