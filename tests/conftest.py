"""Shared test fixtures for Daily Git Progress tests."""

import os
import shutil
import subprocess
from datetime import date, datetime

import pytest

from daily_git_progress.history.models import Commit, DateWindow, DayHistory

DAY = date(2026, 1, 18)  # a Sunday


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


def at(hour: int, minute: int = 0, day: date = DAY) -> int:
    """Unix timestamp of a local wall-clock time."""
    return int(datetime(day.year, day.month, day.day, hour, minute).timestamp())


def make_commit(sha: str, timestamp: int, files=(), message: str = "", author: str = "alice") -> Commit:
    """Create a test commit."""
    return Commit(
        hash=sha,
        message=message or f"Commit {sha[:7]}",
        author=author,
        timestamp=timestamp,
        files=tuple(files),
    )


class GitRepo:
    """Throw-away repository with fully controlled commit dates."""

    def __init__(self, path):
        self.path = path
        self._env = {
            **os.environ,
            "HOME": str(path),
            "GIT_CONFIG_NOSYSTEM": "1",
            "GIT_AUTHOR_NAME": "Alice",
            "GIT_AUTHOR_EMAIL": "alice@example.com",
            "GIT_COMMITTER_NAME": "Alice",
            "GIT_COMMITTER_EMAIL": "alice@example.com",
        }
        self.git("init", "-q")

    def git(self, *args: str, env=None) -> str:
        result = subprocess.run(
            ["git", "-c", "commit.gpgsign=false", "-c", "init.defaultBranch=main", *args],
            cwd=self.path,
            env=env or self._env,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout

    def commit(self, message: str, timestamp: int, files=None, removed=(), committed_at=None) -> str:
        """Write ``files`` (path -> content), delete ``removed``, commit, return the hash."""
        for rel, content in (files or {}).items():
            target = self.path / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
            self.git("add", "--", rel)
        for rel in removed:
            self.git("rm", "-q", "--", rel)

        env = {
            **self._env,
            "GIT_AUTHOR_DATE": f"{timestamp} +0000",
            "GIT_COMMITTER_DATE": f"{committed_at or timestamp} +0000",
        }
        self.git("commit", "-q", "--allow-empty", "-m", message, env=env)
        return self.git("rev-parse", "HEAD").strip()


@pytest.fixture
def git_repo(tmp_path):
    """Empty git repository; skipped when git is not installed."""
    if shutil.which("git") is None:
        pytest.skip("git not found")
    repo_dir = tmp_path / "repo"
    repo_dir.mkdir()
    return GitRepo(repo_dir)


class FakeQuery:
    """In-memory stand-in for GitHistoryQuery."""

    def __init__(self, days=None, failures=None, last=None):
        self.days = days or {}  # date -> list of commits
        self.failures = failures or {}  # date -> error message
        self.last = last
        self.fetched = []

    def fetch_day(self, day):
        window = DateWindow.of(day)
        self.fetched.append(window.day)
        if window.day in self.failures:
            return DayHistory(window=window, error=self.failures[window.day])
        return DayHistory(window=window, commits=tuple(self.days.get(window.day, ())))

    def last_activity_date(self):
        return self.last
