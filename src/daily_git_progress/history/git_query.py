"""Query one day of git history via subprocess."""

from __future__ import annotations

import subprocess
from datetime import date, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence, Union

from ..exceptions import MalformedOutputError, ToolInvocationError
from ..logging_config import get_logger
from .models import Commit, DateWindow, DayHistory, DiffBase

if TYPE_CHECKING:
    from ..config import ProgressConfig

logger = get_logger(__name__)

# Unit separator between log fields; the subject goes last so it may contain anything
_FIELD_SEP = "\x1f"
_LOG_FORMAT = "%H%x1f%an%x1f%at%x1f%s"
# Record separator for batched `git show` output
_RECORD_SEP = "\x1e"


class GitHistoryQuery:
    """Read-only access to the history of one repository.

    Listing operations never raise: a failed git invocation is logged and
    surfaces as "no commits" (``commits_for_date``) or as a ``DayHistory``
    carrying the failure reason (``fetch_day``).
    """

    def __init__(
        self,
        repo_path: Union[str, Path],
        timeout_seconds: int = 10,
        max_output_mb: float = 10.0,
        all_refs: bool = True,
        batch_file_lookup: bool = True,
        batch_size: int = 100,
    ):
        self.repo_path = str(Path(repo_path).resolve())
        self.timeout_seconds = timeout_seconds
        self.max_output_mb = max_output_mb
        self.max_output_bytes = int(max_output_mb * 1024 * 1024)
        self.all_refs = all_refs
        self.batch_file_lookup = batch_file_lookup
        self.batch_size = max(1, batch_size)

    @classmethod
    def from_config(cls, repo_path: Union[str, Path], config: "ProgressConfig") -> GitHistoryQuery:
        return cls(
            repo_path,
            timeout_seconds=config.git_timeout_seconds,
            max_output_mb=config.max_output_mb,
            all_refs=config.all_refs,
            batch_file_lookup=config.batch_file_lookup,
            batch_size=config.batch_size,
        )

    # ------------------------------------------------------------------
    # Day listing
    # ------------------------------------------------------------------

    def commits_for_date(self, day: Union[date, datetime]) -> list[Commit]:
        """Commits authored within ``day`` (local time), newest first."""
        return list(self.fetch_day(day).commits)

    def fetch_day(self, day: Union[date, datetime]) -> DayHistory:
        """Like ``commits_for_date`` but keeps the failure reason, if any."""
        window = DateWindow.of(day)
        try:
            commits = self._list_commits(window)
        except ToolInvocationError as e:
            logger.warning("Could not list commits for %s: %s", window.day, e)
            return DayHistory(window=window, error=str(e))

        logger.debug("Found %d commits for %s", len(commits), window.day)
        return DayHistory(window=window, commits=tuple(commits))

    def _list_commits(self, window: DateWindow) -> list[Commit]:
        args = [
            "log",
            f"--pretty=format:{_LOG_FORMAT}",
            f"--since={window.start_timestamp}",
            f"--until={window.end_timestamp}",
        ]
        if self.all_refs:
            args.append("--all")

        raw = self._git(*args)
        headers = self._parse_log(raw, args)

        # --since/--until filter on committer date; the window applies to author date
        in_window = [h for h in headers if window.contains(h[2])]
        if len(in_window) != len(headers):
            logger.debug(
                "Dropped %d commits authored outside %s", len(headers) - len(in_window), window.day
            )

        hashes = [h[0] for h in in_window]
        if self.batch_file_lookup:
            files_by_hash = self._changed_files_batched(hashes)
        else:
            files_by_hash = {sha: self.changed_files(sha) for sha in hashes}

        commits = [
            Commit(
                hash=sha,
                message=subject,
                author=author,
                timestamp=ts,
                files=tuple(files_by_hash.get(sha, ())),
            )
            for sha, author, ts, subject in in_window
        ]

        # Stable sort: equal timestamps keep log order
        commits.sort(key=lambda c: c.timestamp, reverse=True)
        return commits

    @staticmethod
    def _parse_log(raw: str, args: Sequence[str]) -> list[tuple[str, str, int, str]]:
        """Parse ``hash<US>author<US>timestamp<US>subject`` lines."""
        headers = []
        # not splitlines(): it also breaks on \x1c-\x1e
        for line in raw.split("\n"):
            if not line.strip():
                continue
            parts = line.split(_FIELD_SEP, 3)
            if len(parts) != 4:
                raise MalformedOutputError(args, line)
            sha, author, ts_str, subject = parts
            try:
                ts = int(ts_str)
            except ValueError:
                raise MalformedOutputError(args, line)
            headers.append((sha, author, ts, subject))
        return headers

    # ------------------------------------------------------------------
    # Changed files
    # ------------------------------------------------------------------

    def changed_files(self, commit_hash: str) -> list[str]:
        """Paths changed by one commit (root commits included)."""
        raw = self._git("show", "--name-only", "--pretty=format:", commit_hash)
        return [f for f in raw.split("\n") if f]

    def _changed_files_batched(self, hashes: Sequence[str]) -> dict[str, list[str]]:
        """Resolve file lists for many commits with one ``git show`` per chunk."""
        result: dict[str, list[str]] = {}
        for i in range(0, len(hashes), self.batch_size):
            chunk = list(hashes[i : i + self.batch_size])
            raw = self._git("show", "--name-only", "--pretty=format:%x1e%H", *chunk)
            for record in raw.split(_RECORD_SEP):
                lines = [line for line in record.split("\n") if line]
                if not lines:
                    continue
                result[lines[0]] = lines[1:]

        missing = [sha for sha in hashes if sha not in result]
        if missing:
            raise MalformedOutputError(["show", "--name-only"], f"no file list for {missing[0]}")
        return result

    # ------------------------------------------------------------------
    # Single-commit lookups
    # ------------------------------------------------------------------

    def last_activity_date(self) -> Optional[datetime]:
        """Author time of the most recent commit across all refs."""
        args = ["log", "-1", "--format=%at"]
        if self.all_refs:
            args.append("--all")
        try:
            raw = self._git(*args).strip()
        except ToolInvocationError as e:
            logger.warning("Could not read last commit date: %s", e)
            return None

        try:
            return datetime.fromtimestamp(int(raw))
        except ValueError:
            # empty repository
            return None

    def previous_commit(self, commit_hash: str) -> Optional[str]:
        """First parent of ``commit_hash``, or None at the root of history."""
        try:
            return self._git("rev-parse", "--verify", "--quiet", f"{commit_hash}^").strip() or None
        except ToolInvocationError:
            return None

    def file_exists_at(self, commit_hash: str, path: str) -> bool:
        try:
            self._git("cat-file", "-e", f"{commit_hash}:{path}")
        except ToolInvocationError:
            return False
        return True

    def file_content(self, commit_hash: str, path: str) -> str:
        """Content of ``path`` at ``commit_hash``; empty when it does not exist."""
        try:
            return self._git("show", f"{commit_hash}:{path}")
        except ToolInvocationError as e:
            logger.debug("No content for %s at %s: %s", path, commit_hash, e)
            return ""

    def diff_base(self, commit_hash: str, path: str) -> DiffBase:
        """Revision to compare against when showing what ``commit_hash`` did to ``path``."""
        parent = self.previous_commit(commit_hash)
        if parent is not None and not self.file_exists_at(parent, path):
            parent = None
        return DiffBase(path=path, target=commit_hash, base=parent)

    # ------------------------------------------------------------------
    # Subprocess
    # ------------------------------------------------------------------

    def _git(self, *args: str) -> str:
        cmd = ["git", "-C", self.repo_path, "-c", "core.quotepath=off", *args]
        logger.debug("Running: %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                timeout=self.timeout_seconds,
            )
        except FileNotFoundError:
            raise ToolInvocationError(args, "git executable not found")
        except subprocess.TimeoutExpired:
            raise ToolInvocationError(args, f"timed out after {self.timeout_seconds}s")

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace").strip()
            raise ToolInvocationError(args, stderr or "non-zero exit", result.returncode)

        # Limit applies to raw bytes, before decoding
        if len(result.stdout) > self.max_output_bytes:
            raise ToolInvocationError(args, f"output exceeded {self.max_output_mb:g}MB limit")

        return result.stdout.decode("utf-8", errors="replace")
