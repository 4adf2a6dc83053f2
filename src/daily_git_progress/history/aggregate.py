"""Regroup a day's commits by file and by time of day."""

from __future__ import annotations

import locale
from collections import defaultdict
from typing import Iterable

from .buckets import TIME_BUCKETS, TimeBucket, bucket_for_timestamp
from .models import Commit, FileActivity


def _path_sort_key(path: str) -> tuple[str, str]:
    # Locale collation first, raw codepoints break ties so the order is total
    return (locale.strxfrm(path), path)


def by_file(commits: Iterable[Commit]) -> list[FileActivity]:
    """Group commits under every file they touched.

    Files are sorted by path; each file keeps the commits in input order
    (newest first when fed from ``GitHistoryQuery``).
    """
    file_commits: dict[str, list[Commit]] = defaultdict(list)

    for commit in commits:
        # A path listed twice by the same commit still maps that commit once
        for path in dict.fromkeys(commit.files):
            file_commits[path].append(commit)

    return [
        FileActivity(file=path, commits=tuple(file_commits[path]))
        for path in sorted(file_commits, key=_path_sort_key)
    ]


def by_time_bucket(commits: Iterable[Commit]) -> list[tuple[TimeBucket, tuple[Commit, ...]]]:
    """Assign commits to time-of-day buckets by local hour.

    Buckets come back in catalog order; empty buckets are omitted.
    """
    grouped: dict[TimeBucket, list[Commit]] = defaultdict(list)

    for commit in commits:
        grouped[bucket_for_timestamp(commit.timestamp)].append(commit)

    return [(bucket, tuple(grouped[bucket])) for bucket in TIME_BUCKETS if grouped.get(bucket)]
