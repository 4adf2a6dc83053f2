"""Day-scoped git history: querying, data model and regrouping."""

from .aggregate import by_file, by_time_bucket
from .buckets import TIME_BUCKETS, TimeBucket, bucket_for_hour, bucket_for_timestamp, format_interval
from .git_query import GitHistoryQuery
from .models import Commit, DateWindow, DayHistory, DiffBase, FileActivity

__all__ = [
    "Commit",
    "DateWindow",
    "DayHistory",
    "DiffBase",
    "FileActivity",
    "GitHistoryQuery",
    "TIME_BUCKETS",
    "TimeBucket",
    "bucket_for_hour",
    "bucket_for_timestamp",
    "by_file",
    "by_time_bucket",
    "format_interval",
]
