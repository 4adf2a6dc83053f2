"""
Daily Git Progress - one day of repository activity, three ways

Lists a day's commits, the files they touched, and when during the day the
work happened, as lazily expanded trees.
"""

__version__ = "0.3.0"

from .history import Commit, DateWindow, FileActivity, GitHistoryQuery, by_file, by_time_bucket
from .tree import children_of, root_children
from .views import ActivityViews, CommitView, FileView, TimeView

__all__ = [
    "ActivityViews",  # Main entry point
    "GitHistoryQuery",
    "CommitView",
    "FileView",
    "TimeView",
    "Commit",
    "DateWindow",
    "FileActivity",
    "by_file",
    "by_time_bucket",
    "root_children",
    "children_of",
]
