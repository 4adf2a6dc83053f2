"""Non-empty time-of-day buckets, each expanding into commits and then files."""

from __future__ import annotations

from ..history.aggregate import by_time_bucket
from ..history.models import Commit
from .coordinator import ViewCoordinator, ViewState
from .nodes import CommitNode, TimeBucketNode


class TimeView(ViewCoordinator):
    name = "timeline"

    def _derive(self, commits: tuple[Commit, ...]):
        return tuple(by_time_bucket(commits))

    def _top_level(self, state: ViewState) -> list:
        return [TimeBucketNode(bucket, commits) for bucket, commits in state.derived]

    def _children_of(self, node, state: ViewState) -> list:
        if isinstance(node, TimeBucketNode):
            return [CommitNode(c) for c in node.commits]
        if isinstance(node, CommitNode):
            return self._commit_files(node.commit)
        return []
