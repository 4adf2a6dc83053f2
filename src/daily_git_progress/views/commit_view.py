"""Commits of the day, each expanding into its changed files."""

from __future__ import annotations

from ..history.models import Commit
from .coordinator import ViewCoordinator, ViewState
from .nodes import CommitNode


class CommitView(ViewCoordinator):
    name = "commits"

    def _derive(self, commits: tuple[Commit, ...]) -> tuple[Commit, ...]:
        return commits

    def _top_level(self, state: ViewState) -> list:
        return [CommitNode(c) for c in state.derived]

    def _children_of(self, node, state: ViewState) -> list:
        if isinstance(node, CommitNode):
            return self._commit_files(node.commit)
        return []
