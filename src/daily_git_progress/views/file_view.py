"""Files touched during the day, each expanding into the commits that touched it."""

from __future__ import annotations

from ..history.aggregate import by_file
from ..history.models import Commit, FileActivity
from ..tree import entries_from, root_children
from .coordinator import ViewCoordinator, ViewState
from .nodes import ChangeNode, FileActivityNode


class FileView(ViewCoordinator):
    name = "files"

    def _derive(self, commits: tuple[Commit, ...]) -> tuple[FileActivity, ...]:
        return tuple(by_file(commits))

    def _top_level(self, state: ViewState) -> list:
        activities: tuple[FileActivity, ...] = state.derived
        if self.view_as_tree:
            return self._wrap(root_children(entries_from((a.file, a) for a in activities)))
        return [FileActivityNode(a) for a in activities]

    def _children_of(self, node, state: ViewState) -> list:
        if isinstance(node, FileActivityNode):
            return [ChangeNode(node.activity.file, c) for c in node.activity.commits]
        return []
