"""Shared date/state handling for the three activity views.

A coordinator is either uninitialized (no date selected yet) or ready with
an immutable ``ViewState`` for one date. ``set_date`` fetches and derives
outside the lock, then swaps the state in one assignment, so a reader
always sees one complete state.

Overlapping ``set_date`` calls are resolved by a generation counter: each
call takes a new generation when it starts, and its result is only applied
if no newer call has started since. The most recently requested date wins
regardless of which fetch finishes last.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional, Protocol, Union

from ..history.models import Commit, DayHistory, FileActivity
from ..logging_config import get_logger
from ..tree import Folder, Leaf, PathNode, children_of, entries_from, root_children
from .nodes import ChangeNode, CommitNode, DateHeaderNode, FileActivityNode, UnavailableNode

logger = get_logger(__name__)


class HistorySource(Protocol):
    def fetch_day(self, day: Union[date, datetime]) -> DayHistory: ...


@dataclass(frozen=True)
class ViewState:
    history: DayHistory
    derived: Any  # view-specific grouping of history.commits

    @property
    def day(self) -> date:
        return self.history.window.day


class ViewCoordinator:
    """Answers "children of node" for one presentation mode."""

    name = "view"

    def __init__(self, query: HistorySource, view_as_tree: bool = False):
        self._query = query
        self._lock = threading.Lock()
        self._generation = 0
        self._state: Optional[ViewState] = None
        self._view_as_tree = view_as_tree

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> Optional[ViewState]:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is not None

    @property
    def current_date(self) -> Optional[date]:
        state = self._state
        return state.day if state else None

    @property
    def unavailable(self) -> bool:
        state = self._state
        return bool(state and state.history.failed)

    @property
    def commits(self) -> tuple[Commit, ...]:
        state = self._state
        return state.history.commits if state else ()

    @property
    def view_as_tree(self) -> bool:
        return self._view_as_tree

    def set_view_as_tree(self, as_tree: bool) -> None:
        self._view_as_tree = as_tree

    def begin_update(self) -> int:
        """Reserve a generation for an update that is about to fetch."""
        with self._lock:
            self._generation += 1
            return self._generation

    def set_date(self, day: Union[date, datetime]) -> bool:
        """Re-query history for ``day`` and replace the current state.

        Returns False when a newer update started meanwhile and this result
        was discarded.
        """
        generation = self.begin_update()
        history = self._query.fetch_day(day)
        return self.apply(history, generation)

    def refresh(self) -> bool:
        day = self.current_date
        if day is None:
            return False
        return self.set_date(day)

    def apply(self, history: DayHistory, generation: Optional[int] = None) -> bool:
        """Install an already-fetched history if ``generation`` is still current."""
        if generation is None:
            generation = self.begin_update()

        new_state = ViewState(history=history, derived=self._derive(history.commits))

        with self._lock:
            if generation != self._generation:
                logger.debug(
                    "%s view: discarding stale result for %s", self.name, history.window.day
                )
                return False
            self._state = new_state
        return True

    # ------------------------------------------------------------------
    # Children
    # ------------------------------------------------------------------

    def children(self, node: Any = None) -> list:
        state = self._state
        if state is None:
            return []

        if node is None:
            items: list = [DateHeaderNode(state.day)]
            if state.history.failed:
                items.append(UnavailableNode(state.history.error or "unknown error"))
            items.extend(self._top_level(state))
            return items

        if isinstance(node, (DateHeaderNode, UnavailableNode, ChangeNode)):
            return []

        if isinstance(node, Folder):
            return self._wrap(children_of(node))

        return self._children_of(node, state)

    def _commit_files(self, commit: Commit) -> list:
        if self._view_as_tree:
            return self._wrap(root_children(entries_from((f, commit) for f in commit.files)))
        return [ChangeNode(f, commit) for f in commit.files]

    @staticmethod
    def _wrap(nodes: list[PathNode]) -> list:
        """Map path-tree leaves to view nodes; folders pass through."""
        result: list = []
        for node in nodes:
            if isinstance(node, Leaf):
                if isinstance(node.payload, FileActivity):
                    result.append(FileActivityNode(node.payload))
                else:
                    result.append(ChangeNode(node.path, node.payload))
            else:
                result.append(node)
        return result

    # ------------------------------------------------------------------
    # Per-view hooks
    # ------------------------------------------------------------------

    def _derive(self, commits: tuple[Commit, ...]) -> Any:
        raise NotImplementedError

    def _top_level(self, state: ViewState) -> list:
        raise NotImplementedError

    def _children_of(self, node: Any, state: ViewState) -> list:
        return []
