"""Lazy folder/file hierarchy shared by every view."""

from .path_tree import Folder, Leaf, PathEntry, PathNode, children_of, entries_from, root_children, walk

__all__ = [
    "Folder",
    "Leaf",
    "PathEntry",
    "PathNode",
    "children_of",
    "entries_from",
    "root_children",
    "walk",
]
