"""Tests for the lazy path tree."""

import pytest

from daily_git_progress.tree import (
    Folder,
    Leaf,
    PathEntry,
    children_of,
    entries_from,
    root_children,
    walk,
)


def entries(*paths):
    return entries_from((p, i) for i, p in enumerate(paths))


def names(nodes):
    return [(type(n).__name__, n.name) for n in nodes]


class TestRootChildren:
    """Tests for the first level."""

    def test_folder_before_leaf(self):
        """Files of two commits: one folder "a" with both files, then leaf "x.ts"."""
        first = ["a/b.ts", "a/c.ts"]
        second = ["x.ts"]
        nodes = root_children(entries_from((p, "commit") for p in first + second))

        assert names(nodes) == [("Folder", "a"), ("Leaf", "x.ts")]
        folder = nodes[0]
        assert [e.path for e in folder.entries] == ["a/b.ts", "a/c.ts"]
        assert folder.path == "a"

    def test_empty(self):
        assert root_children([]) == []

    def test_folders_in_first_discovery_order(self):
        nodes = root_children(entries("top.md", "zeta/1", "alpha/2", "zeta/3", "mid.md"))
        assert names(nodes) == [
            ("Folder", "zeta"),
            ("Folder", "alpha"),
            ("Leaf", "top.md"),
            ("Leaf", "mid.md"),
        ]

    def test_leaf_keeps_payload_and_full_path(self):
        (leaf,) = root_children([PathEntry("README.md", "payload")])
        assert leaf == Leaf(name="README.md", path="README.md", payload="payload")


class TestChildrenOf:
    """Tests for expanding a folder."""

    def test_one_level_at_a_time(self):
        (src,) = root_children(entries("src/pkg/a.py", "src/pkg/b.py", "src/main.py"))

        level = children_of(src)

        assert names(level) == [("Folder", "pkg"), ("Leaf", "main.py")]
        pkg = level[0]
        assert pkg.path == "src/pkg"
        assert len(pkg.entries) == 2

        assert names(children_of(pkg)) == [("Leaf", "a.py"), ("Leaf", "b.py")]
        assert [leaf.path for leaf in children_of(pkg)] == ["src/pkg/a.py", "src/pkg/b.py"]

    def test_folder_and_file_with_same_name(self):
        (docs, docs_file) = root_children(entries("docs/index.md", "docs"))
        assert isinstance(docs, Folder)
        assert isinstance(docs_file, Leaf)
        assert docs_file.path == "docs"

    def test_empty_segments_terminate(self):
        (a,) = root_children(entries("a//b"))
        (empty,) = children_of(a)
        assert isinstance(empty, Folder)
        assert empty.name == ""
        assert empty.path == "a/"
        (leaf,) = children_of(empty)
        assert leaf == Leaf(name="b", path="a//b", payload=0)

    def test_idempotent(self):
        items = entries("a/b/c", "a/d", "e", "a/b/f")
        assert root_children(items) == root_children(items)
        folder = root_children(items)[0]
        assert children_of(folder) == children_of(folder)


class TestWalk:
    """Round-trip of full paths through the hierarchy."""

    @pytest.mark.parametrize(
        "paths",
        [
            ["a/b.ts", "a/c.ts", "x.ts"],
            ["src/pkg/deep/er/file.py", "src/main.py", "README.md", "src/pkg/x.py"],
            ["a//b", "a/b", "/leading", "trailing/"],
            ["docs", "docs/index.md"],
        ],
    )
    def test_round_trip(self, paths):
        visited = list(walk(entries(*paths)))

        rebuilt = ["/".join([f.name for f in ancestors] + [leaf.name]) for ancestors, leaf in visited]

        assert sorted(rebuilt) == sorted(paths)
        assert all(r == leaf.path for r, (_, leaf) in zip(rebuilt, visited))

    def test_no_entry_duplicated_or_dropped(self):
        items = entries("a/1", "a/2", "b/3", "4", "a/c/5")
        payloads = sorted(leaf.payload for _, leaf in walk(items))
        assert payloads == [0, 1, 2, 3, 4]

    def test_depth_first_order(self):
        leaves = [leaf.path for _, leaf in walk(entries("z.txt", "a/2", "b/1", "a/1"))]
        assert leaves == ["a/2", "a/1", "b/1", "z.txt"]
