"""Lazy folder/file hierarchy over flat repository-relative paths.

Each call expands exactly one level: ``root_children`` splits the entries on
their first path segment, ``children_of`` strips a folder's prefix and splits
on the next one. Nothing below the requested level is built, so a view with
thousands of changed paths costs only what is actually expanded.

Ordering is part of the contract: folders come first, in the order their
first entry was encountered, then leaves in encounter order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, TypeVar, Union

P = TypeVar("P")

SEPARATOR = "/"


@dataclass(frozen=True)
class PathEntry(Generic[P]):
    path: str
    payload: P


@dataclass(frozen=True)
class Folder(Generic[P]):
    name: str  # one path segment
    path: str  # ancestor segments plus name, joined by "/"
    entries: tuple[PathEntry[P], ...]  # retained subset, full original paths


@dataclass(frozen=True)
class Leaf(Generic[P]):
    name: str  # residual segment below the parent folder
    path: str  # full original path
    payload: P


PathNode = Union[Folder, Leaf]


def entries_from(pairs: Iterable[tuple[str, P]]) -> list[PathEntry[P]]:
    """Build entries from ``(path, payload)`` pairs."""
    return [PathEntry(path, payload) for path, payload in pairs]


def root_children(entries: Iterable[PathEntry[P]]) -> list[PathNode]:
    """First level of the hierarchy."""
    return _split_level(entries, prefix_len=0, parent_path=None)


def children_of(folder: Folder[P]) -> list[PathNode]:
    """Next level below ``folder``."""
    return _split_level(folder.entries, prefix_len=len(folder.path) + 1, parent_path=folder.path)


def walk(entries: Iterable[PathEntry[P]]) -> Iterator[tuple[tuple[Folder[P], ...], Leaf[P]]]:
    """Depth-first ``(ancestors, leaf)`` pairs, expanding folders as reached."""

    def _walk(nodes: list[PathNode], ancestors: tuple[Folder[P], ...]):
        for node in nodes:
            if isinstance(node, Folder):
                yield from _walk(children_of(node), ancestors + (node,))
            else:
                yield ancestors, node

    yield from _walk(root_children(entries), ())


def _split_level(
    entries: Iterable[PathEntry[P]], prefix_len: int, parent_path: Union[str, None]
) -> list[PathNode]:
    # dicts keep first-discovery order
    folders: dict[str, list[PathEntry[P]]] = {}
    leaves: list[Leaf[P]] = []

    for entry in entries:
        residual = entry.path[prefix_len:]
        head, sep, _ = residual.partition(SEPARATOR)
        if sep:
            folders.setdefault(head, []).append(entry)
        else:
            leaves.append(Leaf(name=residual, path=entry.path, payload=entry.payload))

    result: list[PathNode] = [
        Folder(
            name=name,
            path=name if parent_path is None else f"{parent_path}{SEPARATOR}{name}",
            entries=tuple(members),
        )
        for name, members in folders.items()
    ]
    result.extend(leaves)
    return result
