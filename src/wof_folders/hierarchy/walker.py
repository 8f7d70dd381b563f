# src/wof_folders/hierarchy/walker.py

"""
Depth-first walk over a built hierarchy.

The walk emits, per visited node and in pre-order:

    FolderEvent(path, node)     always
    LeafEvent(path, node)       when the node has no children

It performs no I/O; consumers create folders and seed leaf files from the
events. Traversal uses an explicit work-list, so stack usage does not grow
with hierarchy depth.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Iterable, Iterator, List, Optional, Set, Tuple, Union

from .builder import HierarchyNode
from .paths import join_path, sanitize_segment


@dataclass(frozen=True, eq=False)
class FolderEvent:
    path: str
    node: HierarchyNode

    kind: ClassVar[str] = "folder"


@dataclass(frozen=True, eq=False)
class LeafEvent:
    path: str
    node: HierarchyNode

    kind: ClassVar[str] = "leaf"


WalkEvent = Union[FolderEvent, LeafEvent]
SkipCallback = Callable[[HierarchyNode, str], None]


def walk(
    roots: Iterable[HierarchyNode],
    on_skip: Optional[SkipCallback] = None,
) -> Iterator[WalkEvent]:
    """
    Yield folder and leaf events for every node reachable from ``roots``.

    Each root starts a fresh path. A node reached a second time within the
    same walk (a cycle from malformed parent pointers) is skipped with no
    event and no descent; ``on_skip(node, base_path)`` is called for it.

    The generator is lazy: consumers may stop iterating at any point.
    """
    visited: Set[str] = set()
    stack: List[Tuple[HierarchyNode, str]] = [(root, "") for root in reversed(list(roots))]

    while stack:
        node, base = stack.pop()

        if node.id in visited:
            if on_skip is not None:
                on_skip(node, base)
            continue
        visited.add(node.id)

        path = join_path(base, sanitize_segment(node.name))
        yield FolderEvent(path=path, node=node)

        if not node.children:
            yield LeafEvent(path=path, node=node)
            continue

        # reversed so the first child is popped first
        for child in reversed(node.children):
            stack.append((child, path))
