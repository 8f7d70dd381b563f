# src/wof_folders/hierarchy/builder.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from wof_folders.core.exceptions import DuplicateRecordError

from .normalizer import NO_PARENT, CanonicalRecord
from .rules import HierarchyConfig


@dataclass(eq=False)
class HierarchyNode:
    """
    A place in the reconstructed hierarchy.

    Attributes:
        id: Stringified WOF id.
        parent_id: Declared parent id (NO_PARENT when none).
        placetype: WOF placetype.
        name: Display name.
        children: Attached child nodes, in input order.

    Nodes compare by identity: malformed parent pointers can make the
    children graph cyclic, so structural equality is not well defined.
    """

    id: str
    parent_id: str
    placetype: str
    name: str
    children: List["HierarchyNode"] = field(default_factory=list)

    @classmethod
    def from_record(cls, record: CanonicalRecord) -> "HierarchyNode":
        return cls(
            id=record.id,
            parent_id=record.parent_id,
            placetype=record.placetype,
            name=record.name,
        )

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def add_child(self, child: "HierarchyNode") -> None:
        self.children.append(child)

    def __repr__(self) -> str:
        return (
            f"<HierarchyNode {self.id} {self.placetype}: {self.name!r} "
            f"children={len(self.children)}>"
        )


@dataclass
class Hierarchy:
    """
    Result of one build: the node map plus the walk roots.

    Diagnostics:
        duplicate_ids: ids seen more than once (last write won).
        orphan_ids: nodes whose declared parent is not in this map.
        excluded_ids: nodes whose parent exists but whose placetype
            transition is not permitted; these are neither children nor roots.
    """

    nodes_by_id: Dict[str, HierarchyNode]
    roots: List[HierarchyNode]
    duplicate_ids: List[str] = field(default_factory=list)
    orphan_ids: List[str] = field(default_factory=list)
    excluded_ids: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.nodes_by_id)

    def find_by_id(self, record_id: str) -> Optional[HierarchyNode]:
        return self.nodes_by_id.get(record_id)

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<Hierarchy nodes={len(self.nodes_by_id)} roots={len(self.roots)}>"


def build_hierarchy(
    records: Iterable[CanonicalRecord],
    config: Optional[HierarchyConfig] = None,
) -> Hierarchy:
    """
    Index records by id, link children to parents and resolve the roots.

        records -> Hierarchy(nodes_by_id, roots)

    Duplicate ids: the last record wins but keeps the map position of the
    first occurrence. With ``config.strict_duplicates`` a duplicate raises
    DuplicateRecordError instead.

    Missing parents and disallowed transitions never raise; the affected
    records are left out of the tree and listed on the result. A node of the
    root placetype whose parent is present but may not hold it is excluded
    like any other; one whose parent is missing is still a root.

    Raises:
        ConfigurationError: if the configuration cannot produce a tree.
        DuplicateRecordError: on a repeated id in strict mode.
    """
    config = config or HierarchyConfig()
    config.validate()

    nodes: Dict[str, HierarchyNode] = {}
    duplicate_ids: List[str] = []

    # Pass 1: index
    for record in records:
        if not config.accepts(record.placetype):
            continue
        if record.id in nodes:
            if config.strict_duplicates:
                raise DuplicateRecordError(record.id)
            duplicate_ids.append(record.id)
        nodes[record.id] = HierarchyNode.from_record(record)

    # Pass 2: link
    parentless: List[HierarchyNode] = []
    orphan_ids: List[str] = []
    excluded_ids: List[str] = []

    for node in nodes.values():
        parent = None
        if node.parent_id != NO_PARENT and node.parent_id != node.id:
            parent = nodes.get(node.parent_id)

        if parent is None:
            parentless.append(node)
            if node.parent_id != NO_PARENT:
                orphan_ids.append(node.id)
            continue

        if config.allows(parent.placetype, node.placetype):
            parent.add_child(node)
        else:
            excluded_ids.append(node.id)

    if config.uses_transitions:
        roots = [node for node in parentless if node.placetype == config.root_placetype]
    else:
        roots = parentless

    return Hierarchy(
        nodes_by_id=nodes,
        roots=roots,
        duplicate_ids=duplicate_ids,
        orphan_ids=orphan_ids,
        excluded_ids=excluded_ids,
    )
