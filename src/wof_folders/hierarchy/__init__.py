# src/wof_folders/hierarchy/__init__.py

"""
Public interface for the hierarchy engine.

    from wof_folders.hierarchy import (
        CanonicalRecord,
        normalize,
        HierarchyConfig,
        build_hierarchy,
        walk,
    )

    records = [r for r in (normalize(doc) for doc in documents) if r]
    hierarchy = build_hierarchy(records, HierarchyConfig())
    for event in walk(hierarchy.roots):
        ...
"""

from __future__ import annotations

from .normalizer import NO_PARENT, CanonicalRecord, canonical_id, normalize
from .rules import (
    DEFAULT_PLACETYPES,
    DEFAULT_ROOT_PLACETYPE,
    DEFAULT_TRANSITIONS,
    HierarchyConfig,
)
from .builder import Hierarchy, HierarchyNode, build_hierarchy
from .paths import FALLBACK_SEGMENT, join_path, sanitize_segment
from .walker import FolderEvent, LeafEvent, WalkEvent, walk

__all__ = [
    "NO_PARENT",
    "CanonicalRecord",
    "canonical_id",
    "normalize",
    "DEFAULT_PLACETYPES",
    "DEFAULT_ROOT_PLACETYPE",
    "DEFAULT_TRANSITIONS",
    "HierarchyConfig",
    "Hierarchy",
    "HierarchyNode",
    "build_hierarchy",
    "FALLBACK_SEGMENT",
    "join_path",
    "sanitize_segment",
    "FolderEvent",
    "LeafEvent",
    "WalkEvent",
    "walk",
]
