from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from wof_folders.hierarchy.rules import HierarchyConfig
from wof_folders.loader.file_scanner import DEFAULT_PATTERNS
from wof_folders.loader.sources import DataSource


@dataclass
class BuildContext:
    """
    Shared pipeline context.
    This object is passed between orchestration layers.
    """

    config: Any
    logger: Any

    sources: List[DataSource] = field(default_factory=list)
    hierarchy: HierarchyConfig = field(default_factory=HierarchyConfig)
    patterns: Sequence[str] = DEFAULT_PATTERNS

    stats: Dict[str, Any] = field(default_factory=dict)
    errors: list = field(default_factory=list)

    @classmethod
    def from_config(cls, config: Any, logger: Any, **kwargs: Any) -> "BuildContext":
        """Fill hierarchy rules and scan patterns from a loaded WFConfig."""
        kwargs.setdefault("hierarchy", HierarchyConfig.from_mapping(config.hierarchy))
        kwargs.setdefault(
            "patterns", tuple(config.sources.get("patterns") or DEFAULT_PATTERNS)
        )
        return cls(config=config, logger=logger, **kwargs)
