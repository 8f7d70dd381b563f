# src/wof_folders/hierarchy/rules.py

"""
Placetype rules for hierarchy construction.

A HierarchyConfig carries the three knobs the builder consumes:

    placetypes       allow-set of retained placetypes (None = permissive)
    transitions      parent placetype -> placetypes allowed beneath it
                     (None = no filtering, roots are parentless nodes)
    root_placetype   placetype of walk roots when transitions are in use
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional

from wof_folders.core.exceptions import ConfigurationError

DEFAULT_ROOT_PLACETYPE = "country"

DEFAULT_PLACETYPES: FrozenSet[str] = frozenset(
    {"country", "region", "county", "locality", "neighbourhood", "microhood"}
)

DEFAULT_TRANSITIONS: Dict[str, FrozenSet[str]] = {
    "country": frozenset({"region"}),
    "region": frozenset({"county", "locality"}),
    "county": frozenset({"locality"}),
    "locality": frozenset({"neighbourhood"}),
    "neighbourhood": frozenset({"microhood"}),
}


def _placetype_set(values: Iterable[Any]) -> FrozenSet[str]:
    return frozenset(str(v).strip().lower() for v in values if str(v).strip())


@dataclass
class HierarchyConfig:
    placetypes: Optional[FrozenSet[str]] = DEFAULT_PLACETYPES
    transitions: Optional[Dict[str, FrozenSet[str]]] = field(
        default_factory=lambda: dict(DEFAULT_TRANSITIONS)
    )
    root_placetype: str = DEFAULT_ROOT_PLACETYPE
    strict_duplicates: bool = False

    @property
    def uses_transitions(self) -> bool:
        return self.transitions is not None

    def allows(self, parent_type: str, child_type: str) -> bool:
        """True when ``child_type`` may sit directly beneath ``parent_type``."""
        if self.transitions is None:
            return True
        return child_type in self.transitions.get(parent_type, frozenset())

    def accepts(self, placetype: str) -> bool:
        return self.placetypes is None or placetype in self.placetypes

    def validate(self) -> None:
        """
        Reject configurations that would silently produce an empty tree.

        Raises:
            ConfigurationError
        """
        if self.placetypes is not None and not self.placetypes:
            raise ConfigurationError("Placetype allow-set is empty")

        if self.transitions is None:
            return

        if not self.root_placetype:
            raise ConfigurationError(
                "A transition table requires a root placetype"
            )

        if not self.transitions.get(self.root_placetype):
            raise ConfigurationError(
                f"Transition table has no entry for root placetype "
                f"{self.root_placetype!r}"
            )

        if self.placetypes is not None and self.root_placetype not in self.placetypes:
            raise ConfigurationError(
                f"Root placetype {self.root_placetype!r} is not in the "
                f"placetype allow-set"
            )

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "HierarchyConfig":
        """
        Build a config from the ``hierarchy:`` section of wof_folders.yml.

        Keys left out fall back to the defaults; keys set to null switch the
        corresponding rule off.
        """
        data = data or {}

        placetypes: Optional[FrozenSet[str]] = DEFAULT_PLACETYPES
        if "placetypes" in data:
            raw = data["placetypes"]
            placetypes = None if raw is None else _placetype_set(raw)

        transitions: Optional[Dict[str, FrozenSet[str]]] = dict(DEFAULT_TRANSITIONS)
        if "transitions" in data:
            raw = data["transitions"]
            transitions = (
                None
                if raw is None
                else {
                    str(parent).strip().lower(): _placetype_set(children or [])
                    for parent, children in raw.items()
                }
            )

        root = data.get("root_placetype", DEFAULT_ROOT_PLACETYPE)

        return cls(
            placetypes=placetypes,
            transitions=transitions,
            root_placetype=str(root or "").strip().lower(),
            strict_duplicates=bool(data.get("strict_duplicates", False)),
        )
