# src/wof_folders/hierarchy/normalizer.py

"""
Record normalization.

Turns one parsed WOF document (a Feature, a properties-wrapped object or a bare
properties object) into a CanonicalRecord:

    {id, parent_id, placetype, name}

Raw WOF sources are inconsistent: ids arrive as ints, floats or strings, keys
are namespaced (``wof:id``) or not (``wof_id``, ``id``), and names may only be
present as language variants. Documents without an id or a name carry no
usable information and normalize to ``None``.

FeatureCollections are fanned out by the caller
(see ``wof_folders.loader.documents.expand_document``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Tuple

NO_PARENT = ""

ID_KEYS: Tuple[str, ...] = ("wof:id", "wof_id", "id")
PARENT_KEYS: Tuple[str, ...] = ("wof:parent_id", "wof_parent", "parent_id", "parent")
PLACETYPE_KEYS: Tuple[str, ...] = ("wof:placetype", "placetype")
NAME_KEYS: Tuple[str, ...] = (
    "name",
    # English language variants
    "name:en",
    "name:eng_x_preferred",
    "name:eng_x_variant",
    # alternate labels
    "wof:name",
    "geom_name",
    "label",
)

_MISSING = object()
_INTEGER_ID = re.compile(r"-?[0-9]+")


@dataclass(frozen=True)
class CanonicalRecord:
    """
    A normalized WOF place record.

    Attributes:
        id: Stringified WOF id, stable as a map key.
        parent_id: Stringified parent id, or NO_PARENT.
        placetype: Lower-cased placetype (country, region, locality, ...).
        name: Non-empty display name.
    """

    id: str
    parent_id: str
    placetype: str
    name: str

    @property
    def has_parent(self) -> bool:
        return self.parent_id != NO_PARENT


# ---------------------------------------------------------------------------
# Value helpers
# ---------------------------------------------------------------------------

def canonical_id(value: Any) -> str:
    """
    Stringify an id-like value so numeric and string sources key identically.

        85632491        -> "85632491"
        85632491.0      -> "85632491"
        " 85632491 "    -> "85632491"
        "85632491.0"    -> "85632491"
        "085632491"     -> "85632491"
        None / "" / []  -> ""
    """
    if value is None or isinstance(value, bool):
        return ""

    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return ""
        return str(int(value)) if value.is_integer() else str(value)

    if isinstance(value, int):
        return str(value)

    if isinstance(value, str):
        text = value.strip()
        if text.endswith(".0") and _INTEGER_ID.fullmatch(text[:-2]):
            text = text[:-2]
        if _INTEGER_ID.fullmatch(text):
            return str(int(text))
        return text

    return ""


def _canonical_parent(value: Any) -> str:
    # WOF uses 0 and negative ids (-1 unknown, -2 disputed, ...) as placeholders
    parent = canonical_id(value)
    if not parent:
        return NO_PARENT
    if parent.lstrip("-").isdigit() and int(parent) <= 0:
        return NO_PARENT
    return parent


def first_present(props: Mapping[str, Any], keys: Iterable[str]) -> Any:
    """
    Return the value of the first key present in ``props``.

    Presence is what counts: a key holding ``None`` or ``0`` still wins over
    later aliases. Returns ``None`` when no key is present.
    """
    for key in keys:
        value = props.get(key, _MISSING)
        if value is not _MISSING:
            return value
    return None


def _text(value: Any) -> str:
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, (list, tuple)):
        for item in value:
            text = _text(item)
            if text:
                return text
        return ""
    if isinstance(value, (str, int, float)):
        return str(value).strip()
    return ""


def pick_name(props: Mapping[str, Any]) -> str:
    """Return the first non-empty name across NAME_KEYS, or ''."""
    for key in NAME_KEYS:
        text = _text(props.get(key))
        if text:
            return text
    return ""


def properties_of(document: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
    """
    Select the properties object of a single-record document.

    - Feature           -> document["properties"]
    - {"properties": …} -> document["properties"]
    - anything else     -> the document itself
    - FeatureCollection -> None (fan-out belongs to the caller)
    """
    doc_type = document.get("type")
    if doc_type == "FeatureCollection":
        return None

    if doc_type == "Feature" or "properties" in document:
        props = document.get("properties")
        return props if isinstance(props, Mapping) else None

    return document


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def normalize(
    document: Any,
    allowed_placetypes: Optional[Iterable[str]] = None,
) -> Optional[CanonicalRecord]:
    """
    Normalize one parsed document into a CanonicalRecord.

    Args:
        document: A parsed JSON value.
        allowed_placetypes: Optional allow-set; records whose placetype is not
            a member are rejected.

    Returns:
        CanonicalRecord, or None when the document is not a usable place record.
    """
    if not isinstance(document, Mapping):
        return None

    props = properties_of(document)
    if props is None:
        return None

    record_id = canonical_id(first_present(props, ID_KEYS))
    if not record_id:
        return None

    name = pick_name(props)
    if not name:
        return None

    placetype = _text(first_present(props, PLACETYPE_KEYS)).lower()
    if allowed_placetypes is not None and placetype not in set(allowed_placetypes):
        return None

    return CanonicalRecord(
        id=record_id,
        parent_id=_canonical_parent(first_present(props, PARENT_KEYS)),
        placetype=placetype,
        name=name,
    )
