# src/wof_folders/loader/documents.py

"""
Document shape dispatch at the ingestion boundary.

WOF data arrives in several shapes:

    FEATURE_COLLECTION  {"type": "FeatureCollection", "features": [...]}
    FEATURE             {"type": "Feature", "properties": {...}}
    PROPERTIES          {"properties": {...}}  (no GeoJSON type)
    BARE                {"wof:id": ..., "wof:name": ...}
    INVALID             anything that is not a JSON object

``expand_document`` flattens a document into one candidate per place record,
so the normalizer only ever sees single-record documents.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Tuple

from wof_folders.hierarchy.normalizer import CanonicalRecord, normalize


class DocumentShape(str, Enum):
    FEATURE_COLLECTION = "FeatureCollection"
    FEATURE = "Feature"
    PROPERTIES = "properties"
    BARE = "bare"
    INVALID = "invalid"


def document_shape(document: Any) -> DocumentShape:
    if not isinstance(document, Mapping):
        return DocumentShape.INVALID

    doc_type = document.get("type")
    if doc_type == "FeatureCollection":
        return DocumentShape.FEATURE_COLLECTION
    if doc_type == "Feature":
        return DocumentShape.FEATURE
    if "properties" in document:
        return DocumentShape.PROPERTIES
    return DocumentShape.BARE


def expand_document(document: Any) -> Iterator[Any]:
    """
    Yield one single-record document per place in ``document``.

    FeatureCollections yield each of their features; every other shape
    (INVALID included, which the normalizer then drops) yields itself.
    """
    shape = document_shape(document)

    if shape is DocumentShape.FEATURE_COLLECTION:
        features = document.get("features")
        if isinstance(features, list):
            yield from features
        return

    yield document


def normalize_documents(
    documents: Iterable[Any],
    allowed_placetypes: Optional[Iterable[str]] = None,
) -> Tuple[List[CanonicalRecord], int]:
    """
    Expand and normalize a batch of parsed documents.

    Returns:
        (records, dropped): records in input order, and the number of
        candidates that did not normalize into a record.
    """
    allowed = frozenset(allowed_placetypes) if allowed_placetypes is not None else None
    records: List[CanonicalRecord] = []
    dropped = 0

    for document in documents:
        for candidate in expand_document(document):
            record = normalize(candidate, allowed)
            if record is None:
                dropped += 1
            else:
                records.append(record)

    return records, dropped
