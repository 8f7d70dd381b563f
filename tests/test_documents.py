# tests/test_documents.py

from __future__ import annotations

from wof_folders.loader import DocumentShape, document_shape, expand_document, normalize_documents


def test_document_shape_dispatch() -> None:
    assert document_shape({"type": "FeatureCollection", "features": []}) is DocumentShape.FEATURE_COLLECTION
    assert document_shape({"type": "Feature", "properties": {}}) is DocumentShape.FEATURE
    assert document_shape({"properties": {}}) is DocumentShape.PROPERTIES
    assert document_shape({"wof:id": 1}) is DocumentShape.BARE
    assert document_shape([1, 2]) is DocumentShape.INVALID
    assert document_shape(None) is DocumentShape.INVALID


def test_feature_collection_fans_out_per_feature() -> None:
    features = [
        {"type": "Feature", "properties": {"id": 1, "name": "A"}},
        {"type": "Feature", "properties": {"id": 2, "name": "B"}},
    ]
    doc = {"type": "FeatureCollection", "features": features}
    assert list(expand_document(doc)) == features


def test_feature_collection_without_feature_list_yields_nothing() -> None:
    assert list(expand_document({"type": "FeatureCollection", "features": None})) == []


def test_single_record_shapes_yield_themselves() -> None:
    feature = {"type": "Feature", "properties": {"id": 1}}
    assert list(expand_document(feature)) == [feature]
    assert list(expand_document("junk")) == ["junk"]


def test_normalize_documents_counts_dropped_candidates() -> None:
    docs = [
        {
            "type": "FeatureCollection",
            "features": [
                {"type": "Feature", "properties": {"wof:id": 1, "wof:placetype": "country", "wof:name": "A"}},
                {"type": "Feature", "properties": {"wof:id": 2, "wof:placetype": "venue", "wof:name": "B"}},
                "not a feature",
            ],
        },
        {"wof_id": 3, "placetype": "region", "name": "C", "parent_id": 1},
        ["junk"],
    ]
    records, dropped = normalize_documents(docs, {"country", "region"})

    assert [r.id for r in records] == ["1", "3"]
    assert dropped == 3


def test_normalize_documents_without_allow_set_is_permissive() -> None:
    docs = [{"wof:id": 2, "wof:placetype": "venue", "wof:name": "B"}]
    records, dropped = normalize_documents(docs)
    assert [r.placetype for r in records] == ["venue"]
    assert dropped == 0
