# tests/test_file_scanner.py

from __future__ import annotations

import pytest

from wof_folders.loader import iter_source_files, load_documents, read_document
from wof_folders.utils import mock_file_path


def test_mock_directory_exists() -> None:
    path = mock_file_path("wof", "barbados")
    assert path.is_dir(), f"Expected WOF fixtures at: {path}"


def test_iter_source_files_is_sorted_and_recursive() -> None:
    root = mock_file_path("wof", "admin")
    files = list(iter_source_files(root))

    assert files == sorted(files)
    assert [f.name for f in files] == [
        "1.geojson",
        "2.geojson",
        "3.geojson",
        "9.geojson",
        "package.json",
    ]


def test_iter_source_files_respects_patterns() -> None:
    files = list(iter_source_files(mock_file_path("wof", "barbados"), ["*.geojson"]))
    assert files
    assert all(f.suffix == ".geojson" for f in files)


def test_iter_source_files_accepts_single_file() -> None:
    path = mock_file_path("wof", "barbados", "85632491.geojson")
    assert list(iter_source_files(path)) == [path]


def test_missing_root_raises() -> None:
    with pytest.raises(FileNotFoundError):
        list(iter_source_files(mock_file_path("wof", "does-not-exist")))


def test_read_document_returns_none_for_malformed_json() -> None:
    assert read_document(mock_file_path("wof", "barbados", "broken.json")) is None


def test_read_document_parses_feature() -> None:
    doc = read_document(mock_file_path("wof", "barbados", "85632491.geojson"))
    assert doc["type"] == "Feature"
    assert doc["properties"]["wof:name"] == "Barbados"


def test_load_documents_skips_unreadable_files() -> None:
    scan = load_documents(mock_file_path("wof", "barbados"))

    assert scan.files == 12
    assert scan.unreadable == 1
    assert len(scan.documents) == 11
