# tests/test_sources.py

from __future__ import annotations

import pytest

from wof_folders.loader import admin_country_code, discover_sources
from wof_folders.utils import mock_file_path


def test_admin_country_code() -> None:
    assert admin_country_code("whosonfirst-data-admin-bb") == "BB"
    assert admin_country_code("whosonfirst-data-admin-us-latest") == "US"
    assert admin_country_code("barbados") is None
    assert admin_country_code("whosonfirst-data-admin-") is None


def test_admin_parent_directory_yields_one_source_per_repo() -> None:
    sources = discover_sources([mock_file_path("wof", "admin")])

    assert [s.name for s in sources] == [
        "whosonfirst-data-admin-tl",
        "whosonfirst-data-admin-zz",
    ]
    assert [s.country for s in sources] == ["TL", "ZZ"]


def test_country_filter_is_case_insensitive() -> None:
    sources = discover_sources([mock_file_path("wof", "admin")], countries=["tl"])
    assert [s.country for s in sources] == ["TL"]


def test_admin_repo_path_itself_is_filtered() -> None:
    repo = mock_file_path("wof", "admin", "whosonfirst-data-admin-zz")
    assert discover_sources([repo], countries=["TL"]) == []
    assert [s.name for s in discover_sources([repo])] == ["whosonfirst-data-admin-zz"]


def test_plain_directory_is_single_source() -> None:
    sources = discover_sources([mock_file_path("wof", "barbados")])
    assert len(sources) == 1
    assert sources[0].name == "barbados"
    assert sources[0].country is None


def test_missing_path_raises() -> None:
    with pytest.raises(FileNotFoundError):
        discover_sources([mock_file_path("wof", "nowhere")])
